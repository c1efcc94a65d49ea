from flask import has_app_context


def run_in_app_context(func, *args, **kwargs):
    """Run a job body inside a Flask app context.

    Inline (synchronous) execution already has the request's context; an RQ
    worker started without one gets a fresh app.
    """
    if has_app_context():
        return func(*args, **kwargs)
    from presskits import create_app
    app = create_app()
    with app.app_context():
        return func(*args, **kwargs)
