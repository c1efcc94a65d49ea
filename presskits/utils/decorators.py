import hmac
from functools import wraps
from flask import abort, current_app, request

def api_key_required(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        expected = current_app.config.get("PRESS_KITS_SERVICE_API_KEY")
        key = request.headers.get("X-API-Key")
        if not expected or not key or not hmac.compare_digest(key, expected):
            abort(401)
        return view(*args, **kwargs)
    return wrapped
