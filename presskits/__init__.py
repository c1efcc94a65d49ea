import logging

from flask import Flask, jsonify
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException

from .extensions import db, rq
from .services.errors import PressKitError

migrate = Migrate()


def create_app(test_config=None):
    """App factory. ``test_config`` (a dict) overrides values from ``config.Config``."""
    app = Flask(__name__)
    app.config.from_object('config.Config')
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO))

    db.init_app(app)
    migrate.init_app(app, db, directory='alembic')
    rq.init_app(app)

    from . import models  # noqa: F401

    from .blueprints.health import bp as health_bp
    from .blueprints.public import bp as public_bp
    from .blueprints.organizations import bp as organizations_bp
    from .blueprints.media_kits import bp as media_kits_bp
    from .blueprints.internal import bp as internal_bp
    from .blueprints.admin import bp as admin_bp
    for bp in (health_bp, public_bp, organizations_bp, media_kits_bp, internal_bp, admin_bp):
        app.register_blueprint(bp)

    register_error_handlers(app)

    from .cli import register_commands
    register_commands(app)

    return app


def register_error_handlers(app):
    @app.errorhandler(PressKitError)
    def handle_press_kit_error(e):
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        error = "Unauthorized" if e.code == 401 else e.description
        return jsonify({"error": error}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        app.logger.exception('Unhandled error')
        db.session.rollback()
        return jsonify({"error": "Internal server error"}), 500
