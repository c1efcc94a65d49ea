from flask import current_app, jsonify
from . import bp


@bp.get("/health")
def health():
    return jsonify({"status": "ok", "service": current_app.config["APP_ID"]})
