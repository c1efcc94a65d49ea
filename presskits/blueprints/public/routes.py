from flask import jsonify
from . import bp
from ...services.public import public_media_kit, press_kit_email_data


@bp.get("/public/<token>")
def public_kit(token):
    return jsonify(public_media_kit(token))


@bp.get("/public-media-kit/<token>")
def public_kit_legacy(token):
    return jsonify(public_media_kit(token, allow_legacy_id=True))


@bp.get("/email-data/press-kit/<org_id>")
def email_data(org_id):
    return jsonify(press_kit_email_data(org_id))
