from flask import jsonify, request
from . import bp
from .forms import UpsertGenerationResultForm
from ...services import media_kits, fleet
from ...services.errors import ValidationError
from ...utils.decorators import api_key_required
from ...utils.forms import json_formdata, validated


@bp.get("/internal/media-kit/by-org/<org_id>")
@api_key_required
def latest_by_org(org_id):
    kit = media_kits.latest_media_kit_for_org(org_id)
    return jsonify(kit.to_dict() if kit else None)


@bp.get("/internal/generation-data")
@api_key_required
def generation_data():
    org_id = request.args.get("orgId")
    if not org_id:
        raise ValidationError("orgId query parameter required")
    return jsonify(media_kits.generation_data(org_id))


@bp.post("/internal/upsert-generation-result")
@api_key_required
def upsert_generation_result():
    form = validated(UpsertGenerationResultForm(formdata=json_formdata()))
    kit = media_kits.upsert_generation_result(
        form.org_id.data,
        form.mdx_content.data,
        title=form.title.data or None,
        icon_url=form.icon_url.data or None,
    )
    return jsonify(kit.to_dict())


@bp.get("/clients-media-kits-need-update")
@api_key_required
def stale_organizations():
    return jsonify({"organizations": fleet.find_stale_organizations()})


@bp.get("/media-kit-setup")
@api_key_required
def setup_status():
    return jsonify({"organizations": fleet.compute_setup_status()})


@bp.get("/health/bulk")
@api_key_required
def bulk_health():
    return jsonify({"organizations": fleet.compute_bulk_health()})
