from flask import jsonify, request
from . import bp
from .forms import MediaKitIdForm, UpdateMdxForm, UpdateStatusForm, DenyMediaKitForm, EditMediaKitForm
from ...services import media_kits
from ...utils.decorators import api_key_required
from ...utils.forms import json_formdata, validated


@bp.get("/media-kit")
@api_key_required
def list_media_kits():
    kits = media_kits.list_media_kits(
        external_org_id=request.args.get("org_id"),
        organization_id=request.args.get("organization_id"),
        title=request.args.get("title"),
    )
    return jsonify({"mediaKits": [k.to_dict() for k in kits]})


@bp.get("/media-kit/<media_kit_id>")
@api_key_required
def get_media_kit(media_kit_id):
    return jsonify(media_kits.get_media_kit(media_kit_id).to_dict())


@bp.post("/update-mdx")
@api_key_required
def update_mdx():
    form = validated(UpdateMdxForm(formdata=json_formdata()))
    kit = media_kits.update_mdx(form.media_kit_id.data, form.mdx_content.data or "")
    return jsonify(kit.to_dict())


@bp.post("/update-status")
@api_key_required
def update_status():
    form = validated(UpdateStatusForm(formdata=json_formdata()))
    kit = media_kits.set_status(form.media_kit_id.data, form.status.data, form.denial_reason.data)
    return jsonify(kit.to_dict())


@bp.post("/deny")
@api_key_required
def deny():
    form = validated(DenyMediaKitForm(formdata=json_formdata()))
    kit = media_kits.deny_media_kit(form.media_kit_id.data, form.denial_reason.data)
    return jsonify(kit.to_dict())


@bp.post("/edit-media-kit")
@api_key_required
def edit_media_kit():
    form = validated(EditMediaKitForm(formdata=json_formdata()))
    kit = media_kits.edit_media_kit(
        form.media_kit_id.data,
        form.instruction.data,
        organization_url=form.organization_url.data or None,
    )
    return jsonify(kit.to_dict())


@bp.post("/validate")
@api_key_required
def validate():
    form = validated(MediaKitIdForm(formdata=json_formdata()))
    kit = media_kits.validate_media_kit(form.media_kit_id.data)
    return jsonify(kit.to_dict())


@bp.post("/cancel-draft")
@api_key_required
def cancel_draft():
    form = validated(MediaKitIdForm(formdata=json_formdata()))
    parent = media_kits.cancel_draft_media_kit(form.media_kit_id.data)
    return jsonify({"success": True, "result": parent.to_dict() if parent else None})
