from flask import jsonify, request
from . import bp
from .forms import UpsertOrganizationForm
from ...services import organizations
from ...services.errors import ValidationError
from ...utils.decorators import api_key_required
from ...utils.forms import json_formdata, validated


@bp.post("/organizations")
@api_key_required
def upsert_organization():
    form = validated(UpsertOrganizationForm(formdata=json_formdata()))
    org = organizations.upsert_organization(form.org_id.data, form.name.data or None)
    return jsonify(org.to_dict())


@bp.get("/organizations/share-token/<org_id>")
@api_key_required
def share_token(org_id):
    return jsonify({"shareToken": organizations.share_token_for(org_id)})


@bp.get("/organizations/exists")
@api_key_required
def organizations_exist():
    raw = request.args.get("orgIds")
    if not raw:
        raise ValidationError("orgIds query parameter is required")
    ids = [s.strip() for s in raw.split(",") if s.strip()]
    return jsonify({"organizations": organizations.organizations_exist(ids)})
