from flask import jsonify, request
from . import bp
from ...services import organizations
from ...utils.decorators import api_key_required


@bp.get("/admin/organizations")
@api_key_required
def list_organizations():
    return jsonify({"organizations": organizations.list_organizations(request.args.get("search"))})


@bp.delete("/admin/organizations/<organization_id>")
@api_key_required
def delete_organization(organization_id):
    organizations.delete_organization(organization_id, request.args.get("confirmName"))
    return jsonify({"success": True})
