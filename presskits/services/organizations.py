from flask import current_app

from ..extensions import db, atomic
from ..models import Organization, MediaKit
from ..models.base import utcnow
from .errors import NotFoundError, ValidationError


def get_by_external_id(external_org_id):
    return Organization.query.filter_by(external_org_id=external_org_id).first()


def upsert_organization(external_org_id, name=None):
    """Create the organization on first sight, otherwise refresh its name.

    The share token is assigned on insert only.
    """
    with atomic():
        org = Organization.query.filter_by(external_org_id=external_org_id).with_for_update().first()
        if org is None:
            org = Organization(external_org_id=external_org_id, name=name)
            db.session.add(org)
            current_app.logger.info('Created organization for %s', external_org_id)
        else:
            if name is not None:
                org.name = name
            org.updated_at = utcnow()
    return org


def share_token_for(external_org_id):
    org = get_by_external_id(external_org_id)
    if org is None:
        raise NotFoundError("Organization not found")
    return org.share_token


def organizations_exist(external_org_ids):
    found = {
        row.external_org_id
        for row in Organization.query.filter(Organization.external_org_id.in_(external_org_ids)).all()
    }
    return [{"orgId": i, "exists": i in found} for i in external_org_ids]


def list_organizations(search=None):
    """Organizations (optionally filtered by name) with their media kit counts."""
    kit_count = (
        db.select(db.func.count(MediaKit.id))
        .where(db.or_(
            MediaKit.organization_id == Organization.id,
            MediaKit.external_org_id == Organization.external_org_id,
        ))
        .correlate(Organization)
        .scalar_subquery()
    )
    q = db.session.query(Organization, kit_count.label("media_kit_count"))
    if search:
        q = q.filter(Organization.name.ilike(f"%{search}%"))
    out = []
    for org, count in q.order_by(Organization.created_at).all():
        d = org.to_dict()
        d["mediaKitCount"] = int(count or 0)
        out.append(d)
    return out


def delete_organization(organization_id, confirm_name):
    """Delete an organization and all of its kits; ``confirm_name`` must match its name."""
    if not confirm_name:
        raise ValidationError("confirmName query parameter is required")
    with atomic():
        org = db.session.get(Organization, organization_id, with_for_update=True)
        if org is None:
            raise NotFoundError("Organization not found")
        if org.name != confirm_name:
            raise ValidationError("confirmName does not match organization name")
        kits = MediaKit.query.filter(MediaKit.for_org(org)).all()
        for kit in kits:
            db.session.delete(kit)
        db.session.delete(org)
    current_app.logger.info('Deleted organization %s with %d media kits', organization_id, len(kits))
