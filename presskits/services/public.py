"""Unauthenticated read path: the kit an organization shares publicly."""
from ..extensions import db
from ..models import Organization, MediaKit
from . import lifecycle
from .errors import NotFoundError


def latest_published_kit(org):
    """Latest validated kit, falling back to the latest drafted one."""
    for status in lifecycle.PUBLISHABLE_STATUSES:
        kit = (
            MediaKit.query
            .filter(MediaKit.for_org(org), MediaKit.status == status)
            .order_by(MediaKit.updated_at.desc())
            .first()
        )
        if kit is not None:
            return kit
    return None


def public_media_kit(token, allow_legacy_id=False):
    org = Organization.query.filter_by(share_token=token).first()
    if org is None and allow_legacy_id:
        # older links were built from the organization id
        org = db.session.get(Organization, token)
    if org is None:
        raise NotFoundError("Organization not found")

    kit = latest_published_kit(org)
    return {
        "organization": {
            "id": org.id,
            "name": org.name,
            "orgId": org.external_org_id,
        },
        "mediaKit": kit.to_dict() if kit else None,
    }


def press_kit_email_data(external_org_id):
    """Template variables for press kit emails; all None when the organization is unknown."""
    org = Organization.query.filter_by(external_org_id=external_org_id).first()
    if org is None:
        return {
            "companyName": None,
            "status": None,
            "title": None,
            "pressKitUrl": None,
            "content": None,
            "contentType": None,
        }

    kit = (
        MediaKit.query
        .filter(MediaKit.for_org(org), MediaKit.status.in_(lifecycle.PUBLISHABLE_STATUSES))
        .order_by(MediaKit.updated_at.desc())
        .first()
    )
    content = content_type = None
    if kit is not None:
        if kit.mdx_page_content:
            content, content_type = kit.mdx_page_content, "mdx"
        elif kit.jsx_page_content:
            content, content_type = kit.jsx_page_content, "jsx"
    return {
        "companyName": org.name,
        "status": kit.status if kit else None,
        "title": kit.title if kit else None,
        "pressKitUrl": f"/public/{org.share_token}" if org.share_token else None,
        "content": content,
        "contentType": content_type,
    }
