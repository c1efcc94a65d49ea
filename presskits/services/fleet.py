"""Read-only scans across every organization, for dashboards and alerting."""
from collections import defaultdict
from datetime import timedelta

from flask import current_app

from ..models import Organization, MediaKit
from ..models.base import utcnow, isoformat
from . import lifecycle


def _kits_by_org(kits, orgs):
    """Group kits under the organization that owns them through either id column."""
    by_internal = {o.id: o.id for o in orgs}
    by_external = {o.external_org_id: o.id for o in orgs}
    grouped = defaultdict(list)
    for kit in kits:
        owner = by_internal.get(kit.organization_id) or by_external.get(kit.external_org_id)
        if owner:
            grouped[owner].append(kit)
    return grouped


def find_stale_organizations(threshold=None, now=None):
    """Organizations whose validated or drafted kit has not been updated within ``threshold``.

    One entry per organization carrying the oldest qualifying timestamp,
    oldest first.
    """
    if threshold is None:
        threshold = timedelta(days=current_app.config.get("STALE_AFTER_DAYS", 30))
    cutoff = (now or utcnow()) - threshold

    orgs = Organization.query.all()
    kits = (
        MediaKit.query
        .filter(MediaKit.status.in_(lifecycle.PUBLISHABLE_STATUSES), MediaKit.updated_at < cutoff)
        .order_by(MediaKit.updated_at)
        .all()
    )
    org_by_id = {o.id: o for o in orgs}
    grouped = _kits_by_org(kits, orgs)

    rows = []
    for org_id, org_kits in grouped.items():
        oldest = min(org_kits, key=lambda k: k.updated_at)
        org = org_by_id[org_id]
        rows.append({
            "orgId": org.external_org_id,
            "name": org.name,
            "lastUpdated": oldest.updated_at,
        })
    rows.sort(key=lambda r: r["lastUpdated"])
    for r in rows:
        r["lastUpdated"] = isoformat(r["lastUpdated"])
    return rows


def compute_setup_status():
    """Per organization: the most recently updated active kit and whether it counts as set up."""
    orgs = Organization.query.order_by(Organization.created_at).all()
    kits = MediaKit.query.filter(MediaKit.status.in_(lifecycle.ACTIVE_STATUSES)).all()
    grouped = _kits_by_org(kits, orgs)

    out = []
    for org in orgs:
        org_kits = grouped.get(org.id) or []
        kit = max(org_kits, key=lambda k: k.updated_at) if org_kits else None
        status = kit.status if kit else None
        out.append({
            "orgId": org.external_org_id,
            "hasKit": kit is not None,
            "status": status,
            "isSetup": status in lifecycle.PUBLISHABLE_STATUSES,
        })
    return out


def compute_bulk_health():
    orgs = Organization.query.order_by(Organization.created_at).all()
    grouped = _kits_by_org(MediaKit.query.all(), orgs)

    out = []
    for org in orgs:
        org_kits = grouped.get(org.id) or []
        statuses = {k.status for k in org_kits}
        out.append({
            "orgId": org.external_org_id,
            "hasValidated": lifecycle.VALIDATED in statuses,
            "hasDrafted": lifecycle.DRAFTED in statuses,
            "totalKits": len(org_kits),
        })
    return out
