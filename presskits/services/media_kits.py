"""Media kit lifecycle operations.

Every find-and-transition runs inside one ``atomic()`` block. The owning
organization row is locked first (``_hold_org_lock``) so concurrent
transitions for one organization serialize on the database; the kit rows are
then re-read under lock before their status is checked.

Background work (generation trigger, ready email) is enqueued only after the
transaction commits and never affects the returned result.
"""
from flask import current_app

from ..extensions import db, rq, atomic
from ..models import Organization, MediaKit, MediaKitInstruction
from ..models.base import utcnow
from ..jobs.generation import trigger_generation
from ..jobs.notify import notify_ready
from . import lifecycle
from .errors import NotFoundError, InvalidTransitionError, ValidationError


def _hold_org_lock(org):
    """Take the organization's write lock for the rest of the transaction.

    A no-op UPDATE locks the row on PostgreSQL and takes the database write
    lock on SQLite, where ``FOR UPDATE`` is ignored.
    """
    db.session.execute(
        db.update(Organization)
        .where(Organization.id == org.id)
        .values(updated_at=Organization.updated_at)
        .execution_options(synchronize_session=False)
    )
    return org


def _org_by_ref(org_ref, lock=False):
    """Organization by external id, or by internal id during the id migration."""
    org = Organization.query.filter(
        db.or_(Organization.external_org_id == org_ref, Organization.id == org_ref)
    ).first()
    if lock and org is not None:
        _hold_org_lock(org)
    return org


def _owning_org(kit, lock=False):
    q = Organization.query
    if kit.organization_id:
        q = q.filter(Organization.id == kit.organization_id)
    elif kit.external_org_id:
        q = q.filter(Organization.external_org_id == kit.external_org_id)
    else:
        return None
    org = q.first()
    if lock and org is not None:
        _hold_org_lock(org)
    return org


def _scope(kit, org=None):
    """Filter clause for every kit of the same organization as ``kit``."""
    if org is not None:
        return MediaKit.for_org(org)
    return MediaKit.for_org(organization_id=kit.organization_id, external_org_id=kit.external_org_id)


def _org_ref(kit, org=None):
    if kit.external_org_id:
        return kit.external_org_id
    return org.external_org_id if org is not None else None


def _load_kit(media_kit_id):
    kit = db.session.get(MediaKit, media_kit_id)
    if kit is None:
        raise NotFoundError("Media kit not found")
    return kit


def _locked_kit(media_kit_id):
    """Lock the owning organization, then return the kit re-read under lock."""
    kit = _load_kit(media_kit_id)
    org = _owning_org(kit, lock=True)
    kit = db.session.get(MediaKit, media_kit_id, with_for_update=True, populate_existing=True)
    if kit is None:
        raise NotFoundError("Media kit not found")
    return kit, org


def _siblings(kit, org, status):
    return (
        MediaKit.query
        .filter(_scope(kit, org), MediaKit.status == status, MediaKit.id != kit.id)
        .with_for_update()
        .all()
    )


def _set_status(kit, status, denial_reason=None):
    kit.status = status
    kit.denial_reason = denial_reason
    kit.updated_at = utcnow()


def get_media_kit(media_kit_id):
    return _load_kit(media_kit_id)


def list_media_kits(external_org_id=None, organization_id=None, title=None):
    """Active kits of one organization, validated first, then drafted, then generating."""
    if not external_org_id and not organization_id:
        raise ValidationError("org_id or organization_id required")

    q = MediaKit.query.filter(MediaKit.status.in_(lifecycle.ACTIVE_STATUSES))
    if external_org_id:
        q = q.filter(MediaKit.external_org_id == external_org_id)
    if organization_id:
        q = q.filter(MediaKit.organization_id == organization_id)
    if title:
        q = q.filter(MediaKit.title.ilike(f"%{title}%"))
    priority = db.case(lifecycle.STATUS_PRIORITY, value=MediaKit.status)
    return q.order_by(priority, MediaKit.updated_at.desc()).all()


def latest_media_kit_for_org(org_ref):
    org = _org_by_ref(org_ref)
    scope = MediaKit.for_org(org) if org is not None else MediaKit.for_org(external_org_id=org_ref)
    return MediaKit.query.filter(scope).order_by(MediaKit.updated_at.desc()).first()


def update_mdx(media_kit_id, mdx_content):
    with atomic():
        kit = db.session.get(MediaKit, media_kit_id, with_for_update=True)
        if kit is None:
            raise NotFoundError("Media kit not found")
        kit.mdx_page_content = mdx_content
        kit.updated_at = utcnow()
    return kit


def set_status(media_kit_id, status, denial_reason=None):
    """Administrative status override.

    Bypasses the validate/archive swap and copy-on-edit, so it can break the
    one-kit-per-status invariant if misused.
    """
    lifecycle.ensure_transition_allowed(status, denial_reason)
    with atomic():
        kit = db.session.get(MediaKit, media_kit_id, with_for_update=True)
        if kit is None:
            raise NotFoundError("Media kit not found")
        previous = kit.status
        _set_status(kit, status, lifecycle.denial_reason_for(status, denial_reason))
    current_app.logger.info('Media kit %s status set %s -> %s', kit.id, previous, status)
    return kit


def deny_media_kit(media_kit_id, reason):
    if not (reason or "").strip():
        raise ValidationError("reason is required to deny a media kit")
    return set_status(media_kit_id, lifecycle.DENIED, reason)


def edit_media_kit(media_kit_id, instruction, organization_url=None):
    """Start or extend an edit cycle and return the generating kit.

    Drafted and validated kits are copied into a new ``generating`` revision
    whose parent is the source; a kit that is already generating is reused.
    """
    if not (instruction or "").strip():
        raise ValidationError("instruction is required")

    with atomic():
        kit, org = _locked_kit(media_kit_id)
        action = lifecycle.edit_action(kit.status)
        instruction_type = lifecycle.instruction_type_for(kit.status)

        if action == lifecycle.EDIT_COPY:
            in_flight = _siblings(kit, org, lifecycle.GENERATING)
            if in_flight:
                raise InvalidTransitionError(
                    f"Media kit {in_flight[0].id} is already generating for this organization",
                    status=lifecycle.GENERATING,
                )
            generating = MediaKit(
                organization_id=kit.organization_id,
                external_org_id=kit.external_org_id,
                parent_media_kit_id=kit.id,
                status=lifecycle.GENERATING,
                **kit.content_copy(),
            )
            db.session.add(generating)
            db.session.flush()
        else:
            generating = kit
            generating.updated_at = utcnow()

        db.session.add(MediaKitInstruction(
            media_kit_id=generating.id,
            instruction=instruction,
            instruction_type=instruction_type,
        ))

    current_app.logger.info('Edit on media kit %s: generating kit %s (%s instruction)',
                            media_kit_id, generating.id, instruction_type)

    org_ref = _org_ref(generating, org)
    if org_ref:
        rq.enqueue(trigger_generation, generating.id, org_ref, organization_url)
    else:
        current_app.logger.warning('Media kit %s has no organization reference, generation not triggered', generating.id)
    return generating


def validate_media_kit(media_kit_id):
    """Promote a drafted kit to validated and archive the one it replaces, atomically."""
    with atomic():
        kit, org = _locked_kit(media_kit_id)
        lifecycle.ensure_can_validate(kit.status)
        archived = _siblings(kit, org, lifecycle.VALIDATED)
        for previous in archived:
            _set_status(previous, lifecycle.ARCHIVED)
        _set_status(kit, lifecycle.VALIDATED)

    current_app.logger.info('Validated media kit %s, archived %s', kit.id, [k.id for k in archived] or None)

    org_ref = _org_ref(kit, org)
    if org_ref:
        rq.enqueue(notify_ready, org_ref, kit.title)
    return kit


def cancel_draft_media_kit(media_kit_id):
    """Roll an edit cycle back to its parent.

    The parent is restored to ``drafted`` and the cancelled kit is archived.
    Any other drafted kit of the organization is archived as well, so the
    restored parent is its only draft.
    Returns the restored parent, or None when the kit has no parent (nothing
    changes then).
    """
    with atomic():
        kit, org = _locked_kit(media_kit_id)
        lifecycle.ensure_can_cancel(kit.status)
        if not kit.parent_media_kit_id:
            return None
        parent = db.session.get(MediaKit, kit.parent_media_kit_id, with_for_update=True, populate_existing=True)
        if parent is None:
            raise NotFoundError("Parent media kit not found")
        for draft in _siblings(parent, org, lifecycle.DRAFTED):
            _set_status(draft, lifecycle.ARCHIVED)
        _set_status(parent, lifecycle.DRAFTED)
        _set_status(kit, lifecycle.ARCHIVED)

    current_app.logger.info('Cancelled media kit %s, restored parent %s', kit.id, parent.id)
    return parent


def upsert_generation_result(org_ref, mdx_content, title=None, icon_url=None):
    """Store generated content on the organization's generating kit and mark it drafted.

    Never creates a kit: with no generating kit the call is a not-found. Any
    other drafted kit of the organization is superseded and archived.
    """
    with atomic():
        org = _org_by_ref(org_ref, lock=True)
        scope = MediaKit.for_org(org) if org is not None else MediaKit.for_org(external_org_id=org_ref)
        kit = (
            MediaKit.query
            .filter(scope, MediaKit.status == lifecycle.GENERATING)
            .order_by(MediaKit.updated_at.desc())
            .with_for_update()
            .first()
        )
        if kit is None:
            raise NotFoundError("No generating kit found for org")

        superseded = _siblings(kit, org, lifecycle.DRAFTED)
        for draft in superseded:
            _set_status(draft, lifecycle.ARCHIVED)

        kit.mdx_page_content = mdx_content
        if title is not None:
            kit.title = title
        if icon_url is not None:
            kit.icon_url = icon_url
        _set_status(kit, lifecycle.DRAFTED)

    current_app.logger.info('Generation result stored on media kit %s for org %s', kit.id, org_ref)
    return kit


def generation_data(org_ref):
    """Inputs for the generation workflow: current kit, instruction log, denial feedback."""
    org = _org_by_ref(org_ref)
    scope = MediaKit.for_org(org) if org is not None else MediaKit.for_org(external_org_id=org_ref)

    current_kit = MediaKit.query.filter(scope, MediaKit.status == lifecycle.GENERATING).first()
    instructions = (
        MediaKitInstruction.query
        .join(MediaKit, MediaKitInstruction.media_kit_id == MediaKit.id)
        .filter(scope)
        .order_by(MediaKitInstruction.created_at)
        .all()
    )
    feedbacks = (
        MediaKit.query
        .filter(scope, MediaKit.denial_reason.isnot(None))
        .order_by(MediaKit.updated_at)
        .all()
    )
    return {
        "currentKit": current_kit.to_dict() if current_kit else None,
        "instructions": [i.to_dict() for i in instructions],
        "feedbacks": [{"id": k.id, "denialReason": k.denial_reason} for k in feedbacks],
    }
