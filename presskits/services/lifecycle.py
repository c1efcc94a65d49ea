"""Media kit status rules.

Pure decision logic: nothing here touches the database. The operations in
``media_kits`` ask these helpers what is legal and then persist the outcome.
"""
from .errors import InvalidTransitionError, ValidationError

DRAFTED = "drafted"
GENERATING = "generating"
VALIDATED = "validated"
DENIED = "denied"
ARCHIVED = "archived"

STATUSES = (DRAFTED, GENERATING, VALIDATED, DENIED, ARCHIVED)
# at most one kit per organization in each of these
ACTIVE_STATUSES = (VALIDATED, DRAFTED, GENERATING)
TERMINAL_STATUSES = (DENIED, ARCHIVED)
# statuses that count as a usable kit (public page, staleness scan)
PUBLISHABLE_STATUSES = (VALIDATED, DRAFTED)

# listing order: validated first, then drafted, then generating
STATUS_PRIORITY = {VALIDATED: 1, DRAFTED: 2, GENERATING: 3}

INSTRUCTION_INITIAL = "initial"
INSTRUCTION_EDIT = "edit"

# outcomes of edit_action()
EDIT_COPY = "copy"
EDIT_TOUCH = "touch"


def is_active(status):
    return status in ACTIVE_STATUSES


def edit_action(status):
    """Return EDIT_COPY for drafted/validated, EDIT_TOUCH for generating."""
    if status in (VALIDATED, DRAFTED):
        return EDIT_COPY
    if status == GENERATING:
        return EDIT_TOUCH
    raise InvalidTransitionError(f"Cannot edit kit with status: {status}", status=status)


def instruction_type_for(status):
    # an instruction on a kit that is already generating amends the run in flight
    return INSTRUCTION_EDIT if status == GENERATING else INSTRUCTION_INITIAL


def ensure_can_validate(status):
    if status != DRAFTED:
        raise InvalidTransitionError(f"Cannot validate kit with status: {status}", status=status)


def ensure_can_cancel(status):
    if status not in (DRAFTED, GENERATING):
        raise InvalidTransitionError(f"Cannot cancel kit with status: {status}", status=status)


def ensure_transition_allowed(target, denial_reason=None):
    """Checks for the generic set-status escape hatch."""
    if target not in STATUSES:
        raise ValidationError(f"Unknown status: {target}")
    if target == DENIED and not (denial_reason or "").strip():
        raise ValidationError("denialReason is required when denying a media kit")


def denial_reason_for(target, denial_reason):
    """denial_reason is only kept while the kit is denied."""
    return denial_reason.strip() if target == DENIED else None
