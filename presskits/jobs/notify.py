from flask import current_app

from ..services.email_client import send_email
from ..services.errors import CollaboratorError
from . import run_in_app_context

READY_EVENT = "press_kit_ready"


def _run_notify_ready(org_id: str, title: str):
    try:
        send_email(current_app.config["APP_ID"], READY_EVENT, org_id, {"title": title or "Press Kit"})
    except CollaboratorError:
        current_app.logger.exception('Email send failed for org %s', org_id)
        return False
    current_app.logger.info('Sent %s to org %s', READY_EVENT, org_id)
    return True


def notify_ready(org_id: str, title: str = None):
    """Entrypoint enqueued by validate_media_kit."""
    return run_in_app_context(_run_notify_ready, org_id, title)
