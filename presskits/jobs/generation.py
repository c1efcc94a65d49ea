from flask import current_app

from ..services.errors import CollaboratorError
from ..services.runs_client import create_run, update_run_status
from ..services.workflow_client import execute_workflow_by_name
from . import run_in_app_context


def _run_trigger_generation(media_kit_id: str, org_id: str, organization_url: str = None):
    app_id = current_app.config["APP_ID"]
    workflow_name = current_app.config["GENERATION_WORKFLOW_NAME"]

    # a missing run id only costs us run correlation, so keep going without one
    run_id = None
    try:
        run_id = create_run(org_id, app_id, app_id, workflow_name)
    except CollaboratorError:
        current_app.logger.warning('Run registry unavailable, triggering %s for kit %s without a run id',
                                   workflow_name, media_kit_id, exc_info=True)

    inputs = {
        "orgId": org_id,
        "mediaKitId": media_kit_id,
        "organizationUrl": organization_url,
    }
    try:
        workflow_run_id = execute_workflow_by_name(workflow_name, app_id, inputs, run_id)
    except CollaboratorError:
        current_app.logger.exception('Workflow trigger failed for kit %s (run %s)', media_kit_id, run_id)
        if run_id:
            try:
                update_run_status(run_id, "failed")
            except CollaboratorError:
                current_app.logger.exception('Failed to mark run %s as failed', run_id)
        return None

    current_app.logger.info('Triggered %s for kit %s: run=%s workflow_run=%s',
                            workflow_name, media_kit_id, run_id, workflow_run_id)
    return {"runId": run_id, "workflowRunId": workflow_run_id}


def trigger_generation(media_kit_id: str, org_id: str, organization_url: str = None):
    """Entrypoint enqueued by edit_media_kit."""
    return run_in_app_context(_run_trigger_generation, media_kit_id, org_id, organization_url)
