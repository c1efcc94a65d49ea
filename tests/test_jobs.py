from presskits.jobs.generation import trigger_generation
from presskits.jobs.notify import notify_ready
from presskits.services.errors import CollaboratorError


def test_trigger_generation_with_run(app, collaborators):
    out = trigger_generation("kit-1", "org_1", "https://acme.test")

    assert out == {"runId": "run-123", "workflowRunId": "wf-123"}
    assert collaborators.workflows[0]["runId"] == "run-123"


def test_registry_failure_still_triggers_workflow(app, collaborators):
    collaborators.create_run_error = CollaboratorError("runs-service", "unreachable")

    out = trigger_generation("kit-1", "org_1")

    assert out == {"runId": None, "workflowRunId": "wf-123"}
    assert collaborators.workflows == [{
        "name": "generate-press-kit",
        "appId": "press-kits-service",
        "inputs": {"orgId": "org_1", "mediaKitId": "kit-1", "organizationUrl": None},
        "runId": None,
    }]


def test_workflow_failure_marks_run_failed(app, collaborators):
    collaborators.workflow_error = CollaboratorError("workflow-service", "500")

    assert trigger_generation("kit-1", "org_1") is None
    assert collaborators.run_updates == [("run-123", "failed")]


def test_workflow_failure_without_run_skips_run_update(app, collaborators):
    collaborators.create_run_error = CollaboratorError("runs-service", "unreachable")
    collaborators.workflow_error = CollaboratorError("workflow-service", "500")

    assert trigger_generation("kit-1", "org_1") is None
    assert collaborators.run_updates == []


def test_workflow_name_from_config(app, collaborators):
    app.config["GENERATION_WORKFLOW_NAME"] = "generate-press-kit-v2"

    trigger_generation("kit-1", "org_1")

    assert collaborators.workflows[0]["name"] == "generate-press-kit-v2"
    assert collaborators.runs[0]["taskName"] == "generate-press-kit-v2"


def test_notify_ready(app, collaborators):
    assert notify_ready("org_1", "Acme") is True
    assert collaborators.emails == [{
        "appId": "press-kits-service",
        "eventType": "press_kit_ready",
        "orgId": "org_1",
        "metadata": {"title": "Acme"},
    }]


def test_notify_ready_failure_is_logged(app, collaborators, caplog):
    collaborators.email_error = CollaboratorError("transactional-email-service", "down")

    assert notify_ready("org_1", None) is False
    assert "Email send failed" in caplog.text
