from urllib.parse import quote

from .http_client import service_request

SERVICE = "workflow-service"


def _workflow_request(path, method="GET", body=None):
    return service_request(SERVICE, "WORKFLOW_SERVICE_URL", "WORKFLOW_SERVICE_API_KEY", path,
                           method=method, body=body)


def execute_workflow_by_name(name: str, app_id: str, inputs: dict, run_id: str = None):
    """Start a deployed workflow; returns the workflow run id when the engine reports one."""
    data = _workflow_request(f"/workflows/by-name/{quote(name, safe='')}/execute", method="POST", body={
        "appId": app_id,
        "inputs": inputs,
        "runId": run_id,
    })
    return (data or {}).get("workflowRunId")


def deploy_workflows(app_id: str, workflows: list) -> None:
    _workflow_request("/workflows/deploy", method="PUT", body={"appId": app_id, "workflows": workflows})
