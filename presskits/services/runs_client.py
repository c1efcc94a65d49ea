from .http_client import service_request
from .errors import CollaboratorError

SERVICE = "runs-service"


def _runs_request(path, method="GET", body=None):
    return service_request(SERVICE, "RUNS_SERVICE_URL", "RUNS_SERVICE_API_KEY", path,
                           method=method, body=body, api_key_header="X-API-Key")


def create_run(org_id: str, app_id: str, service_name: str, task_name: str) -> str:
    """Register an execution run and return its id."""
    data = _runs_request("/v1/runs", method="POST", body={
        "orgId": org_id,
        "appId": app_id,
        "serviceName": service_name,
        "taskName": task_name,
    })
    run_id = (data or {}).get("id")
    if not run_id:
        raise CollaboratorError(SERVICE, "create run response carried no id")
    return run_id


def update_run_status(run_id: str, status: str) -> None:
    # status: completed/failed
    _runs_request(f"/v1/runs/{run_id}", method="PATCH", body={"status": status})
