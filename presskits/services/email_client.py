from .http_client import service_request

SERVICE = "transactional-email-service"


def _email_request(path, method="POST", body=None):
    return service_request(SERVICE, "TRANSACTIONAL_EMAIL_SERVICE_URL", "TRANSACTIONAL_EMAIL_SERVICE_API_KEY",
                           path, method=method, body=body)


def send_email(app_id: str, event_type: str, org_id: str, metadata: dict) -> None:
    # the email service still keys organizations as clerkOrgId
    _email_request("/send", body={
        "appId": app_id,
        "eventType": event_type,
        "clerkOrgId": org_id,
        "metadata": metadata,
    })


def deploy_templates(app_id: str, templates: list) -> None:
    _email_request("/templates", method="PUT", body={"appId": app_id, "templates": templates})
