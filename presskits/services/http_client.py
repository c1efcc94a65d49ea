"""Shared JSON-over-HTTP helper for the collaborator services.

Each collaborator is configured by a base URL and an API key in the Flask
config; every failure (network error or non-2xx reply) surfaces as
``CollaboratorError`` so callers have a single thing to catch.
"""
from typing import Any, Dict, Optional

import requests
from flask import current_app, g

from .errors import CollaboratorError


def service_request(service: str, url_key: str, api_key_key: str, path: str,
                    method: str = "GET", body: Optional[Dict[str, Any]] = None,
                    api_key_header: str = "x-api-key") -> Any:
    base_url = (current_app.config.get(url_key) or "").rstrip("/")
    headers = {
        "Content-Type": "application/json",
        api_key_header: current_app.config.get(api_key_key) or "",
    }
    if g.get("inline_job"):
        timeout = current_app.config.get("INLINE_HTTP_TIMEOUT", 5)
    else:
        timeout = current_app.config.get("HTTP_TIMEOUT", 30)
    try:
        r = requests.request(method, f"{base_url}{path}", headers=headers, json=body, timeout=timeout)
    except requests.RequestException as e:
        raise CollaboratorError(service, f"{method} {path} failed: {e}") from e

    if not r.ok:
        raise CollaboratorError(
            service,
            f"{method} {path} failed ({r.status_code}): {r.text[:1000]}",
            status_code=r.status_code,
        )
    if not r.content:
        return None
    try:
        return r.json()
    except ValueError:
        return None
