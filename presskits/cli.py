"""``flask provision``: push the generation workflow and email template to their services.

Both deployments are idempotent on the collaborator side and are skipped when
the matching API key is not configured.
"""
import click
from flask import current_app

from .jobs.notify import READY_EVENT
from .services.email_client import deploy_templates
from .services.workflow_client import deploy_workflows


def generation_workflow(name):
    """DAG run by the workflow engine: fetch inputs, generate, store result, close the run."""
    return {
        "name": name,
        "description": "Generate press kit MDX content via LLM",
        "dag": {
            "nodes": [
                {
                    "id": "fetch-data",
                    "type": "http.call",
                    "config": {"service": "press-kits", "method": "GET", "path": "/internal/generation-data"},
                    "inputMapping": {"query.orgId": "$ref:flow_input.orgId"},
                },
                {
                    "id": "generate-mdx",
                    "type": "http.call",
                    "config": {"service": "content-generation", "method": "POST", "path": "/generate"},
                    "inputMapping": {
                        "body.appId": "$ref:flow_input.appId",
                        "body.variables": "$ref:fetch-data.output",
                        "body.parentRunId": "$ref:flow_input.runId",
                    },
                    "retries": 0,
                },
                {
                    "id": "upsert-result",
                    "type": "http.call",
                    "config": {"service": "press-kits", "method": "POST", "path": "/internal/upsert-generation-result"},
                    "inputMapping": {
                        "body.orgId": "$ref:flow_input.orgId",
                        "body.mdxContent": "$ref:generate-mdx.output.bodyHtml",
                        "body.title": "$ref:generate-mdx.output.title",
                    },
                },
                {
                    "id": "end-run",
                    "type": "http.call",
                    "config": {"service": "runs", "method": "PATCH"},
                    "inputMapping": {"path": "$ref:flow_input.runId", "body.status": "completed"},
                },
            ],
            "edges": [
                {"from": "fetch-data", "to": "generate-mdx"},
                {"from": "generate-mdx", "to": "upsert-result"},
                {"from": "upsert-result", "to": "end-run"},
            ],
            "onError": "end-run",
        },
    }


READY_TEMPLATE = {
    "name": READY_EVENT,
    "subject": "Your press kit is ready!",
    "htmlBody": "<h1>Your press kit is ready</h1><p>Your press kit has been validated and is now live.</p>",
    "textBody": "Your press kit is ready and live.",
}


def provision():
    app_id = current_app.config["APP_ID"]
    done = []
    if current_app.config.get("WORKFLOW_SERVICE_API_KEY"):
        deploy_workflows(app_id, [generation_workflow(current_app.config["GENERATION_WORKFLOW_NAME"])])
        done.append("workflows")
    if current_app.config.get("TRANSACTIONAL_EMAIL_SERVICE_API_KEY"):
        deploy_templates(app_id, [READY_TEMPLATE])
        done.append("email templates")
    return done


def register_commands(app):
    @app.cli.command("provision")
    def provision_command():
        """Deploy the generation workflow and email templates."""
        done = provision()
        click.echo(f"Deployed: {', '.join(done)}" if done else "Nothing to deploy (no API keys configured)")
