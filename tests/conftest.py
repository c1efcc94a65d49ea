import os
import sys
from datetime import timedelta

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from config import TestConfig
from presskits import create_app
from presskits.extensions import db
from presskits.models import Organization, MediaKit, MediaKitInstruction
from presskits.models.base import utcnow


@pytest.fixture
def app(tmp_path):
    overrides = {k: getattr(TestConfig, k) for k in dir(TestConfig) if k.isupper()}
    overrides["SQLALCHEMY_DATABASE_URI"] = f"sqlite:///{tmp_path / 'press_kits_test.db'}"
    app = create_app(overrides)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(app):
    return {"X-API-Key": app.config["PRESS_KITS_SERVICE_API_KEY"]}


@pytest.fixture
def make_org(app):
    def _make(external_org_id="org_1", name=None):
        org = Organization(external_org_id=external_org_id, name=name)
        db.session.add(org)
        db.session.commit()
        return org
    return _make


@pytest.fixture
def make_kit(app):
    def _make(org=None, status="drafted", days_old=None, **fields):
        if org is not None:
            fields.setdefault("organization_id", org.id)
            fields.setdefault("external_org_id", org.external_org_id)
        if days_old is not None:
            fields["updated_at"] = utcnow() - timedelta(days=days_old)
        kit = MediaKit(status=status, **fields)
        db.session.add(kit)
        db.session.commit()
        return kit
    return _make


class Collaborators:
    """Records calls to the run registry, workflow engine and email service."""

    def __init__(self):
        self.runs = []
        self.run_updates = []
        self.workflows = []
        self.emails = []
        self.create_run_error = None
        self.workflow_error = None
        self.email_error = None

    def create_run(self, org_id, app_id, service_name, task_name):
        if self.create_run_error:
            raise self.create_run_error
        self.runs.append({"orgId": org_id, "appId": app_id, "serviceName": service_name, "taskName": task_name})
        return "run-123"

    def update_run_status(self, run_id, status):
        self.run_updates.append((run_id, status))

    def execute_workflow_by_name(self, name, app_id, inputs, run_id=None):
        if self.workflow_error:
            raise self.workflow_error
        self.workflows.append({"name": name, "appId": app_id, "inputs": inputs, "runId": run_id})
        return "wf-123"

    def send_email(self, app_id, event_type, org_id, metadata):
        if self.email_error:
            raise self.email_error
        self.emails.append({"appId": app_id, "eventType": event_type, "orgId": org_id, "metadata": metadata})


@pytest.fixture
def collaborators(monkeypatch):
    fake = Collaborators()
    monkeypatch.setattr('presskits.jobs.generation.create_run', fake.create_run)
    monkeypatch.setattr('presskits.jobs.generation.update_run_status', fake.update_run_status)
    monkeypatch.setattr('presskits.jobs.generation.execute_workflow_by_name', fake.execute_workflow_by_name)
    monkeypatch.setattr('presskits.jobs.notify.send_email', fake.send_email)
    return fake


def statuses():
    return {k.id: k.status for k in MediaKit.query.all()}


def instructions_for(kit_id):
    return MediaKitInstruction.query.filter_by(media_kit_id=kit_id).order_by(MediaKitInstruction.created_at).all()
