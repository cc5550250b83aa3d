from datetime import date

import pytest

from tasktrack.core.application.services import (
    AccessGate,
    IdentityAssigner,
    TaskDraftValidator,
    TaskRepository,
)
from tasktrack.core.domain.task import Task
from tasktrack.infrastructure.configuration import TrackerSettings
from tasktrack.infrastructure.fakes import InMemoryCredentialStore, InMemoryDocumentStore

SECRET = "123456"
CREDENTIAL_KEY = "tasktrack-access"


@pytest.fixture
def settings(tmp_path) -> TrackerSettings:
    return TrackerSettings(
        _env_file=None,
        store_base_url="https://store.example.com/v3/b",
        store_document_id="doc-123",
        store_access_key="mock-access-key",
        expected_credential=SECRET,
        credential_store_path=tmp_path / "credentials.json",
        fetch_max_attempts=2,
    )


@pytest.fixture
def stored_records() -> list[dict]:
    return [
        {
            "id": "task-1",
            "name": "Login page",
            "description": "Build the login form",
            "project": "OM",
            "deadline": "2025-01-10",
            "status": "in progress",
            "note": "waiting on design",
        },
        {
            "id": "task-2",
            "name": "Billing report",
            "description": "Monthly export",
            "project": "MyGraPARI",
            "deploy": "staging",
            "deadline": "2025-02-01",
            "status": "pending",
        },
    ]


@pytest.fixture
def valid_draft() -> dict:
    return {
        "name": "A",
        "description": "d",
        "project": "OM",
        "deadline": date(2025, 1, 1),
        "status": "pending",
    }


@pytest.fixture
def document_store(stored_records) -> InMemoryDocumentStore:
    return InMemoryDocumentStore(stored_records)


@pytest.fixture
def credential_store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore()


@pytest.fixture
def gate(credential_store) -> AccessGate:
    return AccessGate(credential_store, expected_secret=SECRET, credential_key=CREDENTIAL_KEY)


@pytest.fixture
def writable_gate(gate) -> AccessGate:
    gate.grant(SECRET)
    return gate


@pytest.fixture
def validator() -> TaskDraftValidator:
    return TaskDraftValidator(
        project_names=["MyGraPARI", "OM"],
        deploy_targets=["development", "staging", "production"],
        statuses=["completed", "in progress", "pending", "not started"],
    )


@pytest.fixture
def repository(document_store, gate, validator) -> TaskRepository:
    return TaskRepository(document_store, gate, validator, IdentityAssigner())


@pytest.fixture
def task_factory():
    def make_task(task_id: str, **overrides) -> Task:
        fields = {
            "id": task_id,
            "name": f"Task {task_id}",
            "description": "",
            "project": "OM",
            "deadline": date(2025, 1, 1),
            "status": "pending",
        }
        fields.update(overrides)
        return Task(**fields)

    return make_task
