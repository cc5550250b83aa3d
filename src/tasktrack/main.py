import httpx

from tasktrack.core.application.controller import TrackerController
from tasktrack.core.application.policies import RetryPolicy
from tasktrack.core.application.ports import TrackerListenerPort
from tasktrack.core.application.services import (
    AccessGate,
    IdentityAssigner,
    TaskDraftValidator,
    TaskRepository,
)
from tasktrack.infrastructure.configuration import TrackerSettings
from tasktrack.infrastructure.observability import configure_logging
from tasktrack.infrastructure.stores.credentials import CredentialFileStore
from tasktrack.infrastructure.stores.jsonbin import JsonBinDocumentStore, JsonBinHttpClient


def build_controller(
    settings: TrackerSettings,
    listener: TrackerListenerPort,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> TrackerController:
    """Wires one tracker per process. Call ``await controller.start()`` before use."""
    configure_logging()

    store = JsonBinDocumentStore(JsonBinHttpClient(settings, client=http_client))
    gate = AccessGate(
        CredentialFileStore(settings.credential_store_path),
        expected_secret=settings.expected_credential.get_secret_value(),
        credential_key=settings.credential_key,
    )
    validator = TaskDraftValidator(
        project_names=settings.project_names,
        deploy_targets=settings.deploy_targets,
        statuses=settings.task_statuses,
    )
    repository = TaskRepository(store, gate, validator, IdentityAssigner())
    return TrackerController(
        repository,
        gate,
        listener,
        retry_policy=RetryPolicy(max_attempts=settings.fetch_max_attempts),
    )
