from tasktrack.infrastructure.fakes.in_memory_credential_store import InMemoryCredentialStore
from tasktrack.infrastructure.fakes.in_memory_document_store import InMemoryDocumentStore

__all__ = ["InMemoryCredentialStore", "InMemoryDocumentStore"]
