from tasktrack.core.application.ports.credential_store_port import CredentialStorePort
from tasktrack.core.application.ports.document_store_port import DocumentStorePort
from tasktrack.core.application.ports.tracker_listener_port import TrackerListenerPort

__all__ = ["CredentialStorePort", "DocumentStorePort", "TrackerListenerPort"]
