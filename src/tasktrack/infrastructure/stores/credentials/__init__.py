from tasktrack.infrastructure.stores.credentials.credential_file_store import CredentialFileStore

__all__ = ["CredentialFileStore"]
