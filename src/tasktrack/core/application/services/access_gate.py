import hmac
from collections.abc import Callable

import structlog

from tasktrack.core.application.exceptions import InvalidCredentialError, PermissionDeniedError
from tasktrack.core.application.ports import CredentialStorePort
from tasktrack.core.domain.access import WritePermission

logger = structlog.get_logger()

PermissionObserver = Callable[[WritePermission], None]


class AccessGate:
    """Two-state write permission (read-only / read-write) backed by a locally persisted credential.

    The credential is a single shared secret compared by exact match and stored
    in plaintext. Callers needing a stricter threat model must put a real
    authentication boundary in front of this gate.
    """

    def __init__(self, store: CredentialStorePort, expected_secret: str, credential_key: str) -> None:
        if not expected_secret:
            raise ValueError("AccessGate requires a non-empty expected secret.")
        self._store = store
        self._expected = expected_secret
        self._key = credential_key
        self._permission = WritePermission.READ_ONLY
        self._observers: list[PermissionObserver] = []

    @property
    def permission(self) -> WritePermission:
        return self._permission

    @property
    def can_write(self) -> bool:
        return self._permission.can_write

    def subscribe(self, observer: PermissionObserver) -> None:
        self._observers.append(observer)

    def initialize(self) -> WritePermission:
        stored = self._store.read(self._key)
        granted = stored is not None and self._matches(stored)
        self._set(WritePermission.READ_WRITE if granted else WritePermission.READ_ONLY)
        logger.info("Access gate initialized", permission=self._permission.value, has_stored_value=stored is not None)
        return self._permission

    def grant(self, candidate: str) -> WritePermission:
        if not self._matches(candidate):
            logger.warning("Credential rejected", permission=self._permission.value)
            raise InvalidCredentialError("Invalid access credential")

        self._store.write(self._key, candidate)
        self._set(WritePermission.READ_WRITE)
        logger.info("Write access granted")
        return self._permission

    def revoke(self) -> None:
        try:
            self._store.clear(self._key)
        finally:
            self._set(WritePermission.READ_ONLY)
        logger.info("Write access revoked")

    def cancel_credential_entry(self) -> None:
        """Abandoning the credential prompt discards any half-entered state."""
        self.revoke()

    def require_write(self) -> None:
        if self._permission.can_write:
            stored = self._store.read(self._key)
            if stored is None or not self._matches(stored):
                logger.warning("Stored credential no longer valid, dropping write access")
                self._set(WritePermission.READ_ONLY)
        if not self._permission.can_write:
            raise PermissionDeniedError("Write access is required for this operation")

    def _matches(self, candidate: str) -> bool:
        return hmac.compare_digest(candidate.encode("utf-8"), self._expected.encode("utf-8"))

    def _set(self, permission: WritePermission) -> None:
        changed = permission is not self._permission
        self._permission = permission
        if changed:
            for observer in self._observers:
                observer(permission)
