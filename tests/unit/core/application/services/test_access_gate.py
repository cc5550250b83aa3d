"""Unit tests: AccessGate (in-memory credential store)."""

from unittest.mock import MagicMock

import pytest

from tasktrack.core.application.exceptions import (
    InvalidCredentialError,
    PermissionDeniedError,
    StoreError,
)
from tasktrack.core.application.services import AccessGate
from tasktrack.core.domain.access import WritePermission
from tasktrack.infrastructure.fakes import InMemoryCredentialStore

KEY = "tasktrack-access"


class TestInitialize:
    def test_no_stored_credential_is_read_only(self, gate) -> None:
        assert gate.initialize() is WritePermission.READ_ONLY
        assert not gate.can_write

    def test_matching_stored_credential_is_read_write(self) -> None:
        gate = AccessGate(InMemoryCredentialStore({KEY: "123456"}), expected_secret="123456", credential_key=KEY)

        assert gate.initialize() is WritePermission.READ_WRITE

    def test_stale_stored_credential_is_read_only(self) -> None:
        gate = AccessGate(InMemoryCredentialStore({KEY: "old-secret"}), expected_secret="123456", credential_key=KEY)

        assert gate.initialize() is WritePermission.READ_ONLY

    def test_empty_expected_secret_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            AccessGate(InMemoryCredentialStore(), expected_secret="", credential_key=KEY)


class TestGrantAndRevoke:
    def test_wrong_credential_stays_read_only(self, gate, credential_store) -> None:
        with pytest.raises(InvalidCredentialError):
            gate.grant("000000")

        assert gate.permission is WritePermission.READ_ONLY
        assert credential_store.read(KEY) is None

    def test_correct_credential_grants_and_persists(self, gate, credential_store) -> None:
        assert gate.grant("123456") is WritePermission.READ_WRITE

        assert gate.can_write
        assert credential_store.read(KEY) == "123456"

    def test_near_miss_is_rejected(self, gate) -> None:
        with pytest.raises(InvalidCredentialError):
            gate.grant("123456 ")

    def test_revoke_clears_credential(self, writable_gate, credential_store) -> None:
        writable_gate.revoke()

        assert writable_gate.permission is WritePermission.READ_ONLY
        assert credential_store.read(KEY) is None

    def test_cancel_credential_entry_returns_to_read_only(self, writable_gate, credential_store) -> None:
        writable_gate.cancel_credential_entry()

        assert not writable_gate.can_write
        assert credential_store.read(KEY) is None

    def test_revoke_drops_permission_even_if_clear_fails(self) -> None:
        store = MagicMock()
        store.clear.side_effect = StoreError("disk full")
        gate = AccessGate(store, expected_secret="123456", credential_key=KEY)
        gate.grant("123456")

        with pytest.raises(StoreError):
            gate.revoke()

        assert not gate.can_write

    def test_grant_fails_cleanly_when_credential_cannot_be_persisted(self) -> None:
        store = MagicMock()
        store.write.side_effect = StoreError("read-only filesystem")
        gate = AccessGate(store, expected_secret="123456", credential_key=KEY)

        with pytest.raises(StoreError):
            gate.grant("123456")

        assert not gate.can_write


class TestRequireWrite:
    def test_denied_when_read_only(self, gate) -> None:
        with pytest.raises(PermissionDeniedError):
            gate.require_write()

    def test_allowed_when_read_write(self, writable_gate) -> None:
        writable_gate.require_write()

    def test_credential_removed_elsewhere_drops_permission(self, writable_gate, credential_store) -> None:
        credential_store.clear(KEY)

        with pytest.raises(PermissionDeniedError):
            writable_gate.require_write()

        assert writable_gate.permission is WritePermission.READ_ONLY


class TestObservers:
    def test_observer_notified_on_transitions_only(self, gate) -> None:
        seen: list[WritePermission] = []
        gate.subscribe(seen.append)

        gate.initialize()
        gate.grant("123456")
        gate.grant("123456")
        gate.revoke()

        assert seen == [WritePermission.READ_WRITE, WritePermission.READ_ONLY]
