import json
from unittest.mock import patch

import pytest

from tasktrack.core.application.exceptions import StoreError
from tasktrack.infrastructure.stores.credentials import CredentialFileStore


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "nested" / "credentials.json"


class TestCredentialFileStore:
    def test_missing_file_reads_as_empty(self, store_path) -> None:
        assert CredentialFileStore(store_path).read("tasktrack-access") is None

    def test_value_survives_new_instance(self, store_path) -> None:
        CredentialFileStore(store_path).write("tasktrack-access", "123456")

        assert CredentialFileStore(store_path).read("tasktrack-access") == "123456"
        assert json.loads(store_path.read_text()) == {"tasktrack-access": "123456"}

    def test_clear_removes_only_that_key(self, store_path) -> None:
        store = CredentialFileStore(store_path)
        store.write("tasktrack-access", "123456")
        store.write("other", "x")

        store.clear("tasktrack-access")

        assert store.read("tasktrack-access") is None
        assert store.read("other") == "x"

    def test_clear_without_file_is_noop(self, store_path) -> None:
        CredentialFileStore(store_path).clear("tasktrack-access")

        assert not store_path.exists()

    def test_corrupt_file_reads_as_empty(self, store_path) -> None:
        store_path.parent.mkdir(parents=True)
        store_path.write_text("{not json")

        assert CredentialFileStore(store_path).read("tasktrack-access") is None

    def test_write_failure_surfaces_as_store_error(self, store_path) -> None:
        store = CredentialFileStore(store_path)

        with patch("tasktrack.infrastructure.stores.credentials.credential_file_store.os.replace", side_effect=OSError("denied")):
            with pytest.raises(StoreError):
                store.write("tasktrack-access", "123456")

        assert list(store_path.parent.iterdir()) == []
