import copy
from typing import Any

from tasktrack.core.application.exceptions import StoreError
from tasktrack.core.application.ports import DocumentStorePort


class InMemoryDocumentStore(DocumentStorePort):
    """
    Process-local document store for tests and offline use.
    Records are deep-copied on the way in and out, like a real remote round trip.
    """

    def __init__(self, records: list[dict[str, Any]] | None = None):
        self.records: list[dict[str, Any]] = copy.deepcopy(records or [])
        self.fetch_count = 0
        self.overwrite_count = 0
        self.fail_next_overwrite: StoreError | None = None
        self.fail_next_fetch: StoreError | None = None

    async def fetch_document(self) -> list[dict[str, Any]]:
        self.fetch_count += 1
        if self.fail_next_fetch is not None:
            error, self.fail_next_fetch = self.fail_next_fetch, None
            raise error
        return copy.deepcopy(self.records)

    async def overwrite_document(self, records: list[dict[str, Any]]) -> None:
        self.overwrite_count += 1
        if self.fail_next_overwrite is not None:
            error, self.fail_next_overwrite = self.fail_next_overwrite, None
            raise error
        self.records = copy.deepcopy(records)
