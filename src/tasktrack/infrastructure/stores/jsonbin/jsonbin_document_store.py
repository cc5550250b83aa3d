import time
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from tasktrack.core.application.exceptions import StoreError
from tasktrack.core.application.ports import DocumentStorePort
from tasktrack.infrastructure.observability import get_logger
from tasktrack.infrastructure.stores.jsonbin.jsonbin_http_client import JsonBinHttpClient

logger = get_logger(__name__)

_RETRYABLE_STATUS = frozenset({408, 429})


class JsonBinDocumentStore(DocumentStorePort):
    """Whole-document GET/PUT against a JSONBin bin.

    Fetch responses wrap the collection in an envelope: ``{"record": [...], "metadata": {...}}``.
    Writes send the bare collection as the request body.
    """

    def __init__(self, http_client: JsonBinHttpClient):
        self.client = http_client

    async def fetch_document(self) -> list[dict[str, Any]]:
        start = time.perf_counter()
        response = await self._call("fetch", self.client.get)
        records = self._extract_records(response)
        logger.info(
            "Document fetched",
            document_id=self.client.document_id,
            record_count=len(records),
            duration_ms=_elapsed_ms(start),
        )
        return records

    async def overwrite_document(self, records: list[dict[str, Any]]) -> None:
        start = time.perf_counter()
        await self._call("overwrite", lambda: self.client.put(records))
        logger.info(
            "Document overwritten",
            document_id=self.client.document_id,
            record_count=len(records),
            duration_ms=_elapsed_ms(start),
        )

    async def _call(self, operation: str, send: Callable[[], Awaitable[httpx.Response]]) -> httpx.Response:
        try:
            response = await send()
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error("Document store rejected request", operation=operation, status_code=status, error_type="HTTPStatusError")
            raise StoreError(
                f"Failed to {operation} document: HTTP {status}",
                cause=e,
                status_code=status,
                retryable=status >= 500 or status in _RETRYABLE_STATUS,
            ) from e
        except httpx.RequestError as e:
            logger.error("Document store unreachable", operation=operation, error_type=type(e).__name__, error=str(e))
            raise StoreError(f"Network error during document {operation}: {e}", cause=e, retryable=True) from e

    def _extract_records(self, response: httpx.Response) -> list[dict[str, Any]]:
        if not response.content.strip():
            return []
        try:
            payload = response.json()
        except ValueError as e:
            raise StoreError("Document store returned a body that is not JSON", cause=e) from e

        if not isinstance(payload, dict):
            raise StoreError(f"Unexpected response envelope (got {type(payload).__name__})")

        record = payload.get("record")
        if not record:
            # Missing, null, empty list or the empty placeholder object of a fresh bin.
            return []
        if not isinstance(record, list):
            raise StoreError(f"Document does not hold a task collection (got {type(record).__name__})")
        return record


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)
