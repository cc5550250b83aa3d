from typing import Any

import httpx

from tasktrack.infrastructure.configuration import TrackerSettings
from tasktrack.infrastructure.observability import get_logger, redact_dict

logger = get_logger(__name__)


class JsonBinHttpClient:
    """Thin async HTTP client for a single JSONBin document.

    An ``httpx.AsyncClient`` can be injected to share a connection pool; when
    none is given a short-lived client is opened per request.
    """

    def __init__(self, settings: TrackerSettings, client: httpx.AsyncClient | None = None):
        self.settings = settings
        self.base_url = settings.store_base_url.rstrip("/")
        self.document_id = settings.store_document_id
        self._client = client
        self._validate_config()

    @property
    def document_url(self) -> str:
        return f"{self.base_url}/{self.document_id}"

    def _validate_config(self):
        if not self.document_id:
            raise ValueError("TrackerSettings.store_document_id must not be empty.")
        if not self.settings.store_access_key.get_secret_value():
            raise ValueError("TrackerSettings.store_access_key must not be empty.")

    def _get_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "X-Access-Key": self.settings.store_access_key.get_secret_value(),
        }

    async def get(self) -> httpx.Response:
        return await self._send("GET", None)

    async def put(self, json_data: Any) -> httpx.Response:
        return await self._send("PUT", json_data)

    async def _send(self, method: str, json_data: Any) -> httpx.Response:
        headers = self._get_headers()
        logger.debug("Sending document request", method=method, url=self.document_url, headers=redact_dict(headers))
        if self._client is not None:
            return await self._client.request(
                method, self.document_url, headers=headers, json=json_data, timeout=self.settings.store_timeout_seconds
            )
        async with httpx.AsyncClient() as client:
            return await client.request(
                method, self.document_url, headers=headers, json=json_data, timeout=self.settings.store_timeout_seconds
            )
