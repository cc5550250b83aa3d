from abc import ABC, abstractmethod
from typing import Any


class DocumentStorePort(ABC):
    """Whole-document access to the remote JSON blob holding the task collection.

    Implementations are transports: they do not validate record shape and
    never retry. Failures surface as ``StoreError``.
    """

    @abstractmethod
    async def fetch_document(self) -> list[dict[str, Any]]:
        """Returns every record in the document; a missing or empty document is ``[]``."""
        pass

    @abstractmethod
    async def overwrite_document(self, records: list[dict[str, Any]]) -> None:
        """Replaces the entire document content in a single write."""
        pass
