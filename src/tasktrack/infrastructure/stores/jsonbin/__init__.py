from tasktrack.infrastructure.stores.jsonbin.jsonbin_document_store import JsonBinDocumentStore
from tasktrack.infrastructure.stores.jsonbin.jsonbin_http_client import JsonBinHttpClient

__all__ = ["JsonBinDocumentStore", "JsonBinHttpClient"]
