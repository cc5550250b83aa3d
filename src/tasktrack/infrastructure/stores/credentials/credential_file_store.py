import json
import os
import tempfile
from pathlib import Path

from tasktrack.core.application.exceptions import StoreError
from tasktrack.core.application.ports import CredentialStorePort
from tasktrack.infrastructure.observability import get_logger

logger = get_logger(__name__)


class CredentialFileStore(CredentialStorePort):
    """Key/value credential storage in a JSON file that survives restarts."""

    def __init__(self, file_path: Path):
        self.file_path = Path(file_path)
        self.store_dir = self.file_path.parent

    def read(self, key: str) -> str | None:
        value = self._read_json().get(key)
        return value if isinstance(value, str) else None

    def write(self, key: str, value: str) -> None:
        data = self._read_json()
        data[key] = value
        self._write_json(data)

    def clear(self, key: str) -> None:
        data = self._read_json()
        if key not in data:
            return
        del data[key]
        self._write_json(data)

    def _read_json(self) -> dict[str, str]:
        if not self.file_path.exists():
            return {}
        try:
            with open(self.file_path, encoding="utf-8") as f:
                content = f.read().strip()
                if not content:
                    return {}
                data = json.loads(content)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Failed to read credential store, treating it as empty", path=str(self.file_path), error=str(e))
            return {}
        return data if isinstance(data, dict) else {}

    def _write_json(self, data: dict[str, str]) -> None:
        """
        Atomic write: write to temp file then rename.
        """
        tmp_path = None
        try:
            self.store_dir.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile("w", dir=self.store_dir, delete=False, encoding="utf-8") as tmp:
                json.dump(data, tmp, indent=2)
                tmp_path = tmp.name
            os.chmod(tmp_path, 0o600)
            os.replace(tmp_path, self.file_path)
        except OSError as e:
            logger.error("Failed to write credential store", path=str(self.file_path), error=str(e))
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StoreError("Could not persist the access credential locally", cause=e) from e
