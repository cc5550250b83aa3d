import json
from typing import Any
from uuid import NAMESPACE_URL, uuid4, uuid5

_LEGACY_NAMESPACE = uuid5(NAMESPACE_URL, "tasktrack:legacy-record")


class IdentityAssigner:
    """Issues stable task identifiers, independent of a record's position."""

    def new_id(self) -> str:
        return str(uuid4())

    def legacy_id(self, raw: dict[str, Any], position: int) -> str:
        """
        Deterministic identifier for a stored record written before identities existed.
        Stays the same across re-fetches of an unchanged document.
        """
        canonical = json.dumps(raw, sort_keys=True, separators=(",", ":"), default=str)
        return str(uuid5(_LEGACY_NAMESPACE, f"{position}|{canonical}"))
