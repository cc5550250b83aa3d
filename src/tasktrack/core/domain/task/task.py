from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Task(BaseModel):
    """A persisted task record as it lives in the remote document."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(min_length=1)
    name: str
    description: str
    project: str
    deadline: date
    status: str
    deploy: str | None = None
    note: str | None = None

    def to_document(self) -> dict[str, Any]:
        """Serialize to the JSON shape stored remotely (optional fields omitted when absent)."""
        return self.model_dump(mode="json", exclude_none=True)
