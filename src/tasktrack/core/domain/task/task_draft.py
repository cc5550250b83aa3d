from datetime import date

from pydantic import BaseModel, ConfigDict, field_validator


class TaskDraft(BaseModel):
    """User-supplied field set for a task, before identity assignment."""

    model_config = ConfigDict(frozen=True, extra="ignore", str_strip_whitespace=True)

    name: str
    description: str
    project: str
    deadline: date
    status: str
    deploy: str | None = None
    note: str | None = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value:
            raise ValueError("name must not be empty")
        return value

    @field_validator("deploy", "note", mode="before")
    @classmethod
    def blank_as_absent(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def fields(self) -> dict[str, object]:
        return self.model_dump()
