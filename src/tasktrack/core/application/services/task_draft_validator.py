from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from tasktrack.core.application.exceptions import ValidationError
from tasktrack.core.domain.task import TaskDraft


class TaskDraftValidator:
    """Checks a draft at the write boundary: required fields and closed value sets."""

    def __init__(
        self,
        project_names: Iterable[str],
        deploy_targets: Iterable[str],
        statuses: Iterable[str],
    ) -> None:
        self._closed_sets: dict[str, frozenset[str]] = {
            "project": frozenset(project_names),
            "deploy": frozenset(deploy_targets),
            "status": frozenset(statuses),
        }

    def validate(self, draft: TaskDraft | Mapping[str, Any]) -> TaskDraft:
        parsed = draft if isinstance(draft, TaskDraft) else self._parse(draft)

        errors: dict[str, str] = {}
        for field_name, allowed in self._closed_sets.items():
            value = getattr(parsed, field_name)
            if value is None and field_name == "deploy":
                continue
            if value not in allowed:
                errors[field_name] = f"'{value}' is not one of {sorted(allowed)}"

        if errors:
            raise ValidationError(self._summary(errors), errors=errors)
        return parsed

    def _parse(self, raw: Mapping[str, Any]) -> TaskDraft:
        try:
            return TaskDraft.model_validate(dict(raw))
        except PydanticValidationError as e:
            errors = {}
            for item in e.errors():
                field_name = ".".join(str(part) for part in item["loc"]) or "draft"
                errors[field_name] = "is required" if item["type"] == "missing" else item["msg"]
            raise ValidationError(self._summary(errors), errors=errors) from e

    @staticmethod
    def _summary(errors: dict[str, str]) -> str:
        details = "; ".join(f"{name} {reason}" for name, reason in errors.items())
        return f"Invalid task: {details}"
