"""Tracker exception hierarchy.

Every error raised by the core carries an ``ErrorKind`` so that the UI
collaborator can report it without string-matching, and every one of them
leaves the tracker in its previous valid state.
"""

from enum import StrEnum
from typing import Any


class ErrorKind(StrEnum):
    VALIDATION = "validation"
    PERMISSION_DENIED = "permission_denied"
    INVALID_CREDENTIAL = "invalid_credential"
    NOT_FOUND = "not_found"
    STORE = "store"
    BUSY = "busy"


class TrackerError(Exception):
    """Base exception for all tracker errors."""

    kind: ErrorKind = ErrorKind.STORE

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}


class ValidationError(TrackerError):
    """A draft is missing a required field or carries a value outside its closed set."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, *, errors: dict[str, str] | None = None) -> None:
        super().__init__(message, context={"errors": errors or {}})
        self.errors: dict[str, str] = errors or {}


class PermissionDeniedError(TrackerError):
    """A write was attempted while the access gate is read-only."""

    kind = ErrorKind.PERMISSION_DENIED


class InvalidCredentialError(TrackerError):
    kind = ErrorKind.INVALID_CREDENTIAL


class NotFoundError(TrackerError):
    """The targeted task is not in the collection (possibly removed by another writer)."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task '{task_id}' no longer exists", context={"task_id": task_id})
        self.task_id = task_id


class StoreError(TrackerError):
    """Transport or remote store failure, carrying the underlying cause."""

    kind = ErrorKind.STORE

    def __init__(
        self,
        message: str,
        *,
        cause: BaseException | None = None,
        status_code: int | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message, context={"status_code": status_code, "retryable": retryable})
        self.cause = cause
        self.status_code = status_code
        self.retryable = retryable

    def __str__(self) -> str:
        code = f" status={self.status_code}" if self.status_code is not None else ""
        return f"{self.message}{code}"


class RepositoryBusyError(TrackerError):
    """Another repository operation is still waiting on the remote store."""

    kind = ErrorKind.BUSY
