from tasktrack.core.application.exceptions.tracker_exceptions import (
    ErrorKind,
    InvalidCredentialError,
    NotFoundError,
    PermissionDeniedError,
    RepositoryBusyError,
    StoreError,
    TrackerError,
    ValidationError,
)

__all__ = [
    "ErrorKind",
    "InvalidCredentialError",
    "NotFoundError",
    "PermissionDeniedError",
    "RepositoryBusyError",
    "StoreError",
    "TrackerError",
    "ValidationError",
]
