from abc import ABC, abstractmethod
from collections.abc import Sequence

from tasktrack.core.application.exceptions import ErrorKind
from tasktrack.core.domain.task import Task


class TrackerListenerPort(ABC):
    """Notifications the core emits towards the presentation layer."""

    @abstractmethod
    def collection_changed(self, tasks: Sequence[Task]) -> None:
        pass

    @abstractmethod
    def permission_changed(self, can_write: bool) -> None:
        pass

    @abstractmethod
    def operation_failed(self, kind: ErrorKind, message: str) -> None:
        pass
