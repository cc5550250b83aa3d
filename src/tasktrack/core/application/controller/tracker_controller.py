"""Entry point for the presentation layer.

Translates user events into repository and gate calls, and reports results
back through a ``TrackerListenerPort``. No ``TrackerError`` escapes a handler:
each one is reported via ``operation_failed`` and the handler returns a falsy
value, leaving the tracker in its previous state.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Mapping
from datetime import date
from typing import Any, TypeVar

import structlog

from tasktrack.core.application.exceptions import NotFoundError, StoreError, TrackerError, ValidationError
from tasktrack.core.application.policies import RetryPolicy
from tasktrack.core.application.ports import TrackerListenerPort
from tasktrack.core.application.services import AccessGate, TaskRepository, project_tasks
from tasktrack.core.domain.access import WritePermission
from tasktrack.core.domain.task import Task, TaskDraft, TaskQuery

logger = structlog.get_logger()

_T = TypeVar("_T")


class TrackerController:
    def __init__(
        self,
        repository: TaskRepository,
        gate: AccessGate,
        listener: TrackerListenerPort,
        retry_policy: RetryPolicy | None = None,
    ) -> None:
        self._repository = repository
        self._gate = gate
        self._listener = listener
        self._retry = retry_policy or RetryPolicy()
        self._query = TaskQuery()
        gate.subscribe(self._on_permission_transition)

    @property
    def query(self) -> TaskQuery:
        return self._query

    @property
    def can_write(self) -> bool:
        return self._gate.can_write

    def visible_tasks(self) -> list[Task]:
        return project_tasks(self._repository.list(), self._query)

    async def start(self) -> bool:
        """Initializes write permission from the stored credential, then loads the collection."""
        permission = self._gate.initialize()
        if not permission.can_write:
            # Staying read-only is not a transition, so the gate does not notify.
            self._listener.permission_changed(False)
        return await self.on_refresh_requested()

    async def on_refresh_requested(self) -> bool:
        result = await self._attempt(lambda: self._retry.run(self._repository.refresh))
        if result is None:
            return False
        self._emit_collection()
        return True

    async def on_create_requested(self, draft: TaskDraft | Mapping[str, Any]) -> Task | None:
        task = await self._attempt(lambda: self._repository.create(draft))
        if task is not None:
            self._emit_collection()
        return task

    async def on_edit_requested(self, task_id: str, draft: TaskDraft | Mapping[str, Any]) -> Task | None:
        task = await self._attempt(lambda: self._repository.update(task_id, draft))
        if task is not None:
            self._emit_collection()
        return task

    async def on_delete_requested(self, task_id: str) -> bool:
        async def delete() -> bool:
            await self._repository.delete(task_id)
            return True

        deleted = await self._attempt(delete)
        if deleted:
            self._emit_collection()
        return bool(deleted)

    def on_filter_changed(
        self,
        query: TaskQuery | None = None,
        *,
        text: str = "",
        statuses: Iterable[str] = (),
        project: str | None = None,
        deadline: date | None = None,
        sort_by: str | None = None,
        descending: bool = False,
    ) -> list[Task]:
        """Replaces the active query. An unsortable field is reported and the previous query stays active."""
        if query is None:
            try:
                query = TaskQuery(
                    text=text,
                    statuses=frozenset(statuses),
                    project=project,
                    deadline=deadline,
                    sort_by=sort_by,
                    descending=descending,
                )
            except ValueError as e:
                self._report(ValidationError(str(e), errors={"sort_by": str(e)}))
                return self.visible_tasks()
        self._query = query
        return self._emit_collection()

    def on_credential_submitted(self, candidate: str) -> bool:
        try:
            self._gate.grant(candidate)
        except TrackerError as e:
            self._report(e)
            return False
        return True

    def on_credential_entry_cancelled(self) -> None:
        self._guarded(self._gate.cancel_credential_entry)

    def on_logout(self) -> None:
        self._guarded(self._gate.revoke)

    def _guarded(self, action: Callable[[], None]) -> None:
        try:
            action()
        except TrackerError as e:
            self._report(e)

    async def _attempt(self, operation: Callable[[], Awaitable[_T]]) -> _T | None:
        try:
            return await operation()
        except NotFoundError as e:
            self._report(e)
            await self._refresh_quietly()
            return None
        except TrackerError as e:
            self._report(e)
            return None

    async def _refresh_quietly(self) -> None:
        """The target vanished remotely; pull the current document so the view catches up."""
        try:
            await self._repository.refresh()
        except TrackerError as e:
            logger.warning("Refresh after missing task failed", error=str(e))
            return
        self._emit_collection()

    def _report(self, error: TrackerError) -> None:
        message = str(error) if isinstance(error, StoreError) else error.message
        logger.warning("Operation failed", error_type=type(error).__name__, kind=error.kind.value, message=message)
        self._listener.operation_failed(error.kind, message)

    def _emit_collection(self) -> list[Task]:
        tasks = self.visible_tasks()
        self._listener.collection_changed(tasks)
        return tasks

    def _on_permission_transition(self, permission: WritePermission) -> None:
        self._listener.permission_changed(permission.can_write)
