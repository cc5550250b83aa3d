"""In-memory owner of the task collection, reconciled against the remote document.

Every mutation is a read-modify-write of the *whole* collection: the new
collection is applied locally, written with a single overwrite, then
re-fetched so local state mirrors the authoritative copy. A failed overwrite
restores the collection exactly as it was before the call.

There is no concurrency control on the remote document. Two processes that
both mutate before re-fetching will lose the first writer's change.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from typing import Any

import structlog
from pydantic import ValidationError as PydanticValidationError

from tasktrack.core.application.exceptions import NotFoundError, RepositoryBusyError, StoreError
from tasktrack.core.application.ports import DocumentStorePort
from tasktrack.core.application.services.access_gate import AccessGate
from tasktrack.core.application.services.identity_assigner import IdentityAssigner
from tasktrack.core.application.services.task_draft_validator import TaskDraftValidator
from tasktrack.core.domain.task import Task, TaskDraft

logger = structlog.get_logger()

DraftInput = TaskDraft | Mapping[str, Any]


class TaskRepository:
    def __init__(
        self,
        store: DocumentStorePort,
        gate: AccessGate,
        validator: TaskDraftValidator,
        identities: IdentityAssigner | None = None,
    ) -> None:
        self._store = store
        self._gate = gate
        self._validator = validator
        self._ids = identities or IdentityAssigner()
        self._tasks: list[Task] = []
        self._in_flight: str | None = None

    @property
    def busy(self) -> bool:
        return self._in_flight is not None

    def list(self) -> list[Task]:
        """Snapshot of the collection as of the last successful fetch or write."""
        return list(self._tasks)

    def get(self, task_id: str) -> Task:
        return self._tasks[self._index_of(task_id)]

    async def refresh(self) -> list[Task]:
        async with self._exclusive("refresh"):
            self._tasks = await self._fetch()
            logger.info("Collection refreshed", task_count=len(self._tasks))
        return self.list()

    async def create(self, draft: DraftInput) -> Task:
        self._gate.require_write()
        validated = self._validator.validate(draft)

        async with self._exclusive("create"):
            task = Task(id=self._unused_id(), **validated.fields())
            return await self._commit([*self._tasks, task], task, operation="create")

    async def update(self, task_id: str, draft: DraftInput) -> Task:
        self._gate.require_write()
        validated = self._validator.validate(draft)

        async with self._exclusive("update"):
            index = self._index_of(task_id)
            task = Task(id=task_id, **validated.fields())
            tasks = list(self._tasks)
            tasks[index] = task
            return await self._commit(tasks, task, operation="update")

    async def delete(self, task_id: str) -> None:
        self._gate.require_write()

        async with self._exclusive("delete"):
            index = self._index_of(task_id)
            removed = self._tasks[index]
            tasks = [task for position, task in enumerate(self._tasks) if position != index]
            await self._commit(tasks, None, operation="delete")
            logger.info("Task deleted", task_id=removed.id)

    @asynccontextmanager
    async def _exclusive(self, operation: str) -> AsyncIterator[None]:
        if self._in_flight is not None:
            raise RepositoryBusyError(
                f"Cannot {operation} while a {self._in_flight} is in progress",
                context={"operation": operation, "in_flight": self._in_flight},
            )
        self._in_flight = operation
        try:
            yield
        finally:
            self._in_flight = None

    async def _commit(self, tasks: list[Task], touched: Task | None, *, operation: str) -> Task | None:
        previous = self._tasks
        self._tasks = tasks
        try:
            await self._store.overwrite_document([task.to_document() for task in tasks])
        except BaseException as e:
            self._tasks = previous
            logger.warning("Write failed, collection rolled back", operation=operation, error_type=type(e).__name__)
            raise

        await self._resync(operation)
        if touched is None:
            return None

        for task in self._tasks:
            if task.id == touched.id:
                logger.info("Task stored", operation=operation, task_id=task.id)
                return task

        logger.warning(
            "Written task missing after re-fetch, another writer may have overwritten the document",
            operation=operation,
            task_id=touched.id,
        )
        return touched

    async def _resync(self, operation: str) -> None:
        try:
            self._tasks = await self._fetch()
        except StoreError as e:
            # The overwrite already succeeded, so the local collection is what was written.
            logger.warning("Re-fetch after write failed", operation=operation, error=str(e))

    async def _fetch(self) -> list[Task]:
        records = await self._store.fetch_document()
        tasks: list[Task] = []
        seen: set[str] = set()
        for position, raw in enumerate(records):
            task = self._load_record(raw, position)
            if task.id in seen:
                logger.warning("Duplicate task id in document, re-keying", task_id=task.id, position=position)
                task = task.model_copy(update={"id": self._ids.legacy_id(raw, position)})
            seen.add(task.id)
            tasks.append(task)
        return tasks

    def _load_record(self, raw: Any, position: int) -> Task:
        if not isinstance(raw, dict):
            raise StoreError(f"Stored record #{position} is not an object")

        record = dict(raw)
        if not record.get("id"):
            record["id"] = self._ids.legacy_id(raw, position)
        elif not isinstance(record["id"], str):
            record["id"] = str(record["id"])
        try:
            return Task.model_validate(record)
        except PydanticValidationError as e:
            raise StoreError(f"Stored record #{position} is malformed", cause=e) from e

    def _index_of(self, task_id: str) -> int:
        for position, task in enumerate(self._tasks):
            if task.id == task_id:
                return position
        raise NotFoundError(task_id)

    def _unused_id(self) -> str:
        existing = {task.id for task in self._tasks}
        task_id = self._ids.new_id()
        while task_id in existing:
            task_id = self._ids.new_id()
        return task_id
