from collections.abc import Iterable

from tasktrack.core.domain.task import Task, TaskQuery

_SEARCHABLE_FIELDS = ("name", "description", "project", "status", "note", "deploy")


def project_tasks(collection: Iterable[Task], query: TaskQuery) -> list[Task]:
    """Returns a new, filtered and optionally sorted list. Never mutates ``collection``."""
    needle = query.text.lower()
    selected = [task for task in collection if _matches(task, query, needle)]

    if query.sort_by is not None:
        selected.sort(key=lambda task: getattr(task, query.sort_by), reverse=query.descending)
    return selected


def _matches(task: Task, query: TaskQuery, needle: str) -> bool:
    if needle and not _contains_text(task, needle):
        return False
    if query.statuses and task.status not in query.statuses:
        return False
    if query.project is not None and task.project != query.project:
        return False
    if query.deadline is not None and task.deadline != query.deadline:
        return False
    return True


def _contains_text(task: Task, needle: str) -> bool:
    for field_name in _SEARCHABLE_FIELDS:
        value = getattr(task, field_name)
        if value and needle in value.lower():
            return True
    return False
