from tasktrack.core.domain.task.task import Task
from tasktrack.core.domain.task.task_draft import TaskDraft
from tasktrack.core.domain.task.task_query import SORTABLE_FIELDS, TaskQuery

__all__ = ["Task", "TaskDraft", "TaskQuery", "SORTABLE_FIELDS"]
