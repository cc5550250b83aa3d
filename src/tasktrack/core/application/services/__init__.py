from tasktrack.core.application.services.access_gate import AccessGate
from tasktrack.core.application.services.identity_assigner import IdentityAssigner
from tasktrack.core.application.services.task_draft_validator import TaskDraftValidator
from tasktrack.core.application.services.task_repository import TaskRepository
from tasktrack.core.application.services.view_filter import project_tasks

__all__ = [
    "AccessGate",
    "IdentityAssigner",
    "TaskDraftValidator",
    "TaskRepository",
    "project_tasks",
]
