from src.task_tracker.domain.models.payloads import TaskCreate, TaskPayload, TaskUpdate
from src.task_tracker.domain.models.task import Task
from src.task_tracker.domain.models.task_priority import TaskPriority
from src.task_tracker.domain.models.task_status import TaskStatus

__all__ = [
    "Task",
    "TaskStatus",
    "TaskPriority",
    "TaskPayload",
    "TaskCreate",
    "TaskUpdate",
]
