from datetime import date, datetime

from pydantic import Field

from src.task_tracker.domain.models.base import CamelModel
from src.task_tracker.domain.models.task_priority import TaskPriority
from src.task_tracker.domain.models.task_status import TaskStatus


class Task(CamelModel):
    id: str = Field(description="Unique task identifier.")
    title: str = Field(description="The title of the task", examples=["Fix login bug"])
    description: str = Field(
        description="The description of the task",
        examples=["Write detailed API documentation for the Swagger UI."],
    )
    status: TaskStatus = Field(
        default=TaskStatus.PENDING, description="The status of the task"
    )
    is_deleted: bool = Field(
        default=False, description="Indicates if the task is deleted"
    )
    assignee: str | None = Field(
        default=None, description="The person assignee for the task"
    )
    priority: TaskPriority = Field(
        default=TaskPriority.NORMAL, description="The priority of the task"
    )
    start_date: date | None = Field(default=None, description="The start date of the task")
    end_date: date | None = Field(default=None, description="The end date of the task")
    rating: int | None = Field(
        default=None, ge=1, le=5, description="The rating of the task"
    )
    created_at: datetime | None = Field(
        default=None, description="When the task was created."
    )
    updated_at: datetime | None = Field(
        default=None, description="When the task was last updated."
    )
