from datetime import date, datetime
from enum import Enum
from typing import Annotated, Any

from pydantic import BeforeValidator, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from src.task_tracker.domain.models.base import CamelModel
from src.task_tracker.domain.models.task_priority import TaskPriority
from src.task_tracker.domain.models.task_status import TaskStatus


def _iso_date(value: Any, info: ValidationInfo) -> Any:
    """Accept ISO 8601 date or datetime strings; datetimes keep only their date part."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    message = f"{to_camel(info.field_name)} must be a valid ISO 8601 date string."
    if not isinstance(value, str):
        raise ValueError(message)
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        raise ValueError(message) from None


def _rating(value: Any) -> Any:
    # bool is an int subclass; JSON true/false is not a rating.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("Rating must be a number.")
    if value < 1:
        raise ValueError("Rating must be at least 1.")
    if value > 5:
        raise ValueError("Rating cannot exceed 5.")
    return value


def _one_of(enum_cls: type[Enum], label: str):
    allowed = [member.value for member in enum_cls]

    def check(value: Any) -> Any:
        if isinstance(value, enum_cls) or value in allowed:
            return value
        raise ValueError(f"{label} must be one of: {', '.join(allowed)}.")

    return check


IsoDate = Annotated[date, BeforeValidator(_iso_date)]
Rating = Annotated[int, BeforeValidator(_rating)]
Priority = Annotated[TaskPriority, BeforeValidator(_one_of(TaskPriority, "Priority"))]
Status = Annotated[TaskStatus, BeforeValidator(_one_of(TaskStatus, "Status"))]


class TaskPayload(CamelModel):
    """Base class for task request bodies. Unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")


class TaskCreate(TaskPayload):
    """Fields accepted when creating a task. Status is always ``pending`` on create."""

    title: str = Field(min_length=1, examples=["Implement API Endpoints"])
    description: str = Field(
        min_length=1,
        examples=["Develop and test the backend API endpoints for user management."],
    )
    assignee: str | None = Field(default=None, examples=["Max Burtton"])
    priority: Priority = Field(default=TaskPriority.NORMAL, examples=["high"])
    start_date: IsoDate | None = Field(default=None, examples=["2025-01-01"])
    end_date: IsoDate | None = Field(default=None, examples=["2025-01-15"])
    rating: Rating | None = Field(default=None, examples=[4])


class TaskUpdate(TaskPayload):
    """Partial update. Only the fields present in the body are written."""

    title: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    status: Status | None = None
    assignee: str | None = None
    priority: Priority | None = None
    start_date: IsoDate | None = None
    end_date: IsoDate | None = None
    rating: Rating | None = None

    @field_validator("title", "description", "status", "priority")
    @classmethod
    def _reject_null(cls, value, info: ValidationInfo):
        # Defaults are not validated, so this only sees values sent by the caller.
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value
