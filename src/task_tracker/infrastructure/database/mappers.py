from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from src.task_tracker.domain.models.task import Task
from src.task_tracker.domain.models.task_priority import TaskPriority
from src.task_tracker.domain.models.task_status import TaskStatus
from src.task_tracker.infrastructure.database.orm import TaskRow

# Columns a caller may write. id, timestamps and the deletion flag are owned by the store.
WRITABLE_FIELDS = frozenset(
    {
        "title",
        "description",
        "status",
        "assignee",
        "priority",
        "start_date",
        "end_date",
        "rating",
    }
)


class OrmMapper:
    @staticmethod
    def to_task_row(task_id: str, fields: dict[str, Any], now: datetime) -> TaskRow:
        OrmMapper._check_writable(fields)
        return TaskRow(
            id=task_id,
            title=fields["title"],
            description=fields["description"],
            status=fields.get("status") or TaskStatus.PENDING,
            is_deleted=False,
            assignee=fields.get("assignee"),
            priority=fields.get("priority") or TaskPriority.NORMAL,
            start_date=fields.get("start_date"),
            end_date=fields.get("end_date"),
            rating=fields.get("rating"),
            created_at=now,
            updated_at=now,
        )

    @staticmethod
    def apply_fields(row: TaskRow, fields: dict[str, Any]) -> None:
        OrmMapper._check_writable(fields)
        for field, value in fields.items():
            setattr(row, field, value)

    @staticmethod
    def to_domain_task(row: TaskRow) -> Task:
        return Task(
            id=row.id,
            title=row.title,
            description=row.description,
            status=row.status,
            is_deleted=row.is_deleted,
            assignee=row.assignee,
            priority=row.priority,
            start_date=row.start_date,
            end_date=row.end_date,
            rating=row.rating,
            created_at=OrmMapper._as_utc(row.created_at),
            updated_at=OrmMapper._as_utc(row.updated_at),
        )

    @staticmethod
    def _as_utc(value: datetime | None) -> datetime | None:
        # SQLite hands back naive datetimes even for timezone-aware columns.
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @staticmethod
    def _check_writable(fields: dict[str, Any]) -> None:
        unknown = set(fields) - WRITABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields not writable on a task: {sorted(unknown)}")
