from __future__ import annotations

from typing import Any, Protocol

from src.task_tracker.domain.models.task import Task


class TaskRepository(Protocol):
    """Repository contract for persisting task records."""

    async def insert(self, fields: dict[str, Any]) -> Task:
        """Assign an id and timestamps, persist the task and return it."""

    async def get_by_id(self, task_id: str, *, is_deleted: bool | None = None) -> Task | None:
        """Return the task with ``task_id``, optionally filtered by its deletion flag."""

    async def find_many(self, *, is_deleted: bool) -> list[Task]:
        """Return every task whose deletion flag equals ``is_deleted``."""

    async def replace(self, task_id: str, fields: dict[str, Any]) -> Task | None:
        """Merge ``fields`` into the stored task and return its new state."""

    async def set_flag(self, task_id: str, is_deleted: bool) -> bool:
        """Update only the deletion flag. Returns False when the task is unknown."""
