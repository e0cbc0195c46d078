from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.task_tracker.domain.exceptions import TaskStorageError
from src.task_tracker.domain.models.task import Task
from src.task_tracker.domain.repositories import TaskRepository
from src.task_tracker.infrastructure.database.mappers import OrmMapper
from src.task_tracker.infrastructure.database.orm import DatabaseOrm, TaskRow

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class SqlAlchemyTaskRepository(TaskRepository):
    """Task storage on SQLAlchemy async sessions, one row per task."""

    def __init__(self, orm: DatabaseOrm) -> None:
        self._orm = orm

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncIterator[AsyncSession]:
        try:
            async with self._orm.session_factory() as session:
                yield session
        except SQLAlchemyError as exc:
            logger.error(
                "Task store operation failed",
                extra={"operation": operation, "error": type(exc).__name__},
            )
            raise TaskStorageError(f"Task store failed to {operation}.") from exc

    async def insert(self, fields: dict[str, Any]) -> Task:
        """Persist a new task and return it with its id and timestamps."""
        row = OrmMapper.to_task_row(uuid4().hex, fields, _utcnow())
        async with self._session("insert a task") as session:
            async with session.begin():
                session.add(row)
        return OrmMapper.to_domain_task(row)

    async def get_by_id(self, task_id: str, *, is_deleted: bool | None = None) -> Task | None:
        statement = select(TaskRow).where(TaskRow.id == task_id)
        if is_deleted is not None:
            statement = statement.where(TaskRow.is_deleted == is_deleted)

        async with self._session("fetch a task") as session:
            result = await session.execute(statement)
            row = result.scalar_one_or_none()

        if row is None:
            return None
        return OrmMapper.to_domain_task(row)

    async def find_many(self, *, is_deleted: bool) -> list[Task]:
        statement = select(TaskRow).where(TaskRow.is_deleted == is_deleted)
        async with self._session("list tasks") as session:
            result = await session.execute(statement)
            rows = result.scalars().all()
        return [OrmMapper.to_domain_task(row) for row in rows]

    async def replace(self, task_id: str, fields: dict[str, Any]) -> Task | None:
        """Merge ``fields`` into the stored row and bump ``updated_at``."""
        async with self._session("update a task") as session:
            async with session.begin():
                row = await session.get(TaskRow, task_id)
                if row is None:
                    return None
                OrmMapper.apply_fields(row, fields)
                row.updated_at = _utcnow()
        return OrmMapper.to_domain_task(row)

    async def set_flag(self, task_id: str, is_deleted: bool) -> bool:
        statement = (
            update(TaskRow)
            .where(TaskRow.id == task_id)
            .values(is_deleted=is_deleted, updated_at=_utcnow())
        )
        async with self._session("update the deletion flag") as session:
            async with session.begin():
                result = await session.execute(statement)
        return result.rowcount > 0
