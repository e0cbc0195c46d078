import logging
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from functools import wraps
from typing import TypeVar, cast

import inject

from src.task_tracker.domain.exceptions import (
    TaskAlreadyDeletedError,
    TaskNotDeletedError,
    TaskNotFoundError,
    TaskOperationError,
    TaskStorageError,
)
from src.task_tracker.domain.models import Task, TaskCreate, TaskUpdate
from src.task_tracker.domain.repositories import TaskRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")

_EPOCH = datetime.min.replace(tzinfo=UTC)


def storage_failure(message: str):
    """Log a task store failure and surface it as a caller-safe ``TaskOperationError``."""

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @wraps(func)
        async def wrapper(self, *args, **kwargs) -> T:
            try:
                return await func(self, *args, **kwargs)
            except TaskStorageError as exc:
                logger.exception(
                    "Task operation failed", extra={"operation": func.__name__}
                )
                raise TaskOperationError(message) from exc

        return wrapper

    return decorator


def _created_at(task: Task) -> datetime:
    return task.created_at or _EPOCH


class TaskService:
    """Task lifecycle rules on top of the task store: soft delete, restore and ordering."""

    def __init__(self, repository: TaskRepository | None = None) -> None:
        self._repository = repository or cast(
            TaskRepository, inject.instance(TaskRepository)
        )

    @storage_failure(
        "An error occurred while saving the task. Please verify the data and try again."
    )
    async def create(self, payload: TaskCreate) -> Task:
        """Persist a new task. It always starts active and ``pending``."""
        task = await self._repository.insert(payload.model_dump())
        logger.info("Task created", extra={"task_id": task.id})
        return task

    @storage_failure("An error occurred while fetching tasks. Please try again later.")
    async def list_active(self) -> list[Task]:
        """Return active tasks, oldest first."""
        tasks = await self._repository.find_many(is_deleted=False)
        if len(tasks) > 1:
            # Stable sort: equal timestamps keep the store's order.
            tasks.sort(key=_created_at)
        return tasks

    @storage_failure("An error occurred while fetching the task.")
    async def get_by_id(self, task_id: str) -> Task:
        task = await self._repository.get_by_id(task_id, is_deleted=False)
        if task is None:
            logger.warning("Active task not found", extra={"task_id": task_id})
            raise TaskNotFoundError(task_id)
        return task

    @storage_failure(
        "An error occurred while updating the task. Please verify the data and try again."
    )
    async def update(self, task_id: str, payload: TaskUpdate) -> Task:
        """
        Apply the fields present in ``payload``.

        Deleted tasks are updated too; the deletion flag is left as is.
        """
        task = await self._repository.replace(
            task_id, payload.model_dump(exclude_unset=True)
        )
        if task is None:
            logger.warning("Task to update not found", extra={"task_id": task_id})
            raise TaskNotFoundError(task_id)
        return task

    @storage_failure("An error occurred while deleting the task. Please try again later.")
    async def soft_delete(self, task_id: str) -> None:
        task = await self._repository.get_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        if task.is_deleted:
            logger.warning("Task already deleted", extra={"task_id": task_id})
            raise TaskAlreadyDeletedError(task_id)

        if not await self._repository.set_flag(task_id, True):
            raise TaskNotFoundError(task_id)
        logger.info("Task deleted", extra={"task_id": task_id})

    @storage_failure("An error occurred while restoring the task. Please try again later.")
    async def restore(self, task_id: str) -> Task:
        task = await self._repository.get_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(
                task_id,
                f'Task with ID "{task_id}" was not found or is not marked as deleted.',
            )
        if not task.is_deleted:
            logger.warning("Task is not deleted", extra={"task_id": task_id})
            raise TaskNotDeletedError(task_id)

        if not await self._repository.set_flag(task_id, False):
            raise TaskNotFoundError(task_id)
        restored = await self._repository.get_by_id(task_id)
        if restored is None:
            raise TaskNotFoundError(task_id)
        logger.info("Task restored", extra={"task_id": task_id})
        return restored

    @storage_failure("An error occurred while fetching deleted tasks.")
    async def list_deleted(self) -> list[Task]:
        return await self._repository.find_many(is_deleted=True)
