from __future__ import annotations

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.task_tracker.application.services import TaskService
from src.task_tracker.domain.models import Task, TaskCreate, TaskUpdate

router = APIRouter(prefix="/tasks", tags=["Tasks"])

_NOT_FOUND = {404: {"description": "Task not found."}}
_VALIDATION = {400: {"description": "Validation error."}}


def get_task_service() -> TaskService:
    return TaskService()


class MessageResponse(BaseModel):
    message: str = Field(..., description="Confirmation message")


class RestoreResponse(MessageResponse):
    task: Task = Field(..., description="The restored task")


@router.post(
    "",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
    responses=_VALIDATION,
)
async def create_task(
    payload: TaskCreate, service: TaskService = Depends(get_task_service)
) -> Task:
    return await service.create(payload)


@router.get("", response_model=list[Task], summary="Retrieve all active tasks")
async def find_all_tasks(service: TaskService = Depends(get_task_service)) -> list[Task]:
    """Active (non-deleted) tasks, oldest first."""
    return await service.list_active()


# Declared before "/{task_id}" so "deleted" is not read as an id.
@router.get(
    "/deleted",
    response_model=list[Task],
    summary="Retrieve all logically deleted tasks",
)
async def find_deleted_tasks(
    service: TaskService = Depends(get_task_service),
) -> list[Task]:
    return await service.list_deleted()


@router.get(
    "/{task_id}",
    response_model=Task,
    summary="Retrieve a task by its ID",
    responses=_NOT_FOUND,
)
async def find_task_by_id(
    task_id: str, service: TaskService = Depends(get_task_service)
) -> Task:
    return await service.get_by_id(task_id)


@router.patch(
    "/{task_id}",
    response_model=Task,
    summary="Update a task",
    responses={**_VALIDATION, **_NOT_FOUND},
)
async def update_task(
    task_id: str,
    payload: TaskUpdate,
    service: TaskService = Depends(get_task_service),
) -> Task:
    return await service.update(task_id, payload)


@router.delete(
    "/{task_id}",
    response_model=MessageResponse,
    summary="Logically delete a task",
    responses=_NOT_FOUND,
)
async def delete_task(
    task_id: str, service: TaskService = Depends(get_task_service)
) -> MessageResponse:
    await service.soft_delete(task_id)
    return MessageResponse(message="The task was successfully deleted.")


@router.patch(
    "/{task_id}/restore",
    response_model=RestoreResponse,
    summary="Restore a logically deleted task",
    responses={404: {"description": "Task not found or not deleted."}},
)
async def restore_task(
    task_id: str, service: TaskService = Depends(get_task_service)
) -> RestoreResponse:
    task = await service.restore(task_id)
    return RestoreResponse(message="The task was successfully restored.", task=task)
