from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.task_tracker.domain.exceptions import TaskNotFoundError, TaskOperationError

logger = logging.getLogger(__name__)


def _field_name(loc: tuple) -> str:
    parts = [str(part) for part in loc if part != "body"]
    return ".".join(parts) or "body"


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"field": _field_name(tuple(error.get("loc", ()))), "message": error.get("msg", "")}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Validation error", "detail": errors},
    )


async def _task_not_found(request: Request, exc: TaskNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


async def _task_operation_failed(request: Request, exc: TaskOperationError) -> JSONResponse:
    logger.error(
        "Request failed",
        extra={"method": request.method, "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(exc)}
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain failures onto HTTP responses. Subclasses of ``TaskNotFoundError`` become 404s too."""
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(TaskNotFoundError, _task_not_found)
    app.add_exception_handler(TaskOperationError, _task_operation_failed)
