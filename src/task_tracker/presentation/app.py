from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.setup.api_config import ApiSettings
from src.task_tracker.presentation.errors import register_exception_handlers
from src.task_tracker.presentation.routes import router as tasks_router

Lifespan = Callable[[FastAPI], AbstractAsyncContextManager[None]]


def create_app(settings: ApiSettings, lifespan: Lifespan | None = None) -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="API for managing tasks with CRUD operations.",
        docs_url=settings.DOCS_URL,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Tasks", "description": "Operations related to task management"}
        ],
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"],
        allow_headers=["Content-Type", "Accept"],
    )
    register_exception_handlers(app)

    @app.get("/health", include_in_schema=False)
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    app.include_router(tasks_router, prefix="")
    return app
