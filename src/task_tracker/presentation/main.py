from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import inject
import uvicorn
from fastapi import FastAPI

from src.setup.api_config import get_api_settings
from src.setup.app_config import configure_di
from src.setup.db_config import get_database_settings
from src.setup.logging_config import configure_logging
from src.task_tracker.infrastructure.database.orm import DatabaseOrm
from src.task_tracker.presentation.app import create_app

settings = get_api_settings()
db_settings = get_database_settings()
configure_logging(settings.LOG_LEVEL, sql_echo=db_settings.DATABASE_ECHO)
# Configure DI once at process start
configure_di(db_settings)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    orm: DatabaseOrm = inject.instance(DatabaseOrm)
    if db_settings.AUTO_CREATE_SCHEMA:
        await orm.create_schema()
    yield
    await orm.dispose()


app = create_app(settings, lifespan=lifespan)


def run() -> None:
    uvicorn.run(
        "src.task_tracker.presentation.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    run()
