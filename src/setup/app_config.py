import inject

from src.setup.db_config import DatabaseSettings, get_database_settings
from src.task_tracker.domain.repositories import TaskRepository
from src.task_tracker.infrastructure.database.orm import DatabaseOrm
from src.task_tracker.infrastructure.database.repositories import SqlAlchemyTaskRepository


def configure_di(settings: DatabaseSettings | None = None) -> None:
    """Bind the task store into the DI container. Later calls are no-ops."""
    if inject.is_configured():
        return
    if settings is None:
        settings = get_database_settings()

    orm = DatabaseOrm(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

    def _config(binder: inject.Binder) -> None:
        binder.bind(DatabaseOrm, orm)
        binder.bind(TaskRepository, SqlAlchemyTaskRepository(orm))

    inject.configure(_config)
