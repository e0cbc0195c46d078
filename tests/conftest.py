from __future__ import annotations

from collections.abc import Iterator

import inject
import pytest
from fastapi.testclient import TestClient

from src.setup.api_config import ApiSettings
from src.task_tracker.application.services import TaskService
from src.task_tracker.domain.repositories import TaskRepository
from src.task_tracker.presentation.app import create_app
from tests.fakes import StubTaskRepository


@pytest.fixture
def repository() -> StubTaskRepository:
    return StubTaskRepository()


@pytest.fixture
def service(repository: StubTaskRepository) -> TaskService:
    return TaskService(repository=repository)


@pytest.fixture
def api_client(repository: StubTaskRepository) -> Iterator[TestClient]:
    """FastAPI test client whose DI container serves the in-memory repository."""

    def _config(binder: inject.Binder) -> None:
        binder.bind(TaskRepository, repository)

    inject.clear()
    inject.configure(_config)
    app = create_app(ApiSettings())
    with TestClient(app) as client:
        yield client
    inject.clear()
