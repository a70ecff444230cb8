"""Root conftest: shared test configuration and fixtures."""

import os

# Must run before app.core.config is imported by any test module.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.application.person.person_service import PersonService  # noqa: E402
from app.infrastructure.database import build_engine, create_schema  # noqa: E402
from app.infrastructure.person.person_repository import SqlPersonRepository  # noqa: E402
from app.interfaces.person.dependencies import get_person_service  # noqa: E402
from app.main import app  # noqa: E402


@pytest.fixture
def engine():
    """A fresh in-memory SQLite engine with the person schema."""
    engine = build_engine("sqlite://")
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine) -> SqlPersonRepository:
    return SqlPersonRepository(engine=engine)


@pytest.fixture
def service(repository) -> PersonService:
    return PersonService(person_repo=repository)


@pytest.fixture
def client(service):
    """TestClient whose person service runs on the in-memory engine."""
    app.dependency_overrides[get_person_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def error_client(service):
    """Like client, but returns 500 responses instead of re-raising the error."""
    app.dependency_overrides[get_person_service] = lambda: service
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
