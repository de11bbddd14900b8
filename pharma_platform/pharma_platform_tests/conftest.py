"""
Shared fixtures for the auth service tests.

Every app is built through create_app with an explicit directory, so tests
never depend on DATABASE_URL in the environment.
"""
import pytest
from fastapi.testclient import TestClient

from pharma_platform.pharma_platform.auth_service.config import Settings
from pharma_platform.pharma_platform.auth_service.db import create_db_engine, create_session_factory, init_db
from pharma_platform.pharma_platform.auth_service.directory.memory import InMemoryDirectory
from pharma_platform.pharma_platform.auth_service.directory.sql import SqlDirectory
from pharma_platform.pharma_platform.auth_service.main import create_app


@pytest.fixture
def settings():
    return Settings(DATABASE_URL=None, LOG_LEVEL="INFO")


@pytest.fixture
def memory_directory():
    return InMemoryDirectory()


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'auth.db'}"


@pytest.fixture
def sql_directory(database_url):
    engine = create_db_engine(database_url)
    init_db(engine)
    yield SqlDirectory(create_session_factory(engine))
    engine.dispose()


@pytest.fixture(params=["memory", "sql"])
def directory(request):
    """Runs a test once against each directory variant."""
    return request.getfixturevalue(f"{request.param}_directory")


@pytest.fixture
def client(settings, memory_directory):
    app = create_app(settings, directory=memory_directory)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sql_client(settings, sql_directory):
    app = create_app(settings, directory=sql_directory)
    with TestClient(app) as c:
        yield c
