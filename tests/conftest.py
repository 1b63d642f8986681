import pytest
from fastapi.testclient import TestClient

from streams_api.api.deps import get_stream_repository
from streams_api.core.config import Settings
from streams_api.core.db import Database
from streams_api.db.repositories import StreamRepository, UserRepository
from streams_api.main import create_app
from tests.fakes import InMemoryStreamRepository


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'streams.db'}"


@pytest.fixture
async def database(database_url):
    db = await Database.connect(database_url, query_timeout=5)
    await db.create_all()
    yield db
    await db.close()


@pytest.fixture
def stream_repository(database) -> StreamRepository:
    return StreamRepository(database)


@pytest.fixture
def user_repository(database) -> UserRepository:
    return UserRepository(database)


@pytest.fixture
def settings(database_url) -> Settings:
    return Settings(database_url=database_url, auto_create_schema=True, log_level="WARNING")


@pytest.fixture
def stream_store() -> InMemoryStreamRepository:
    return InMemoryStreamRepository()


@pytest.fixture
def app(settings, stream_store):
    application = create_app(settings)
    application.dependency_overrides[get_stream_repository] = lambda: stream_store
    return application


@pytest.fixture
def client(app) -> TestClient:
    # Без контекстного менеджера lifespan не запускается и БД не нужна
    return TestClient(app)
