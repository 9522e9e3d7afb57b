"""
Pytest configuration and fixtures
"""

from typing import AsyncGenerator, Callable, Dict

import httpx
import pytest
import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool

from api.main import create_app
from core.config import Settings
from core.context import AppContext
from core.database import build_session_maker
from models import Base

INSTANCE_URL = "https://dbc-test.cloud.databricks.com"
NOTEBOOK_FOLDER = "/Shared/pipelines"


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Fully configured settings, ignoring any local .env"""
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        DATABRICKS_INSTANCE=INSTANCE_URL,
        DATABRICKS_TOKEN="dapi-test-token",
        DATABRICKS_CLUSTER_ID="0101-test-cluster",
        NOTEBOOK_PATH=NOTEBOOK_FOLDER,
        JWT_SECRET="test-signing-secret",
        FRONTEND_DIST=str(tmp_path / "dist"),
        LOG_LEVEL="WARNING",
    )


@pytest_asyncio.fixture(scope="function")
async def test_engine(test_settings):
    """Create test database engine"""
    engine = create_async_engine(
        test_settings.database_url,
        echo=False,
        poolclass=NullPool,  # Disable connection pooling for tests
    )

    # SQLite ignores foreign keys unless asked; PostgreSQL always enforces them
    @event.listens_for(engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Drop all tables after test
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create database session for tests"""
    async_session_maker = build_session_maker(test_engine)

    async with async_session_maker() as session:
        yield session
        await session.rollback()


@pytest.fixture
def upstream_routes() -> Dict[str, Callable[[httpx.Request], httpx.Response]]:
    """
    Fake upstream platform: map a URL path to a handler.

    Tests replace entries to simulate different upstream answers; unknown
    paths answer 404.
    """
    return {}


@pytest.fixture
def upstream_requests():
    """Every request the fake upstream received, in order"""
    return []


@pytest.fixture
def upstream_transport(upstream_routes, upstream_requests) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        upstream_requests.append(request)
        route = upstream_routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"error_code": "ENDPOINT_NOT_FOUND"})
        return route(request)

    return httpx.MockTransport(handler)


@pytest.fixture
def app_context(test_settings, test_engine, upstream_transport) -> AppContext:
    return AppContext(
        settings=test_settings,
        engine=test_engine,
        session_maker=build_session_maker(test_engine),
        upstream_transport=upstream_transport,
    )


@pytest_asyncio.fixture
async def client(app_context) -> AsyncGenerator[httpx.AsyncClient, None]:
    """HTTP client driving the app in-process"""
    app = create_app(context=app_context)
    transport = httpx.ASGITransport(app=app)

    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as test_client:
        yield test_client


@pytest.fixture
def workspace_objects():
    """Mock workspace listing"""
    return [
        {"path": f"{NOTEBOOK_FOLDER}/Sales_Ingest", "object_type": "NOTEBOOK", "object_id": 11, "language": "PYTHON"},
        {"path": f"{NOTEBOOK_FOLDER}/sales_notes.txt", "object_type": "FILE", "object_id": 12},
        {"path": f"{NOTEBOOK_FOLDER}/Inventory_Load", "object_type": "NOTEBOOK", "object_id": 13, "language": "SQL"},
        {"path": f"{NOTEBOOK_FOLDER}/archive", "object_type": "DIRECTORY", "object_id": 14},
    ]
