"""
Pytest fixtures for test database, services and HTTP client.

Each test gets its own in-memory SQLite database (aiosqlite + StaticPool)
with foreign keys enabled, so referential conflicts behave like PostgreSQL.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DB_CREATE_TABLES", "false")

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncEngine

from reservation_api.core.config import Settings
from reservation_api.db.base import Base
from reservation_api.db.engine import create_engine
from reservation_api.db.sql import SqlExecutor
from reservation_api.main import create_app
from reservation_api.services.event_service import EventService

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

FUTURE_DATE = "2999-01-01 20:00"
PAST_DATE = "2000-01-01 00:00"


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(
        DATABASE_URL=TEST_DATABASE_URL,
        ENVIRONMENT="test",
        DB_CREATE_TABLES=False,
        STATIC_DIR=str(tmp_path / "public"),
        UPLOADS_DIR=str(tmp_path / "uploads"),
    )


@pytest_asyncio.fixture
async def engine(test_settings: Settings) -> AsyncGenerator[AsyncEngine, None]:
    """Create tables, yield engine, then dispose of the database."""
    engine = create_engine(test_settings)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def sql(engine: AsyncEngine) -> SqlExecutor:
    return SqlExecutor(engine)


@pytest.fixture
def event_service(sql: SqlExecutor) -> EventService:
    return EventService(sql)


@pytest.fixture
def app(test_settings: Settings, engine: AsyncEngine):
    return create_app(settings=test_settings, engine=engine)


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def test_event(client: AsyncClient) -> dict:
    """Create an upcoming event through the API."""
    response = await client.post(
        "/eventos",
        json={"nombre": "Concierto", "fecha": FUTURE_DATE, "ubicacion": "Auditorio"},
    )
    assert response.status_code == 201
    return response.json()


@pytest_asyncio.fixture
async def past_event(client: AsyncClient) -> dict:
    """Create an event that already took place."""
    response = await client.post(
        "/eventos",
        json={"nombre": "Festival 2000", "fecha": PAST_DATE, "ubicacion": "Parque"},
    )
    assert response.status_code == 201
    return response.json()


@pytest_asyncio.fixture
async def test_reservation(client: AsyncClient, test_event: dict) -> dict:
    response = await client.post(
        "/reservas",
        json={"evento_id": test_event["id"], "nombre_usuario": "Ana", "cantidad_boletos": 2},
    )
    assert response.status_code == 201
    return response.json()
