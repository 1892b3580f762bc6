"""Shared pytest fixtures for unit and integration tests."""

import os

# Settings are read at import time; point the app at an in-memory database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.database import AsyncSessionLocal, close_db, drop_db, init_db
from app.services.transcript_service import TranscriptService


@pytest.fixture
async def database():
    """Fresh schema and a fresh id allocator for every test."""
    await init_db()
    app.state.transcript_service = TranscriptService()
    yield
    await drop_db()
    # Connections are bound to the test's event loop
    await close_db()


@pytest.fixture
async def db_session(database):
    """Database session for calling services and repositories directly."""
    async with AsyncSessionLocal() as session:
        yield session


@pytest.fixture
def transcript_service(database) -> TranscriptService:
    """The service instance the app serves requests with."""
    return app.state.transcript_service


@pytest.fixture
async def async_client(database):
    """Async HTTP client bound to the ASGI app."""
    transport = ASGITransport(app=app)
    client = AsyncClient(transport=transport, base_url="http://test", timeout=30.0)
    yield client
    await client.aclose()


@pytest.fixture
async def student_id(async_client: AsyncClient) -> int:
    """Create a student through the API and return its id."""
    resp = await async_client.post("/students", json={"name": "Test Student"})
    assert resp.status_code == 201, resp.text
    return resp.json()["id"]
