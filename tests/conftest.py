"""
Content Catalog - Pytest Configuration & Shared Fixtures

Provides reusable fixtures for:
- A temporary SQLite database (aiosqlite) with the catalog schema
- Repository, content service and genre service bound to that database
- An httpx AsyncClient talking to the FastAPI app in-process
- Sample content records
"""

from datetime import datetime, timezone
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

import content_catalog.db.models  # noqa: F401
from content_catalog.api.http.contents import get_content_service
from content_catalog.db.base import Base
from content_catalog.db.repositories.content_repository import ContentRepository
from content_catalog.domains.contents.entities import Content
from content_catalog.domains.contents.services import ContentService, GenreService
from content_catalog.main import app

# ---------------------------------------------------------------------------
# Database fixtures
# ---------------------------------------------------------------------------


def _sqlite_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture
async def session_factory(tmp_path: Path):
    """Session factory bound to a fresh SQLite database with the schema created."""
    engine = create_async_engine(_sqlite_url(tmp_path / "contents.db"))
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(bind=engine, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
async def broken_session_factory(tmp_path: Path):
    """Session factory whose database has no tables, so every statement fails."""
    engine = create_async_engine(_sqlite_url(tmp_path / "empty.db"))
    yield async_sessionmaker(bind=engine, expire_on_commit=False)
    await engine.dispose()


# ---------------------------------------------------------------------------
# Service fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def repository(session_factory) -> ContentRepository:
    return ContentRepository(session_factory)


@pytest.fixture
def content_service(repository) -> ContentService:
    return ContentService(repository)


@pytest.fixture
def genre_service(content_service) -> GenreService:
    return GenreService(content_service)


# ---------------------------------------------------------------------------
# HTTP fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
async def client(content_service):
    """AsyncClient against the app with the content service bound to the test database."""
    app.dependency_overrides[get_content_service] = lambda: content_service
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def broken_client(broken_session_factory):
    """AsyncClient whose storage layer fails on every operation."""
    service = ContentService(ContentRepository(broken_session_factory))
    app.dependency_overrides[get_content_service] = lambda: service
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_content() -> Content:
    """A fully populated content record without an id."""
    return Content(
        title="The Night Manager",
        subtitle="Episode 1",
        description="A hotel night manager is recruited by an intelligence operative.",
        image_url="https://img.example.com/night-manager.jpg",
        duration_minutes=58,
        start_time=datetime(2024, 5, 1, 20, 0, tzinfo=timezone.utc),
        end_time=datetime(2024, 5, 1, 21, 0, tzinfo=timezone.utc),
        genres=["Drama", "Thriller"],
    )


SAMPLE_PAYLOAD = {
    "title": "Planet Earth",
    "subtitle": "From Pole to Pole",
    "description": "Nature documentary series.",
    "imageUrl": "https://img.example.com/planet-earth.jpg",
    "durationMinutes": 50,
    "startTime": "2024-05-02T19:00:00Z",
    "endTime": "2024-05-02T19:50:00Z",
    "genres": ["Documentary"],
}
