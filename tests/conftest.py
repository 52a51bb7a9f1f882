"""
Test fixtures and configuration.

Store-backed tests run against a throwaway SQLite file (aiosqlite), so no
database server is needed. The object store is replaced by an in-memory
gateway.
"""

import os
from pathlib import Path
from typing import AsyncGenerator, List, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from vitrine.config.settings import Settings, reset_settings
from vitrine.di import get_container, get_media_gateway, set_container
from vitrine.domain.services.i_media_gateway import IMediaGateway
from vitrine.domain.value_objects.session import UploadedMedia
from vitrine.infrastructure.persistence.database import Database
from vitrine.main import create_app


class InMemoryMediaGateway(IMediaGateway):
    """Media gateway double keeping uploaded objects in a dict."""

    base_url = "https://media.test"

    def __init__(self):
        self.objects: dict[str, bytes] = {}
        self.deleted: List[str] = []
        self.fail_uploads = False
        self.fail_deletes = False

    async def upload(self, local_path: Optional[str]) -> Optional[UploadedMedia]:
        if not local_path:
            return None
        try:
            if self.fail_uploads:
                return None
            key = f"media/{Path(local_path).name}"
            self.objects[key] = Path(local_path).read_bytes()
            return UploadedMedia(url=f"{self.base_url}/{key}", public_id=key)
        finally:
            if os.path.exists(local_path):
                os.remove(local_path)

    async def delete(self, url_or_public_id: str) -> bool:
        if self.fail_deletes:
            return False
        key = url_or_public_id.replace(f"{self.base_url}/", "")
        self.deleted.append(key)
        return self.objects.pop(key, None) is not None


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a temporary SQLite file and upload directory."""
    return Settings(
        ENV="test",
        LOG_LEVEL="WARNING",
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path}/test.db",
        ACCESS_TOKEN_SECRET="test-access-secret",
        ACCESS_TOKEN_EXPIRE_MINUTES=15,
        REFRESH_TOKEN_SECRET="test-refresh-secret",
        REFRESH_TOKEN_EXPIRE_DAYS=10,
        PASSWORD_HASH_ROUNDS=4,
        COOKIE_SECURE=True,
        UPLOAD_TEMP_DIR=str(tmp_path / "uploads"),
    )


@pytest_asyncio.fixture(scope="function")
async def test_db(settings: Settings) -> AsyncGenerator[Database, None]:
    """
    Create test database and tables.

    Each test gets a clean database file.
    """
    db = Database(database_url=settings.DATABASE_URL, echo=False)
    await db.connect()
    await db.create_tables()

    yield db

    await db.disconnect()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_db: Database) -> AsyncGenerator[AsyncSession, None]:
    """Provide database session for tests."""
    async with test_db.session() as session:
        yield session


@pytest.fixture
def media_gateway() -> InMemoryMediaGateway:
    """In-memory object store."""
    return InMemoryMediaGateway()


@pytest_asyncio.fixture(scope="function")
async def app(settings: Settings, media_gateway: InMemoryMediaGateway):
    """
    Application wired to the test database and in-memory object store.

    ASGITransport does not run the lifespan, so the container is
    initialized here.
    """
    application = create_app(settings)
    container = get_container()
    await container.initialize()
    await container.database.create_tables()

    application.dependency_overrides[get_media_gateway] = lambda: media_gateway

    yield application

    application.dependency_overrides.clear()
    await container.shutdown()
    set_container(None)
    reset_settings()


@pytest_asyncio.fixture(scope="function")
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """
    Provide HTTP client for API testing.

    HTTPS base URL so secure cookies are sent back.
    """
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="https://test"
    ) as ac:
        yield ac
