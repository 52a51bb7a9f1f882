"""
Async engine and unit-of-work sessions.

The container owns one Database per process. Each request gets its own
session from `Database.session()`: it commits when the block exits
normally and rolls back when it raises.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from vitrine.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


class DatabaseNotConnectedError(RuntimeError):
    """Raised when a session is requested before connect()."""

    def __init__(self):
        super().__init__("Database is not connected, call connect() first")


class Database:
    """
    Engine and session factory for one database URL.

    Pool settings only apply to server databases; SQLite (used for local
    runs and tests) keeps SQLAlchemy's defaults.
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 10,
        max_overflow: int = 10,
        pool_recycle: int = 1800,
    ):
        """
        Args:
            database_url: Async SQLAlchemy URL (postgresql+asyncpg, sqlite+aiosqlite)
            echo: Log every SQL statement
            pool_size: Persistent connections kept open
            max_overflow: Extra connections allowed under load
            pool_recycle: Seconds before a pooled connection is replaced
        """
        self.database_url = database_url
        self.echo = echo
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.pool_recycle = pool_recycle
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @property
    def engine(self) -> AsyncEngine | None:
        """Underlying engine, None until connect() is called."""
        return self._engine

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    def _engine_options(self) -> dict[str, Any]:
        if self.is_sqlite:
            return {}

        options: dict[str, Any] = {
            "pool_size": self.pool_size,
            "max_overflow": self.max_overflow,
            "pool_recycle": self.pool_recycle,
            "pool_pre_ping": True,
        }
        if "asyncpg" in self.database_url:
            options["connect_args"] = {
                "server_settings": {"application_name": "vitrine"}
            }
        return options

    async def connect(self) -> None:
        """Create the engine and session factory (no-op when connected)."""
        if self._engine is not None:
            return

        self._engine = create_async_engine(
            self.database_url, echo=self.echo, **self._engine_options()
        )
        self._session_factory = async_sessionmaker(
            self._engine, expire_on_commit=False
        )
        logger.info(
            "Database engine created",
            extra={"dialect": self._engine.dialect.name},
        )

    async def disconnect(self) -> None:
        """Dispose of the engine and its pooled connections."""
        if self._engine is None:
            return

        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database engine disposed")

    async def create_tables(self) -> None:
        """Create missing tables from the ORM metadata."""
        from vitrine.infrastructure.persistence.models import Base

        if self._engine is None:
            raise DatabaseNotConnectedError()

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Unit of work.

        Usage:
            async with database.session() as session:
                repo = UserRepository(session)
                ...
        """
        if self._session_factory is None:
            raise DatabaseNotConnectedError()

        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def health_check(self) -> bool:
        """True when a trivial query round-trips."""
        if self._engine is None:
            return False

        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as e:
            logger.warning(
                "Database health check failed", extra={"error_type": type(e).__name__}
            )
            return False
        return True
