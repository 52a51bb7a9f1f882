"""
Dependency Injection Container for Vitrine.

Manages process-wide clients (database, object store, hasher) and builds
session-scoped repositories and services.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from vitrine.config.settings import Settings, get_settings
from vitrine.domain.repositories.i_channel_view_repository import (
    IChannelViewRepository,
)
from vitrine.domain.repositories.i_subscription_repository import (
    ISubscriptionRepository,
)
from vitrine.domain.repositories.i_user_repository import IUserRepository
from vitrine.domain.services.i_media_gateway import IMediaGateway
from vitrine.domain.services.i_password_hasher import IPasswordHasher
from vitrine.domain.services.i_session_manager import ISessionManager
from vitrine.infrastructure.auth.password_hasher import BcryptPasswordHasher
from vitrine.infrastructure.auth.session_manager import SessionManager
from vitrine.infrastructure.media.s3_media_gateway import S3MediaGateway
from vitrine.infrastructure.persistence.database import Database
from vitrine.infrastructure.persistence.repositories.channel_view_repository import (  # noqa: E501
    ChannelViewRepository,
)
from vitrine.infrastructure.persistence.repositories.subscription_repository import (  # noqa: E501
    SubscriptionRepository,
)
from vitrine.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)


class DIContainer:
    """
    Dependency Injection Container.

    Process-wide clients are created lazily and cached.
    Repositories and the session manager wrap a request session and are
    built per call.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize container with None instances.

        Args:
            settings: Settings to use (defaults to get_settings())
        """
        self._settings = settings

        # Infrastructure
        self._database: Optional[Database] = None
        self._media_gateway: Optional[IMediaGateway] = None

        # Domain Services
        self._password_hasher: Optional[IPasswordHasher] = None

    @property
    def settings(self) -> Settings:
        """Settings the container builds its clients from."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    async def initialize(self) -> None:
        """Initialize all services and establish connections."""
        await self.database.connect()

    async def shutdown(self) -> None:
        """Cleanup resources and close connections."""
        if self._database:
            await self._database.disconnect()

    # Infrastructure Getters

    @property
    def database(self) -> Database:
        """Get database instance."""
        if self._database is None:
            self._database = Database(
                database_url=self.settings.DATABASE_URL,
                echo=self.settings.DATABASE_ECHO,
            )
        return self._database

    @property
    def media_gateway(self) -> IMediaGateway:
        """Get object store gateway instance."""
        if self._media_gateway is None:
            settings = self.settings
            self._media_gateway = S3MediaGateway(
                bucket_name=settings.S3_BUCKET_NAME,
                region=settings.S3_REGION,
                endpoint_url=settings.S3_ENDPOINT_URL,
                access_key_id=settings.S3_ACCESS_KEY_ID,
                secret_access_key=settings.S3_SECRET_ACCESS_KEY,
                public_base_url=settings.MEDIA_PUBLIC_BASE_URL,
                key_prefix=settings.MEDIA_KEY_PREFIX,
            )
        return self._media_gateway

    # Domain Service Getters

    @property
    def password_hasher(self) -> IPasswordHasher:
        """Get password hasher instance."""
        if self._password_hasher is None:
            self._password_hasher = BcryptPasswordHasher(
                rounds=self.settings.PASSWORD_HASH_ROUNDS
            )
        return self._password_hasher

    def get_session_manager(self, session: AsyncSession) -> ISessionManager:
        """
        Get session manager bound to a database session.

        Args:
            session: Active database session

        Returns:
            SessionManager instance
        """
        return SessionManager(
            user_repository=self.get_user_repository(session),
            settings=self.settings,
        )

    # Repository Getters

    def get_user_repository(self, session: AsyncSession) -> IUserRepository:
        """Get user repository for session."""
        return UserRepository(session)

    def get_subscription_repository(
        self, session: AsyncSession
    ) -> ISubscriptionRepository:
        """Get subscription repository for session."""
        return SubscriptionRepository(session)

    def get_channel_view_repository(
        self, session: AsyncSession
    ) -> IChannelViewRepository:
        """Get channel/watch-history view repository for session."""
        return ChannelViewRepository(session)


# Global container instance
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """Get global DI container instance."""
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def set_container(container: Optional[DIContainer]) -> None:
    """Replace the global container (None resets it)."""
    global _container
    _container = container


async def initialize_container() -> DIContainer:
    """Initialize and return DI container."""
    container = get_container()
    await container.initialize()
    return container


async def shutdown_container() -> None:
    """Shutdown DI container."""
    container = get_container()
    await container.shutdown()
