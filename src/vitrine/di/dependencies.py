"""
FastAPI dependency injection.

Provides dependencies for FastAPI routes using the DI container.
Use cases are built per request around the request's database session.
"""

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from vitrine.application.use_cases.change_password import ChangePassword
from vitrine.application.use_cases.get_channel_profile import GetChannelProfile
from vitrine.application.use_cases.get_watch_history import GetWatchHistory
from vitrine.application.use_cases.login_user import LoginUser
from vitrine.application.use_cases.logout_user import LogoutUser
from vitrine.application.use_cases.refresh_session import RefreshSession
from vitrine.application.use_cases.register_user import RegisterUser
from vitrine.application.use_cases.toggle_subscription import ToggleSubscription
from vitrine.application.use_cases.update_account_details import (
    UpdateAccountDetails,
)
from vitrine.application.use_cases.update_user_image import UpdateUserImage
from vitrine.config.settings import Settings
from vitrine.di.container import get_container
from vitrine.domain.services.i_media_gateway import IMediaGateway
from vitrine.domain.services.i_password_hasher import IPasswordHasher

# ================================================================
# Infrastructure Dependencies
# ================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session dependency.

    Yields async database session from container.
    Commits when the request succeeds, rolls back otherwise.
    """
    container = get_container()
    async with container.database.session() as session:
        yield session


def get_app_settings() -> Settings:
    """Get settings the container was built with."""
    return get_container().settings


def get_media_gateway() -> IMediaGateway:
    """Get object store gateway dependency."""
    return get_container().media_gateway


def get_password_hasher() -> IPasswordHasher:
    """Get password hasher dependency."""
    return get_container().password_hasher


# ================================================================
# Use Case Dependencies
# ================================================================


def get_register_user(
    session: AsyncSession = Depends(get_db_session),
    media_gateway: IMediaGateway = Depends(get_media_gateway),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
) -> RegisterUser:
    """Get RegisterUser use case dependency."""
    container = get_container()
    return RegisterUser(
        user_repository=container.get_user_repository(session),
        password_hasher=password_hasher,
        media_gateway=media_gateway,
    )


def get_login_user(
    session: AsyncSession = Depends(get_db_session),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
) -> LoginUser:
    """Get LoginUser use case dependency."""
    container = get_container()
    return LoginUser(
        user_repository=container.get_user_repository(session),
        password_hasher=password_hasher,
        session_manager=container.get_session_manager(session),
    )


def get_logout_user(
    session: AsyncSession = Depends(get_db_session),
) -> LogoutUser:
    """Get LogoutUser use case dependency."""
    return LogoutUser(user_repository=get_container().get_user_repository(session))


def get_refresh_session(
    session: AsyncSession = Depends(get_db_session),
) -> RefreshSession:
    """Get RefreshSession use case dependency."""
    return RefreshSession(session_manager=get_container().get_session_manager(session))


def get_change_password(
    session: AsyncSession = Depends(get_db_session),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
) -> ChangePassword:
    """Get ChangePassword use case dependency."""
    return ChangePassword(
        user_repository=get_container().get_user_repository(session),
        password_hasher=password_hasher,
    )


def get_update_account_details(
    session: AsyncSession = Depends(get_db_session),
) -> UpdateAccountDetails:
    """Get UpdateAccountDetails use case dependency."""
    return UpdateAccountDetails(
        user_repository=get_container().get_user_repository(session)
    )


def get_update_avatar(
    session: AsyncSession = Depends(get_db_session),
    media_gateway: IMediaGateway = Depends(get_media_gateway),
) -> UpdateUserImage:
    """Get UpdateUserImage use case for the avatar."""
    return UpdateUserImage(
        user_repository=get_container().get_user_repository(session),
        media_gateway=media_gateway,
        field="avatar",
    )


def get_update_cover_image(
    session: AsyncSession = Depends(get_db_session),
    media_gateway: IMediaGateway = Depends(get_media_gateway),
) -> UpdateUserImage:
    """Get UpdateUserImage use case for the cover image."""
    return UpdateUserImage(
        user_repository=get_container().get_user_repository(session),
        media_gateway=media_gateway,
        field="cover_image",
    )


def get_get_channel_profile(
    session: AsyncSession = Depends(get_db_session),
) -> GetChannelProfile:
    """Get GetChannelProfile use case dependency."""
    return GetChannelProfile(
        channel_view_repository=get_container().get_channel_view_repository(session)
    )


def get_get_watch_history(
    session: AsyncSession = Depends(get_db_session),
) -> GetWatchHistory:
    """Get GetWatchHistory use case dependency."""
    return GetWatchHistory(
        channel_view_repository=get_container().get_channel_view_repository(session)
    )


def get_toggle_subscription(
    session: AsyncSession = Depends(get_db_session),
) -> ToggleSubscription:
    """Get ToggleSubscription use case dependency."""
    container = get_container()
    return ToggleSubscription(
        user_repository=container.get_user_repository(session),
        subscription_repository=container.get_subscription_repository(session),
    )
