"""
Authentication dependencies for access token validation.

The access token is read from the `accessToken` cookie first and from an
`Authorization: Bearer` header otherwise.
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from vitrine.config.settings import Settings
from vitrine.di.container import get_container
from vitrine.di.dependencies import get_app_settings, get_db_session
from vitrine.domain.entities.user import User
from vitrine.domain.exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
)
from vitrine.infrastructure.auth.jwt_handler import (
    decode_access_token,
    extract_user_id,
)

ACCESS_TOKEN_COOKIE = "accessToken"

# Bearer token security scheme (optional, cookies are accepted too)
security = HTTPBearer(auto_error=False)


def extract_access_token(
    request: Request, credentials: Optional[HTTPAuthorizationCredentials]
) -> Optional[str]:
    """Access token from cookie or Authorization header, if any."""
    token = request.cookies.get(ACCESS_TOKEN_COOKIE)
    if token:
        return token
    if credentials and credentials.credentials:
        return credentials.credentials
    return None


async def _load_user(token: str, session: AsyncSession, settings: Settings) -> User:
    payload = decode_access_token(token, settings)
    user_id = extract_user_id(payload)

    user_repo = get_container().get_user_repository(session)
    user = await user_repo.get_by_id(user_id)
    if user is None:
        raise InvalidTokenError("Invalid access token")
    return user


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_app_settings),
) -> User:
    """
    Load the authenticated user from the access token.

    Args:
        request: Incoming request (cookies)
        credentials: Optional Bearer credentials
        session: Database session from dependency injection
        settings: Token secrets

    Returns:
        User domain entity

    Raises:
        MissingTokenError: If no token was sent
        InvalidTokenError: If the token is invalid or its user is gone
        ExpiredTokenError: If the token has expired
    """
    token = extract_access_token(request, credentials)
    if not token:
        raise MissingTokenError()

    return await _load_user(token, session, settings)


async def get_optional_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_app_settings),
) -> Optional[User]:
    """Authenticated user if a valid token was sent, None otherwise."""
    token = extract_access_token(request, credentials)
    if not token:
        return None

    try:
        return await _load_user(token, session, settings)
    except (InvalidTokenError, ExpiredTokenError):
        return None

