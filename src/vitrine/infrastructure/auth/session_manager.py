"""
Access/refresh token lifecycle.

The live refresh token of each user is mirrored on the user record.
Issuing a new one overwrites the old value, which is what invalidates
earlier refresh tokens after rotation or logout.
"""

from typing import Optional
from uuid import UUID

from jose import JWTError
from sqlalchemy.exc import SQLAlchemyError

from vitrine.config.settings import Settings
from vitrine.domain.entities.user import User
from vitrine.domain.exceptions import (
    EntityNotFoundError,
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
    RefreshTokenReusedError,
    TokenIssueError,
)
from vitrine.domain.repositories.i_user_repository import IUserRepository
from vitrine.domain.services.i_session_manager import ISessionManager
from vitrine.domain.value_objects.session import TokenPair
from vitrine.infrastructure.auth.jwt_handler import (
    create_access_token,
    create_refresh_token,
    decode_refresh_token,
    extract_user_id,
)
from vitrine.infrastructure.monitoring.logger import get_logger
from vitrine.infrastructure.monitoring.metrics import auth_events_total

logger = get_logger(__name__)


class SessionManager(ISessionManager):
    """JWT-backed session manager with server-side refresh token mirror."""

    def __init__(self, user_repository: IUserRepository, settings: Settings):
        """
        Initialize session manager.

        Args:
            user_repository: Repository holding the mirrored refresh token
            settings: Token secrets and lifetimes
        """
        self.user_repository = user_repository
        self.settings = settings

    def issue_access_token(self, user: User) -> str:
        """Issue a short-lived access token for user."""
        return create_access_token(user, self.settings)

    async def issue_refresh_token(self, user: User) -> str:
        """
        Issue a refresh token and store it on the user record.

        Args:
            user: Token owner

        Returns:
            Encoded refresh token

        Raises:
            EntityNotFoundError: If the user record no longer exists
        """
        token = create_refresh_token(user.id, self.settings)

        updated = await self.user_repository.update_fields(
            user.id, refresh_token=token
        )
        if updated is None:
            raise EntityNotFoundError("User", str(user.id))

        return token

    async def rotate(self, user_id: UUID) -> TokenPair:
        """
        Issue a fresh access/refresh pair for a user.

        Args:
            user_id: User unique identifier

        Returns:
            New token pair (the refresh token is persisted)

        Raises:
            TokenIssueError: If the user is missing or the store write fails
        """
        try:
            user = await self.user_repository.get_by_id(user_id)
            if user is None:
                raise EntityNotFoundError("User", str(user_id))

            access_token = self.issue_access_token(user)
            refresh_token = await self.issue_refresh_token(user)
        except (EntityNotFoundError, SQLAlchemyError, JWTError) as e:
            logger.error(
                "Token rotation failed",
                extra={"user_id": str(user_id), "error_type": type(e).__name__},
            )
            auth_events_total.labels(event="rotate", outcome="failed").inc()
            raise TokenIssueError() from e

        auth_events_total.labels(event="rotate", outcome="success").inc()
        logger.info("Token pair issued", extra={"user_id": str(user_id)})
        return TokenPair(access_token=access_token, refresh_token=refresh_token)

    async def validate_refresh(self, token: Optional[str]) -> User:
        """
        Check a presented refresh token against the stored one.

        Args:
            token: Refresh token from cookie or request body

        Returns:
            The token owner

        Raises:
            MissingTokenError: If no token was presented
            InvalidTokenError: If signature, expiry or subject is invalid
            RefreshTokenReusedError: If token is not the stored one
        """
        if not token:
            raise MissingTokenError()

        try:
            payload = decode_refresh_token(token, self.settings)
        except (InvalidTokenError, ExpiredTokenError):
            auth_events_total.labels(event="refresh", outcome="invalid").inc()
            raise InvalidTokenError("Invalid refresh token")

        user = await self.user_repository.get_by_id(extract_user_id(payload))
        if user is None:
            auth_events_total.labels(event="refresh", outcome="invalid").inc()
            raise InvalidTokenError("Invalid refresh token")

        if not user.has_refresh_token(token):
            logger.warning(
                "Stale refresh token presented", extra={"user_id": str(user.id)}
            )
            auth_events_total.labels(event="refresh", outcome="reused").inc()
            raise RefreshTokenReusedError()

        return user
