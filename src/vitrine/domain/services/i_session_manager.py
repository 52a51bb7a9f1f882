"""
Session manager interface.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from vitrine.domain.entities.user import User
from vitrine.domain.value_objects.session import TokenPair


class ISessionManager(ABC):
    """Interface for issuing and renewing access/refresh token pairs."""

    @abstractmethod
    def issue_access_token(self, user: User) -> str:
        """Issue a short-lived access token for user."""

    @abstractmethod
    async def issue_refresh_token(self, user: User) -> str:
        """Issue a refresh token and mirror it on the user record."""

    @abstractmethod
    async def rotate(self, user_id: UUID) -> TokenPair:
        """
        Issue a fresh access/refresh pair for user.

        Raises:
            TokenIssueError: If the user cannot be loaded or persisted
        """

    @abstractmethod
    async def validate_refresh(self, token: Optional[str]) -> User:
        """
        Check a presented refresh token against the stored one.

        Raises:
            MissingTokenError: No token presented
            InvalidTokenError: Bad signature, expired or unknown subject
            RefreshTokenReusedError: Token differs from the stored one
        """
