"""
Refresh session use case.
"""

from typing import Optional

from vitrine.domain.services.i_session_manager import ISessionManager
from vitrine.domain.value_objects.session import TokenPair


class RefreshSession:
    """Use case for exchanging a refresh token for a new token pair."""

    def __init__(self, session_manager: ISessionManager):
        """
        Initialize use case.

        Args:
            session_manager: Token validator and issuer
        """
        self.session_manager = session_manager

    async def execute(self, refresh_token: Optional[str]) -> TokenPair:
        """
        Validate the presented token and rotate.

        Args:
            refresh_token: Token from cookie or request body

        Returns:
            New token pair; the presented token is invalid afterwards

        Raises:
            MissingTokenError: If no token was presented
            InvalidTokenError: If the token is forged, expired or orphaned
            RefreshTokenReusedError: If the token was already rotated out
        """
        user = await self.session_manager.validate_refresh(refresh_token)
        return await self.session_manager.rotate(user.id)
