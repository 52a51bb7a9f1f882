"""
Logout user use case.
"""

from uuid import UUID

from vitrine.domain.repositories.i_user_repository import IUserRepository
from vitrine.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


class LogoutUser:
    """Use case for logout: forget the stored refresh token."""

    def __init__(self, user_repository: IUserRepository):
        """
        Initialize use case.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def execute(self, user_id: UUID) -> None:
        """
        Clear the refresh token of an authenticated user.

        Any refresh token issued earlier stops validating afterwards.

        Args:
            user_id: Authenticated user ID
        """
        await self.user_repository.update_fields(user_id, refresh_token=None)
        logger.info("User logged out", extra={"user_id": str(user_id)})
