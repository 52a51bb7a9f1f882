"""
Change password use case.
"""

from dataclasses import dataclass
from uuid import UUID

from vitrine.domain.exceptions import (
    EntityNotFoundError,
    InvalidCredentialsError,
    ValidationError,
)
from vitrine.domain.repositories.i_user_repository import IUserRepository
from vitrine.domain.services.i_password_hasher import IPasswordHasher
from vitrine.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ChangePasswordCommand:
    """Command to change the password of an authenticated user."""

    user_id: UUID
    old_password: str
    new_password: str


class ChangePassword:
    """
    Use case for password change.

    The new password is hashed here before saving; the repository never
    hashes on its own.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        password_hasher: IPasswordHasher,
    ):
        """
        Initialize use case.

        Args:
            user_repository: User repository
            password_hasher: Password hashing service
        """
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    async def execute(self, command: ChangePasswordCommand) -> None:
        """
        Change password.

        Raises:
            EntityNotFoundError: If user not found
            InvalidCredentialsError: If old password does not verify
            ValidationError: If new password is blank or too long
        """
        user = await self.user_repository.get_by_id(command.user_id)
        if user is None:
            raise EntityNotFoundError("User", str(command.user_id))

        if not self.password_hasher.verify(command.old_password, user.password_hash):
            raise InvalidCredentialsError("Invalid old password")

        if not command.new_password or not command.new_password.strip():
            raise ValidationError("newPassword", "New password is required")

        user.password_hash = self.password_hasher.hash(command.new_password)
        user.touch()
        await self.user_repository.save(user)

        logger.info("Password changed", extra={"user_id": str(user.id)})
