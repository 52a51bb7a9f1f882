"""
Update account details use case.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from vitrine.domain.entities.user import User
from vitrine.domain.exceptions import EntityNotFoundError, ValidationError
from vitrine.domain.repositories.i_user_repository import IUserRepository


@dataclass
class UpdateAccountDetailsCommand:
    """Command to update display name and email."""

    user_id: UUID
    full_name: Optional[str] = None
    email: Optional[str] = None


class UpdateAccountDetails:
    """Use case for updating full name and email together."""

    def __init__(self, user_repository: IUserRepository):
        """
        Initialize use case.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def execute(self, command: UpdateAccountDetailsCommand) -> User:
        """
        Update account details.

        Returns:
            Updated user entity

        Raises:
            ValidationError: If either field is missing
            DuplicateEntityError: If the email belongs to another user
            EntityNotFoundError: If user not found
        """
        full_name = (command.full_name or "").strip()
        email = (command.email or "").strip()
        if not full_name or not email:
            raise ValidationError("fullName", "Full name and email are required")

        updated = await self.user_repository.update_fields(
            command.user_id, full_name=full_name, email=email
        )
        if updated is None:
            raise EntityNotFoundError("User", str(command.user_id))

        return updated
