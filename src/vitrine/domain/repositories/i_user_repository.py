"""
User repository interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional
from uuid import UUID

from vitrine.domain.entities.user import User


class IUserRepository(ABC):
    """Interface for user persistence operations."""

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Create new user.

        Args:
            user: User entity to create (password already hashed)

        Returns:
            Created user entity

        Raises:
            DuplicateEntityError: If username or email is taken
        """

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User unique identifier

        Returns:
            User entity if found, None otherwise
        """

    @abstractmethod
    async def get_by_username_or_email(
        self, username: Optional[str], email: Optional[str]
    ) -> Optional[User]:
        """
        Get the first user matching either username or email.

        Args:
            username: Normalized username (ignored if None)
            email: Normalized email (ignored if None)

        Returns:
            User entity if found, None otherwise
        """

    @abstractmethod
    async def update_fields(self, user_id: UUID, **fields: Any) -> Optional[User]:
        """
        Update a subset of mutable profile fields.

        Password hashes cannot be changed through this method; use save().

        Args:
            user_id: User unique identifier
            **fields: Field names and new values

        Returns:
            Updated user entity, None if user not found
        """

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Persist every field of an existing user.

        Args:
            user: User entity with updated data

        Returns:
            Updated user entity

        Raises:
            EntityNotFoundError: If user does not exist
        """
