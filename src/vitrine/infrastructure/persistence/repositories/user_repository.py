"""
User repository implementation using SQLAlchemy.
"""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from vitrine.domain.entities.user import User
from vitrine.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    ValidationError,
)
from vitrine.domain.repositories.i_user_repository import IUserRepository
from vitrine.domain.value_objects import EmailAddress
from vitrine.infrastructure.persistence.models import UserModel, WatchHistoryModel

# Fields update_fields() may touch. The password hash only changes
# through save().
UPDATABLE_FIELDS = frozenset(
    {"full_name", "email", "avatar", "cover_image", "refresh_token"}
)


class UserRepository(IUserRepository):
    """
    SQLAlchemy implementation of user repository.

    Uniqueness of username and email is guaranteed by table constraints;
    violations surface as DuplicateEntityError.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, user: User) -> User:
        """
        Create new user in database.

        Args:
            user: User entity to create

        Returns:
            Created user entity

        Raises:
            DuplicateEntityError: If username or email already exists
        """
        model = UserModel(
            id=user.id,
            username=user.username,
            email=user.email,
            full_name=user.full_name,
            avatar=user.avatar,
            cover_image=user.cover_image,
            password_hash=user.password_hash,
            refresh_token=user.refresh_token,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

        self.session.add(model)
        await self._flush_unique("username or email")
        await self.session.refresh(model)

        return await self._to_entity(model)

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User unique identifier

        Returns:
            User entity if found, None otherwise
        """
        return await self._fetch_one(UserModel.id == user_id)

    async def get_by_username_or_email(
        self, username: Optional[str], email: Optional[str]
    ) -> Optional[User]:
        """
        Get first user whose username or email matches.

        Args:
            username: Username to match (ignored if None/blank)
            email: Email to match (ignored if None/blank)

        Returns:
            User entity if found, None otherwise
        """
        conditions = []
        if username and username.strip():
            conditions.append(UserModel.username == username.strip().lower())
        if email and email.strip():
            conditions.append(UserModel.email == email.strip().lower())

        if not conditions:
            return None

        stmt = select(UserModel).where(or_(*conditions)).limit(1)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return await self._to_entity(model) if model else None

    async def update_fields(self, user_id: UUID, **fields: Any) -> Optional[User]:
        """
        Update selected profile fields of a user.

        Args:
            user_id: User unique identifier
            **fields: Subset of UPDATABLE_FIELDS

        Returns:
            Updated user entity, None if not found

        Raises:
            ValueError: If a non-updatable field is passed
            DuplicateEntityError: If the new email is taken
        """
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields cannot be updated: {sorted(unknown)}")

        model = await self._get_model(user_id)
        if not model:
            return None

        if "email" in fields:
            fields["email"] = self._normalize_email(fields["email"])

        for name, value in fields.items():
            setattr(model, name, value)
        model.updated_at = datetime.now()

        await self._flush_unique("this email")
        await self.session.refresh(model)

        return await self._to_entity(model)

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
        model = await self._get_model(user.id)
        if not model:
            raise EntityNotFoundError("User", str(user.id))

        model.username = user.username
        model.email = user.email
        model.full_name = user.full_name
        model.avatar = user.avatar
        model.cover_image = user.cover_image
        model.password_hash = user.password_hash
        model.refresh_token = user.refresh_token
        model.updated_at = datetime.now()

        await self._flush_unique("username or email")
        await self.session.refresh(model)

        return await self._to_entity(model)

    # ================================================================
    # Helpers
    # ================================================================

    async def _get_model(self, user_id: UUID) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def _fetch_one(self, condition) -> Optional[User]:
        stmt = select(UserModel).where(condition)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return await self._to_entity(model) if model else None

    async def _flush_unique(self, identifier: str) -> None:
        """Flush pending changes, mapping unique violations to a domain error."""
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise DuplicateEntityError("User", identifier) from e

    @staticmethod
    def _normalize_email(email: str) -> str:
        try:
            return str(EmailAddress(email))
        except ValueError as e:
            raise ValidationError("email", str(e)) from e

    async def _watch_history_ids(self, user_id: UUID) -> list[UUID]:
        stmt = (
            select(WatchHistoryModel.video_id)
            .where(WatchHistoryModel.user_id == user_id)
            .order_by(WatchHistoryModel.position)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def _to_entity(self, model: UserModel) -> User:
        """
        Convert UserModel to User entity.

        Args:
            model: SQLAlchemy model

        Returns:
            User domain entity
        """
        return User(
            id=model.id,
            username=model.username,
            email=model.email,
            full_name=model.full_name,
            avatar=model.avatar,
            cover_image=model.cover_image,
            password_hash=model.password_hash,
            refresh_token=model.refresh_token,
            watch_history=await self._watch_history_ids(model.id),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
