"""
Register user use case.

Creates an account after uploading its avatar (and optional cover image).
"""

from dataclasses import dataclass
from typing import Optional

from vitrine.domain.entities.user import User
from vitrine.domain.exceptions import (
    DuplicateEntityError,
    InternalError,
    MediaUploadError,
    ValidationError,
)
from vitrine.domain.repositories.i_user_repository import IUserRepository
from vitrine.domain.services.i_media_gateway import IMediaGateway
from vitrine.domain.services.i_password_hasher import IPasswordHasher
from vitrine.domain.value_objects import EmailAddress, Username
from vitrine.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


@dataclass
class RegisterUserCommand:
    """Command to register a new user."""

    full_name: str
    email: str
    username: str
    password: str
    avatar_path: Optional[str] = None
    cover_image_path: Optional[str] = None


class RegisterUser:
    """
    Use case for account registration.

    Flow:
    1. Reject blank text fields
    2. Fast-path duplicate check on username/email
    3. Require an avatar file
    4. Hash the password
    5. Upload avatar (required) and cover image (optional)
    6. Create the user and read it back

    The store's unique constraints remain the authoritative duplicate
    check; step 2 only gives an early answer. Uploaded objects are not
    removed if creation fails afterwards.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        password_hasher: IPasswordHasher,
        media_gateway: IMediaGateway,
    ):
        """
        Initialize use case.

        Args:
            user_repository: User repository
            password_hasher: Password hashing service
            media_gateway: Object store for avatar/cover uploads
        """
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.media_gateway = media_gateway

    async def execute(self, command: RegisterUserCommand) -> User:
        """
        Register a user.

        Args:
            command: Registration data with staged file paths

        Returns:
            Created user entity

        Raises:
            ValidationError: If a field is blank or the avatar is missing
            DuplicateEntityError: If username or email is taken
            MediaUploadError: If the avatar upload fails
            InternalError: If the created user cannot be read back
        """
        required = {
            "fullName": command.full_name,
            "email": command.email,
            "username": command.username,
            "password": command.password,
        }
        for field_name, value in required.items():
            if not value or not value.strip():
                raise ValidationError(field_name, "All fields are required")

        try:
            username = str(Username(command.username))
        except ValueError as e:
            raise ValidationError("username", str(e)) from e
        try:
            email = str(EmailAddress(command.email))
        except ValueError as e:
            raise ValidationError("email", str(e)) from e

        existing = await self.user_repository.get_by_username_or_email(
            username, email
        )
        if existing:
            raise DuplicateEntityError("User", "email or username")

        if not command.avatar_path:
            raise ValidationError("avatar", "Avatar file is required")

        password_hash = self.password_hasher.hash(command.password)

        avatar = await self.media_gateway.upload(command.avatar_path)
        if avatar is None:
            raise MediaUploadError("avatar")

        cover_image = None
        if command.cover_image_path:
            cover_image = await self.media_gateway.upload(command.cover_image_path)
            if cover_image is None:
                logger.warning(
                    "Cover image upload failed, registering without it",
                    extra={"username": username},
                )

        user = User(
            username=username,
            email=email,
            full_name=command.full_name,
            avatar=avatar.url,
            cover_image=cover_image.url if cover_image else None,
            password_hash=password_hash,
        )
        created = await self.user_repository.create(user)

        stored = await self.user_repository.get_by_id(created.id)
        if stored is None:
            raise InternalError("Something went wrong while registering the user")

        logger.info("User registered", extra={"user_id": str(stored.id)})
        return stored
