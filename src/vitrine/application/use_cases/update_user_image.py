"""
Update avatar / cover image use case.
"""

from typing import Optional
from uuid import UUID

from vitrine.domain.entities.user import User
from vitrine.domain.exceptions import (
    EntityNotFoundError,
    MediaUploadError,
    ValidationError,
)
from vitrine.domain.repositories.i_user_repository import IUserRepository
from vitrine.domain.services.i_media_gateway import IMediaGateway
from vitrine.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)

# User field -> label used in error messages
IMAGE_FIELDS = {
    "avatar": "avatar",
    "cover_image": "cover image",
}


class UpdateUserImage:
    """
    Use case for replacing the avatar or the cover image.

    Flow:
    1. Read the current reference
    2. Upload the new file
    3. Persist the new URL
    4. Delete the previous object (failure is logged, not raised)
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        media_gateway: IMediaGateway,
        field: str,
    ):
        """
        Initialize use case.

        Args:
            user_repository: User repository
            media_gateway: Object store
            field: "avatar" or "cover_image"
        """
        if field not in IMAGE_FIELDS:
            raise ValueError(f"Unsupported image field: {field}")

        self.user_repository = user_repository
        self.media_gateway = media_gateway
        self.field = field

    async def execute(self, user_id: UUID, local_path: Optional[str]) -> User:
        """
        Replace the image.

        Args:
            user_id: Authenticated user ID
            local_path: Staged upload

        Returns:
            Updated user entity

        Raises:
            ValidationError: If no file was supplied
            EntityNotFoundError: If user not found
            MediaUploadError: If the upload fails
        """
        label = IMAGE_FIELDS[self.field]
        if not local_path:
            raise ValidationError(label, f"{label.capitalize()} file is missing")

        user = await self.user_repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", str(user_id))
        previous = getattr(user, self.field)

        uploaded = await self.media_gateway.upload(local_path)
        if uploaded is None or not uploaded.url:
            raise MediaUploadError(label)

        updated = await self.user_repository.update_fields(
            user_id, **{self.field: uploaded.url}
        )
        if updated is None:
            raise EntityNotFoundError("User", str(user_id))

        if previous and previous != uploaded.url:
            deleted = await self.media_gateway.delete(previous)
            if not deleted:
                logger.warning(
                    "Previous image could not be deleted",
                    extra={"user_id": str(user_id), "field": self.field},
                )

        return updated
