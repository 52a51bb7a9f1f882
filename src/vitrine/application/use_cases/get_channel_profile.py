"""
Get channel profile use case.
"""

from typing import Optional
from uuid import UUID

from vitrine.domain.exceptions import EntityNotFoundError, ValidationError
from vitrine.domain.repositories.i_channel_view_repository import (
    IChannelViewRepository,
)
from vitrine.domain.value_objects.views import ChannelProfile


class GetChannelProfile:
    """Use case for the public channel page."""

    def __init__(self, channel_view_repository: IChannelViewRepository):
        self.channel_view_repository = channel_view_repository

    async def execute(
        self, username: Optional[str], viewer_id: Optional[UUID] = None
    ) -> ChannelProfile:
        """
        Load a channel by handle.

        Args:
            username: Channel handle
            viewer_id: Requesting user, if authenticated

        Returns:
            ChannelProfile with subscription counts

        Raises:
            ValidationError: If username is blank
            EntityNotFoundError: If no such channel
        """
        if not username or not username.strip():
            raise ValidationError("username", "Username is missing")

        normalized = username.strip().lower()
        profile = await self.channel_view_repository.get_channel_profile(
            normalized, viewer_id
        )
        if profile is None:
            raise EntityNotFoundError(
                "Channel", normalized, message="Channel does not exist"
            )

        return profile
