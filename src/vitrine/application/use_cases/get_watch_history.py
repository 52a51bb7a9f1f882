"""
Get watch history use case.
"""

from uuid import UUID

from vitrine.domain.repositories.i_channel_view_repository import (
    IChannelViewRepository,
)
from vitrine.domain.value_objects.views import WatchHistory


class GetWatchHistory:
    """Use case for reading a user's watch history with video owners."""

    def __init__(self, channel_view_repository: IChannelViewRepository):
        self.channel_view_repository = channel_view_repository

    async def execute(self, user_id: UUID) -> WatchHistory:
        """Return the history in stored order (empty, never an error)."""
        return await self.channel_view_repository.get_watch_history(user_id)
