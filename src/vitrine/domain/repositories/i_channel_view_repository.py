"""
Channel view repository interface.

Read-only projections joining users, subscriptions and videos.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from vitrine.domain.value_objects.views import ChannelProfile, WatchHistory


class IChannelViewRepository(ABC):
    """Interface for aggregated channel and history views."""

    @abstractmethod
    async def get_channel_profile(
        self, username: str, viewer_id: Optional[UUID] = None
    ) -> Optional[ChannelProfile]:
        """
        Build the channel profile for a username.

        Args:
            username: Normalized username of the channel
            viewer_id: Requesting user, used for is_subscribed

        Returns:
            ChannelProfile if the user exists, None otherwise
        """

    @abstractmethod
    async def get_watch_history(self, user_id: UUID) -> WatchHistory:
        """
        Resolve a user's watch history into videos with owners.

        Args:
            user_id: User whose history is read

        Returns:
            WatchHistory in stored order (empty if nothing watched)
        """
