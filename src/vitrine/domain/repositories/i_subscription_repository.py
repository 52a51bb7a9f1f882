"""
Subscription repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from vitrine.domain.entities.subscription import Subscription


class ISubscriptionRepository(ABC):
    """Interface for subscription edge persistence."""

    @abstractmethod
    async def create(self, subscription: Subscription) -> Subscription:
        """
        Create a subscription edge.

        Raises:
            DuplicateEntityError: If the pair already exists
        """

    @abstractmethod
    async def get(
        self, subscriber_id: UUID, channel_id: UUID
    ) -> Optional[Subscription]:
        """Get the edge subscriber -> channel if present."""

    @abstractmethod
    async def delete(self, subscription_id: UUID) -> bool:
        """
        Delete edge by ID.

        Returns:
            True if deleted, False if not found
        """
