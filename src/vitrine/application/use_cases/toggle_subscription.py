"""
Toggle subscription use case.
"""

from uuid import UUID

from vitrine.application.dto import SubscriptionToggleResult
from vitrine.domain.entities.subscription import Subscription
from vitrine.domain.exceptions import EntityNotFoundError, ValidationError
from vitrine.domain.repositories.i_subscription_repository import (
    ISubscriptionRepository,
)
from vitrine.domain.repositories.i_user_repository import IUserRepository
from vitrine.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


class ToggleSubscription:
    """
    Use case for subscribing to / unsubscribing from a channel.

    Subscribes if no edge exists, unsubscribes otherwise.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        subscription_repository: ISubscriptionRepository,
    ):
        """
        Initialize use case.

        Args:
            user_repository: User repository (channel lookup)
            subscription_repository: Subscription repository
        """
        self.user_repository = user_repository
        self.subscription_repository = subscription_repository

    async def execute(
        self, subscriber_id: UUID, channel_id: UUID
    ) -> SubscriptionToggleResult:
        """
        Toggle the edge subscriber -> channel.

        Returns:
            SubscriptionToggleResult with the new state

        Raises:
            ValidationError: If subscriber and channel are the same user
            EntityNotFoundError: If channel does not exist
            DuplicateEntityError: If a concurrent request created the edge
        """
        if subscriber_id == channel_id:
            raise ValidationError(
                "channelId", "Users cannot subscribe to their own channel"
            )

        channel = await self.user_repository.get_by_id(channel_id)
        if channel is None:
            raise EntityNotFoundError(
                "Channel", str(channel_id), message="Channel does not exist"
            )

        existing = await self.subscription_repository.get(subscriber_id, channel_id)
        if existing:
            await self.subscription_repository.delete(existing.id)
            logger.info(
                "Unsubscribed",
                extra={
                    "subscriber_id": str(subscriber_id),
                    "channel_id": str(channel_id),
                },
            )
            return SubscriptionToggleResult(channel_id=channel_id, subscribed=False)

        await self.subscription_repository.create(
            Subscription(subscriber_id=subscriber_id, channel_id=channel_id)
        )
        logger.info(
            "Subscribed",
            extra={
                "subscriber_id": str(subscriber_id),
                "channel_id": str(channel_id),
            },
        )
        return SubscriptionToggleResult(channel_id=channel_id, subscribed=True)
