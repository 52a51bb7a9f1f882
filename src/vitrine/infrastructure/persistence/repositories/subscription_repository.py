"""
Subscription repository implementation using SQLAlchemy.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from vitrine.domain.entities.subscription import Subscription
from vitrine.domain.exceptions import DuplicateEntityError
from vitrine.domain.repositories.i_subscription_repository import (
    ISubscriptionRepository,
)
from vitrine.infrastructure.persistence.models import SubscriptionModel


class SubscriptionRepository(ISubscriptionRepository):
    """
    SQLAlchemy implementation of subscription repository.

    One row per (subscriber, channel) pair, enforced by a unique constraint.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, subscription: Subscription) -> Subscription:
        """
        Create a new subscription edge.

        Args:
            subscription: Subscription entity to persist

        Returns:
            Created subscription

        Raises:
            DuplicateEntityError: If subscriber already follows channel
        """
        model = SubscriptionModel(
            id=subscription.id,
            subscriber_id=subscription.subscriber_id,
            channel_id=subscription.channel_id,
            created_at=subscription.created_at,
            updated_at=subscription.updated_at,
        )

        self.session.add(model)
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise DuplicateEntityError(
                "Subscription", f"channel {subscription.channel_id}"
            ) from e

        return self._to_entity(model)

    async def get(
        self, subscriber_id: UUID, channel_id: UUID
    ) -> Optional[Subscription]:
        """
        Retrieve the edge subscriber -> channel.

        Args:
            subscriber_id: Following user
            channel_id: Followed user

        Returns:
            Subscription if found, None otherwise
        """
        stmt = select(SubscriptionModel).where(
            SubscriptionModel.subscriber_id == subscriber_id,
            SubscriptionModel.channel_id == channel_id,
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        return self._to_entity(model) if model else None

    async def delete(self, subscription_id: UUID) -> bool:
        """
        Delete subscription by ID.

        Args:
            subscription_id: Subscription unique identifier

        Returns:
            True if deleted, False if not found
        """
        stmt = select(SubscriptionModel).where(SubscriptionModel.id == subscription_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return False

        await self.session.delete(model)
        await self.session.flush()

        return True

    def _to_entity(self, model: SubscriptionModel) -> Subscription:
        """Convert SubscriptionModel to Subscription entity."""
        return Subscription(
            id=model.id,
            subscriber_id=model.subscriber_id,
            channel_id=model.channel_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
