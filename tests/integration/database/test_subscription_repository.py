"""
Integration tests for SubscriptionRepository.

Usage:
    pytest tests/integration/database/test_subscription_repository.py
"""

import pytest

from vitrine.domain.entities.subscription import Subscription
from vitrine.domain.entities.user import User
from vitrine.domain.exceptions import DuplicateEntityError
from vitrine.infrastructure.persistence.repositories import (
    SubscriptionRepository,
    UserRepository,
)


async def create_user(session, username: str) -> User:
    return await UserRepository(session).create(
        User(
            username=username,
            email=f"{username}@x.com",
            full_name=username.title(),
            avatar=f"https://media.test/media/{username}.png",
            password_hash="$2b$04$hash",
        )
    )


class TestSubscriptionRepository:
    """Integration tests for SubscriptionRepository."""

    async def test_create_and_get(self, db_session):
        """Test edge is stored and found by pair."""
        alice = await create_user(db_session, "alice")
        bob = await create_user(db_session, "bob")
        repo = SubscriptionRepository(db_session)

        created = await repo.create(
            Subscription(subscriber_id=bob.id, channel_id=alice.id)
        )
        found = await repo.get(bob.id, alice.id)

        assert found is not None
        assert found.id == created.id
        assert await repo.get(alice.id, bob.id) is None

    async def test_duplicate_pair(self, db_session):
        """Test at most one edge per (subscriber, channel)."""
        alice = await create_user(db_session, "alice")
        bob = await create_user(db_session, "bob")
        repo = SubscriptionRepository(db_session)
        await repo.create(Subscription(subscriber_id=bob.id, channel_id=alice.id))

        with pytest.raises(DuplicateEntityError):
            await repo.create(
                Subscription(subscriber_id=bob.id, channel_id=alice.id)
            )

        await db_session.rollback()

    async def test_delete(self, db_session):
        """Test deleting removes the edge."""
        alice = await create_user(db_session, "alice")
        bob = await create_user(db_session, "bob")
        repo = SubscriptionRepository(db_session)
        edge = await repo.create(
            Subscription(subscriber_id=bob.id, channel_id=alice.id)
        )

        assert await repo.delete(edge.id) is True
        assert await repo.get(bob.id, alice.id) is None
        assert await repo.delete(edge.id) is False
