"""
Integration tests for ChannelViewRepository.

Usage:
    pytest tests/integration/database/test_channel_view_repository.py
"""

from uuid import uuid4

from vitrine.domain.entities.subscription import Subscription
from vitrine.domain.entities.user import User
from vitrine.infrastructure.persistence.models import (
    VideoModel,
    WatchHistoryModel,
)
from vitrine.infrastructure.persistence.repositories import (
    ChannelViewRepository,
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


async def follow(session, subscriber: User, channel: User) -> None:
    await SubscriptionRepository(session).create(
        Subscription(subscriber_id=subscriber.id, channel_id=channel.id)
    )


async def create_video(session, owner: User, title: str) -> VideoModel:
    video = VideoModel(
        id=uuid4(),
        owner_id=owner.id,
        title=title,
        description=f"{title} description",
        video_file=f"https://media.test/media/{title}.mp4",
        thumbnail=f"https://media.test/media/{title}.jpg",
        duration=12.5,
        views=7,
        is_published=True,
    )
    session.add(video)
    await session.flush()
    return video


class TestChannelProfile:
    """Integration tests for channel profile aggregation."""

    async def test_counts(self, db_session):
        """Test subscriber and subscribed-to counts."""
        channel = await create_user(db_session, "chan")
        fans = [await create_user(db_session, f"fan{i}") for i in range(3)]
        other = await create_user(db_session, "other")
        for fan in fans:
            await follow(db_session, fan, channel)
        await follow(db_session, channel, other)

        profile = await ChannelViewRepository(db_session).get_channel_profile("chan")

        assert profile.id == channel.id
        assert profile.subscribers_count == 3
        assert profile.channels_subscribed_to_count == 1
        assert profile.is_subscribed is False

    async def test_is_subscribed_for_viewer(self, db_session):
        """Test is_subscribed reflects the viewer's edge."""
        channel = await create_user(db_session, "chan")
        fan = await create_user(db_session, "fan")
        stranger = await create_user(db_session, "stranger")
        await follow(db_session, fan, channel)
        repo = ChannelViewRepository(db_session)

        as_fan = await repo.get_channel_profile("chan", fan.id)
        as_stranger = await repo.get_channel_profile("chan", stranger.id)

        assert as_fan.is_subscribed is True
        assert as_stranger.is_subscribed is False

    async def test_no_subscriptions(self, db_session):
        """Test counts are zero for a fresh channel."""
        await create_user(db_session, "lonely")

        profile = await ChannelViewRepository(db_session).get_channel_profile(
            "LONELY"
        )

        assert profile.subscribers_count == 0
        assert profile.channels_subscribed_to_count == 0

    async def test_unknown_channel(self, db_session):
        """Test missing channel returns None."""
        repo = ChannelViewRepository(db_session)

        assert await repo.get_channel_profile("ghost") is None


class TestWatchHistory:
    """Integration tests for watch history resolution."""

    async def test_history_in_order_with_owners(self, db_session):
        """Test videos come back in stored order with owner projection."""
        viewer = await create_user(db_session, "viewer")
        creator = await create_user(db_session, "creator")
        first = await create_video(db_session, creator, "first")
        second = await create_video(db_session, viewer, "second")
        db_session.add_all(
            [
                WatchHistoryModel(user_id=viewer.id, position=0, video_id=second.id),
                WatchHistoryModel(user_id=viewer.id, position=1, video_id=first.id),
            ]
        )
        await db_session.flush()

        history = await ChannelViewRepository(db_session).get_watch_history(
            viewer.id
        )

        assert [v.id for v in history.videos] == [second.id, first.id]
        assert history.videos[0].owner.username == "viewer"
        assert history.videos[1].owner.username == "creator"
        assert history.videos[1].owner.avatar == creator.avatar
        assert history.videos[1].title == "first"

    async def test_empty_history(self, db_session):
        """Test user with no history gets an empty result."""
        viewer = await create_user(db_session, "viewer")

        history = await ChannelViewRepository(db_session).get_watch_history(
            viewer.id
        )

        assert history.user_id == viewer.id
        assert len(history) == 0

    async def test_user_entity_carries_history_ids(self, db_session):
        """Test user entity lists watched video IDs in order."""
        viewer = await create_user(db_session, "viewer")
        video = await create_video(db_session, viewer, "clip")
        db_session.add(
            WatchHistoryModel(user_id=viewer.id, position=0, video_id=video.id)
        )
        await db_session.flush()

        user = await UserRepository(db_session).get_by_id(viewer.id)

        assert user.watch_history == [video.id]
