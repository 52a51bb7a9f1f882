"""
Unit tests for GetChannelProfile, GetWatchHistory and ToggleSubscription.

Usage:
    pytest tests/unit/application/test_views_and_subscriptions.py
"""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from vitrine.application.use_cases.get_channel_profile import GetChannelProfile
from vitrine.application.use_cases.get_watch_history import GetWatchHistory
from vitrine.application.use_cases.toggle_subscription import ToggleSubscription
from vitrine.domain.entities.subscription import Subscription
from vitrine.domain.exceptions import EntityNotFoundError, ValidationError
from vitrine.domain.value_objects.views import ChannelProfile, WatchHistory


def _profile(is_subscribed: bool = False) -> ChannelProfile:
    return ChannelProfile(
        id=uuid4(),
        username="alice",
        full_name="Alice Liddell",
        email="a@x.com",
        avatar="https://media.test/media/a.png",
        cover_image=None,
        subscribers_count=3,
        channels_subscribed_to_count=1,
        is_subscribed=is_subscribed,
        created_at=datetime.now(),
    )


class TestGetChannelProfile:
    """Unit tests for GetChannelProfile use case."""

    async def test_lookup_is_case_insensitive(self):
        """Test handle is normalized before lookup."""
        view_repo = AsyncMock()
        view_repo.get_channel_profile.return_value = _profile()
        viewer_id = uuid4()

        profile = await GetChannelProfile(view_repo).execute(" Alice ", viewer_id)

        assert profile.subscribers_count == 3
        view_repo.get_channel_profile.assert_awaited_once_with("alice", viewer_id)

    async def test_blank_username(self):
        """Test blank handle is a validation error."""
        with pytest.raises(ValidationError):
            await GetChannelProfile(AsyncMock()).execute("  ")

    async def test_unknown_channel(self):
        """Test missing channel is NotFound."""
        view_repo = AsyncMock()
        view_repo.get_channel_profile.return_value = None

        with pytest.raises(EntityNotFoundError, match="Channel does not exist"):
            await GetChannelProfile(view_repo).execute("ghost")


class TestGetWatchHistory:
    """Unit tests for GetWatchHistory use case."""

    async def test_empty_history(self):
        """Test empty history is returned as-is."""
        user_id = uuid4()
        view_repo = AsyncMock()
        view_repo.get_watch_history.return_value = WatchHistory(user_id=user_id)

        history = await GetWatchHistory(view_repo).execute(user_id)

        assert len(history) == 0
        view_repo.get_watch_history.assert_awaited_once_with(user_id)


class TestToggleSubscription:
    """Unit tests for ToggleSubscription use case."""

    # ================================================================
    # Helper Methods
    # ================================================================

    def _deps(self, existing=None, channel_exists=True):
        user_repo = AsyncMock()
        user_repo.get_by_id.return_value = MagicMock() if channel_exists else None
        sub_repo = AsyncMock()
        sub_repo.get.return_value = existing
        return user_repo, sub_repo

    # ================================================================
    # Tests
    # ================================================================

    async def test_subscribe(self):
        """Test first toggle creates the edge."""
        subscriber_id, channel_id = uuid4(), uuid4()
        user_repo, sub_repo = self._deps()

        result = await ToggleSubscription(user_repo, sub_repo).execute(
            subscriber_id, channel_id
        )

        assert result.subscribed is True
        assert result.channel_id == channel_id
        created = sub_repo.create.await_args.args[0]
        assert created.subscriber_id == subscriber_id
        assert created.channel_id == channel_id
        sub_repo.delete.assert_not_called()

    async def test_unsubscribe(self):
        """Test second toggle removes the edge."""
        subscriber_id, channel_id = uuid4(), uuid4()
        edge = Subscription(subscriber_id=subscriber_id, channel_id=channel_id)
        user_repo, sub_repo = self._deps(existing=edge)

        result = await ToggleSubscription(user_repo, sub_repo).execute(
            subscriber_id, channel_id
        )

        assert result.subscribed is False
        sub_repo.delete.assert_awaited_once_with(edge.id)
        sub_repo.create.assert_not_called()

    async def test_self_subscription_rejected(self):
        """Test users cannot subscribe to themselves."""
        user_id = uuid4()
        user_repo, sub_repo = self._deps()

        with pytest.raises(ValidationError):
            await ToggleSubscription(user_repo, sub_repo).execute(user_id, user_id)

        user_repo.get_by_id.assert_not_called()

    async def test_unknown_channel(self):
        """Test missing channel is NotFound."""
        user_repo, sub_repo = self._deps(channel_exists=False)

        with pytest.raises(EntityNotFoundError):
            await ToggleSubscription(user_repo, sub_repo).execute(uuid4(), uuid4())

        sub_repo.create.assert_not_called()
