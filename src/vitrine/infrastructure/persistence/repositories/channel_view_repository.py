"""
Channel and watch-history projections built with SQLAlchemy.

Both views are single round trips: counts and the viewer's subscription
flag are correlated subqueries on the users row, and the watch history
is one ordered join with the video owner resolved through an alias.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import exists, false, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from vitrine.domain.repositories.i_channel_view_repository import (
    IChannelViewRepository,
)
from vitrine.domain.value_objects.views import (
    ChannelProfile,
    VideoOwner,
    WatchedVideo,
    WatchHistory,
)
from vitrine.infrastructure.persistence.models import (
    SubscriptionModel,
    UserModel,
    VideoModel,
    WatchHistoryModel,
)


class ChannelViewRepository(IChannelViewRepository):
    """Read-only aggregation queries over users, subscriptions and videos."""

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get_channel_profile(
        self, username: str, viewer_id: Optional[UUID] = None
    ) -> Optional[ChannelProfile]:
        """
        Build the public profile of a channel.

        Args:
            username: Channel handle (matched case-insensitively)
            viewer_id: Requesting user, None for anonymous viewers

        Returns:
            ChannelProfile if the channel exists, None otherwise
        """
        subscribers_count = (
            select(func.count(SubscriptionModel.id))
            .where(SubscriptionModel.channel_id == UserModel.id)
            .correlate(UserModel)
            .scalar_subquery()
        )
        subscribed_to_count = (
            select(func.count(SubscriptionModel.id))
            .where(SubscriptionModel.subscriber_id == UserModel.id)
            .correlate(UserModel)
            .scalar_subquery()
        )

        if viewer_id is None:
            is_subscribed = false()
        else:
            is_subscribed = (
                exists()
                .where(
                    SubscriptionModel.channel_id == UserModel.id,
                    SubscriptionModel.subscriber_id == viewer_id,
                )
                .correlate(UserModel)
            )

        stmt = select(
            UserModel.id,
            UserModel.username,
            UserModel.full_name,
            UserModel.email,
            UserModel.avatar,
            UserModel.cover_image,
            UserModel.created_at,
            subscribers_count.label("subscribers_count"),
            subscribed_to_count.label("channels_subscribed_to_count"),
            is_subscribed.label("is_subscribed"),
        ).where(UserModel.username == username.strip().lower())

        result = await self.session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            return None

        return ChannelProfile(
            id=row.id,
            username=row.username,
            full_name=row.full_name,
            email=row.email,
            avatar=row.avatar,
            cover_image=row.cover_image,
            subscribers_count=int(row.subscribers_count or 0),
            channels_subscribed_to_count=int(row.channels_subscribed_to_count or 0),
            is_subscribed=bool(row.is_subscribed),
            created_at=row.created_at,
        )

    async def get_watch_history(self, user_id: UUID) -> WatchHistory:
        """
        Resolve a user's watch history into videos with their owners.

        Entries pointing at videos that no longer exist are skipped.

        Args:
            user_id: User whose history is read

        Returns:
            WatchHistory in stored order (empty if nothing watched)
        """
        owner = aliased(UserModel)
        stmt = (
            select(
                VideoModel,
                owner.username.label("owner_username"),
                owner.full_name.label("owner_full_name"),
                owner.avatar.label("owner_avatar"),
            )
            .select_from(WatchHistoryModel)
            .join(VideoModel, VideoModel.id == WatchHistoryModel.video_id)
            .outerjoin(owner, owner.id == VideoModel.owner_id)
            .where(WatchHistoryModel.user_id == user_id)
            .order_by(WatchHistoryModel.position)
        )

        result = await self.session.execute(stmt)
        videos = [
            self._to_watched_video(
                row.VideoModel,
                row.owner_username,
                row.owner_full_name,
                row.owner_avatar,
            )
            for row in result.all()
        ]

        return WatchHistory(user_id=user_id, videos=videos)

    @staticmethod
    def _to_watched_video(
        video: VideoModel,
        owner_username: Optional[str],
        owner_full_name: Optional[str],
        owner_avatar: Optional[str],
    ) -> WatchedVideo:
        owner = None
        if owner_username is not None:
            owner = VideoOwner(
                username=owner_username,
                full_name=owner_full_name,
                avatar=owner_avatar,
            )

        return WatchedVideo(
            id=video.id,
            title=video.title,
            description=video.description,
            video_file=video.video_file,
            thumbnail=video.thumbnail,
            duration=video.duration,
            views=video.views,
            is_published=video.is_published,
            created_at=video.created_at,
            owner=owner,
        )
