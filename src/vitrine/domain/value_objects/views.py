"""
Read-only projections assembled from users, subscriptions and videos.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from uuid import UUID


@dataclass(frozen=True)
class ChannelProfile:
    """Public channel page with subscription counts."""

    id: UUID
    username: str
    full_name: str
    email: str
    avatar: str
    cover_image: Optional[str]
    subscribers_count: int
    channels_subscribed_to_count: int
    is_subscribed: bool
    created_at: datetime


@dataclass(frozen=True)
class VideoOwner:
    """Reduced owner projection embedded in watched videos."""

    username: str
    full_name: str
    avatar: str


@dataclass(frozen=True)
class WatchedVideo:
    """Video from a watch history, with its owner resolved."""

    id: UUID
    title: str
    description: str
    video_file: str
    thumbnail: str
    duration: float
    views: int
    is_published: bool
    created_at: datetime
    owner: Optional[VideoOwner] = None


@dataclass(frozen=True)
class WatchHistory:
    """Ordered watch history of one user."""

    user_id: UUID
    videos: List[WatchedVideo] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.videos)
