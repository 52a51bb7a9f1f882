"""
User API schemas.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from vitrine.domain.entities.user import User
from vitrine.domain.value_objects.views import ChannelProfile, WatchedVideo
from vitrine.presentation.schemas.envelope import CamelModel


class UserResponse(CamelModel):
    """
    Public user projection.

    Never carries the password hash or the refresh token.
    """

    id: UUID
    username: str
    email: str
    full_name: str
    avatar: str
    cover_image: Optional[str] = None
    watch_history: List[UUID] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        """Project a domain user onto its public fields."""
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            full_name=user.full_name,
            avatar=user.avatar,
            cover_image=user.cover_image,
            watch_history=list(user.watch_history),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class LoginRequest(CamelModel):
    """Login with email or username."""

    email: Optional[str] = None
    username: Optional[str] = None
    password: str = ""


class TokenPairResponse(CamelModel):
    """Freshly issued access/refresh pair."""

    access_token: str
    refresh_token: str


class LoginResponse(TokenPairResponse):
    """Login payload: user plus tokens."""

    user: UserResponse


class RefreshTokenRequest(CamelModel):
    """Refresh token passed in the body instead of the cookie."""

    refresh_token: Optional[str] = None


class ChangePasswordRequest(CamelModel):
    """Password change payload."""

    old_password: str = ""
    new_password: str = ""


class UpdateAccountRequest(CamelModel):
    """Account details payload."""

    full_name: Optional[str] = None
    email: Optional[str] = None


class ChannelProfileResponse(CamelModel):
    """Public channel page."""

    id: UUID
    username: str
    full_name: str
    email: str
    avatar: str
    cover_image: Optional[str] = None
    subscribers_count: int
    channels_subscribed_to_count: int
    is_subscribed: bool
    created_at: datetime

    @classmethod
    def from_view(cls, profile: ChannelProfile) -> "ChannelProfileResponse":
        return cls.model_validate(profile)


class VideoOwnerResponse(CamelModel):
    """Reduced owner projection."""

    username: str
    full_name: str
    avatar: str


class WatchedVideoResponse(CamelModel):
    """Watched video with its owner."""

    id: UUID
    title: str
    description: str
    video_file: str
    thumbnail: str
    duration: float
    views: int
    is_published: bool
    created_at: datetime
    owner: Optional[VideoOwnerResponse] = None

    @classmethod
    def from_view(cls, video: WatchedVideo) -> "WatchedVideoResponse":
        return cls.model_validate(video)
