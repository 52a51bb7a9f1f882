"""Domain value objects."""

from vitrine.domain.value_objects.identity import EmailAddress, Username
from vitrine.domain.value_objects.session import TokenPair, UploadedMedia
from vitrine.domain.value_objects.views import (
    ChannelProfile,
    VideoOwner,
    WatchedVideo,
    WatchHistory,
)

__all__ = [
    "Username",
    "EmailAddress",
    "TokenPair",
    "UploadedMedia",
    "ChannelProfile",
    "VideoOwner",
    "WatchedVideo",
    "WatchHistory",
]
