"""
Infrastructure persistence package.
"""

from vitrine.infrastructure.persistence.database import Database
from vitrine.infrastructure.persistence.models import (
    Base,
    SubscriptionModel,
    UserModel,
    VideoModel,
    WatchHistoryModel,
)

__all__ = [
    "Database",
    "Base",
    "UserModel",
    "SubscriptionModel",
    "VideoModel",
    "WatchHistoryModel",
]
