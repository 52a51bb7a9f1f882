"""Repository interfaces."""

from vitrine.domain.repositories.i_channel_view_repository import (
    IChannelViewRepository,
)
from vitrine.domain.repositories.i_subscription_repository import (
    ISubscriptionRepository,
)
from vitrine.domain.repositories.i_user_repository import IUserRepository

__all__ = [
    "IUserRepository",
    "ISubscriptionRepository",
    "IChannelViewRepository",
]
