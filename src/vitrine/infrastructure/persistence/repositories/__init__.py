"""Repository implementations."""

from vitrine.infrastructure.persistence.repositories.channel_view_repository import (
    ChannelViewRepository,
)
from vitrine.infrastructure.persistence.repositories.subscription_repository import (
    SubscriptionRepository,
)
from vitrine.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "UserRepository",
    "SubscriptionRepository",
    "ChannelViewRepository",
]
