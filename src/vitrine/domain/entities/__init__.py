"""Domain entities."""

from vitrine.domain.entities.subscription import Subscription
from vitrine.domain.entities.user import User

__all__ = [
    "User",
    "Subscription",
]
