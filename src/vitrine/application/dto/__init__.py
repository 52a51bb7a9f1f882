"""
Data Transfer Objects for Vitrine application layer.
"""

from dataclasses import dataclass
from uuid import UUID

from vitrine.domain.entities.user import User
from vitrine.domain.value_objects.session import TokenPair


@dataclass
class LoginResult:
    """Authenticated user plus the freshly issued token pair."""

    user: User
    tokens: TokenPair


@dataclass
class SubscriptionToggleResult:
    """Outcome of a subscribe/unsubscribe toggle."""

    channel_id: UUID
    subscribed: bool


__all__ = [
    "LoginResult",
    "SubscriptionToggleResult",
]
