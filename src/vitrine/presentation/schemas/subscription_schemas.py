"""
Subscription API schemas.
"""

from uuid import UUID

from vitrine.application.dto import SubscriptionToggleResult
from vitrine.presentation.schemas.envelope import CamelModel


class SubscriptionToggleResponse(CamelModel):
    """State of the edge after a toggle."""

    channel_id: UUID
    subscribed: bool

    @classmethod
    def from_result(
        cls, result: SubscriptionToggleResult
    ) -> "SubscriptionToggleResponse":
        return cls(channel_id=result.channel_id, subscribed=result.subscribed)
