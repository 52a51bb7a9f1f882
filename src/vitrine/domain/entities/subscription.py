"""
Subscription entity - directed follow edge between two users.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class Subscription:
    """
    Subscription edge: subscriber follows channel.

    Business rules:
    - A user cannot subscribe to their own channel
    - At most one edge per (subscriber, channel) pair
    """

    subscriber_id: UUID
    channel_id: UUID
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Validate subscription data after initialization."""
        if self.subscriber_id == self.channel_id:
            raise ValueError("Users cannot subscribe to their own channel")
