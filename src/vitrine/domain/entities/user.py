"""
User entity - Domain model for channel owners and viewers.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from vitrine.domain.value_objects import EmailAddress, Username


@dataclass
class User:
    """
    User entity.

    Business rules:
    - Username and email are stored case-folded
    - Avatar is required, cover image is optional
    - password_hash always holds a one-way hash, never plaintext
    - refresh_token mirrors the only refresh token currently accepted
    """

    username: str
    email: str
    full_name: str
    avatar: str
    password_hash: str
    id: UUID = field(default_factory=uuid4)
    cover_image: Optional[str] = None
    watch_history: List[UUID] = field(default_factory=list)
    refresh_token: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Normalize identity fields and validate required data."""
        self.username = str(Username(self.username))
        self.email = str(EmailAddress(self.email))
        self.full_name = (self.full_name or "").strip()

        if not self.full_name:
            raise ValueError("Full name is required")
        if not self.avatar:
            raise ValueError("Avatar is required")
        if not self.password_hash:
            raise ValueError("Password hash is required")

    def has_refresh_token(self, token: str) -> bool:
        """Check whether token is the one currently mirrored on the user."""
        return self.refresh_token is not None and self.refresh_token == token

    def touch(self) -> None:
        """Bump the modification timestamp."""
        self.updated_at = datetime.now()
