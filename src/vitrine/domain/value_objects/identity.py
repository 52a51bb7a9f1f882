"""
Identity value objects - case-folded username and email.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Username:
    """
    Value object representing a channel handle.

    Business rules:
    - Surrounding whitespace is dropped
    - Stored and compared in lower case
    - Cannot be empty
    """

    value: str

    def __post_init__(self):
        """Normalize and validate handle on creation."""
        normalized = (self.value or "").strip().lower()
        if not normalized:
            raise ValueError("Username cannot be empty")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EmailAddress:
    """Value object representing a normalized email address."""

    value: str

    def __post_init__(self):
        """Normalize and validate email on creation."""
        normalized = (self.value or "").strip().lower()
        if not normalized:
            raise ValueError("Email cannot be empty")
        if "@" not in normalized:
            raise ValueError(f"Invalid email address: {normalized}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
