"""
Password hasher interface.
"""

from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """Interface for one-way salted password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted hash of password."""

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Check password against a stored hash."""
