"""
Bcrypt password hashing.
"""

import bcrypt

from vitrine.domain.exceptions import ValidationError
from vitrine.domain.services.i_password_hasher import IPasswordHasher

# bcrypt only reads the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher(IPasswordHasher):
    """
    Salted one-way hashing with a fixed cost factor.

    Every call to hash() draws a fresh salt, so hashing the same password
    twice gives different strings that both verify.
    """

    def __init__(self, rounds: int = 10):
        """
        Initialize hasher.

        Args:
            rounds: bcrypt cost factor (log2 of iterations)
        """
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password.

        Args:
            password: Plaintext password

        Returns:
            bcrypt hash string

        Raises:
            ValidationError: If password is empty or longer than 72 bytes
        """
        encoded = (password or "").encode("utf-8")
        if not encoded:
            raise ValidationError("password", "Password is required")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                "password", f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
            )

        return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self.rounds)).decode(
            "utf-8"
        )

    def verify(self, password: str, password_hash: str) -> bool:
        """
        Check a candidate password against a stored hash.

        Returns:
            True if it matches, False otherwise (including malformed hashes)
        """
        if not password or not password_hash:
            return False

        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except ValueError:
            return False
