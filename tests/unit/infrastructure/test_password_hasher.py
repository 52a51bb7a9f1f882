"""
Unit tests for BcryptPasswordHasher.

Usage:
    pytest tests/unit/infrastructure/test_password_hasher.py
"""

import pytest

from vitrine.domain.exceptions import ValidationError
from vitrine.infrastructure.auth.password_hasher import BcryptPasswordHasher


@pytest.fixture
def hasher() -> BcryptPasswordHasher:
    # Lowest cost factor keeps the suite fast
    return BcryptPasswordHasher(rounds=4)


class TestBcryptPasswordHasher:
    """Unit tests for password hashing."""

    def test_hash_is_not_plaintext(self, hasher):
        """Test hash never equals the password."""
        hashed = hasher.hash("s3cret-pass")

        assert hashed != "s3cret-pass"
        assert hashed.startswith("$2")

    def test_verify_correct_password(self, hasher):
        """Test the original password verifies."""
        hashed = hasher.hash("s3cret-pass")

        assert hasher.verify("s3cret-pass", hashed) is True

    def test_verify_wrong_password(self, hasher):
        """Test a different password does not verify."""
        hashed = hasher.hash("s3cret-pass")

        assert hasher.verify("wrong-pass", hashed) is False

    def test_hashes_are_salted(self, hasher):
        """Test hashing twice yields different strings that both verify."""
        first = hasher.hash("s3cret-pass")
        second = hasher.hash("s3cret-pass")

        assert first != second
        assert hasher.verify("s3cret-pass", first)
        assert hasher.verify("s3cret-pass", second)

    def test_cost_factor_in_hash(self):
        """Test configured rounds end up in the hash prefix."""
        hashed = BcryptPasswordHasher(rounds=5).hash("s3cret-pass")

        assert hashed.split("$")[2] == "05"

    def test_password_over_72_bytes_rejected(self, hasher):
        """Test bcrypt's input limit is a validation error, not truncation."""
        with pytest.raises(ValidationError) as exc_info:
            hasher.hash("x" * 73)

        assert exc_info.value.field == "password"

    def test_multibyte_limit_counts_bytes(self, hasher):
        """Test the limit counts encoded bytes, not characters."""
        with pytest.raises(ValidationError):
            hasher.hash("é" * 37)

    def test_empty_password_rejected(self, hasher):
        """Test empty password cannot be hashed."""
        with pytest.raises(ValidationError):
            hasher.hash("")

    def test_verify_malformed_hash(self, hasher):
        """Test a corrupt stored hash fails closed."""
        assert hasher.verify("s3cret-pass", "not-a-bcrypt-hash") is False

    def test_verify_empty_inputs(self, hasher):
        """Test empty candidate or hash never verifies."""
        hashed = hasher.hash("s3cret-pass")

        assert hasher.verify("", hashed) is False
        assert hasher.verify("s3cret-pass", "") is False
