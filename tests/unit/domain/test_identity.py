"""
Unit tests for identity value objects.

Usage:
    pytest tests/unit/domain/test_identity.py
"""

import pytest

from vitrine.domain.value_objects import EmailAddress, Username


class TestUsername:
    """Unit tests for Username value object."""

    def test_normalized(self):
        """Test handle is stripped and lower-cased."""
        assert str(Username("  ChannelOne ")) == "channelone"

    def test_equal_after_normalization(self):
        """Test handles differing only in case are equal."""
        assert Username("Alice") == Username("alice")

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_empty_rejected(self, value):
        """Test empty handles are rejected."""
        with pytest.raises(ValueError, match="empty"):
            Username(value)

    def test_immutable(self):
        """Test value cannot be reassigned."""
        username = Username("alice")

        with pytest.raises(AttributeError):
            username.value = "bob"


class TestEmailAddress:
    """Unit tests for EmailAddress value object."""

    def test_normalized(self):
        """Test email is stripped and lower-cased."""
        assert str(EmailAddress(" Alice@Example.COM ")) == "alice@example.com"

    def test_missing_at_rejected(self):
        """Test values without @ are rejected."""
        with pytest.raises(ValueError, match="Invalid email"):
            EmailAddress("alice.example.com")

    def test_empty_rejected(self):
        """Test empty email is rejected."""
        with pytest.raises(ValueError, match="empty"):
            EmailAddress("  ")
