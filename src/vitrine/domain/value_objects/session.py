"""
Session value objects - issued token pairs and stored media references.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TokenPair:
    """Access token plus the refresh token that can renew it."""

    access_token: str
    refresh_token: str


@dataclass(frozen=True)
class UploadedMedia:
    """Object stored in the media host."""

    url: str
    public_id: str
