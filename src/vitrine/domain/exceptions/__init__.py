"""
Domain exceptions package.
"""

# Auth exceptions
from vitrine.domain.exceptions.auth import (
    AuthenticationError,
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    RefreshTokenReusedError,
    TokenIssueError,
)

# Base exceptions
from vitrine.domain.exceptions.base import (
    DuplicateEntityError,
    EntityNotFoundError,
    InternalError,
    ValidationError,
    VitrineException,
)

# Media exceptions
from vitrine.domain.exceptions.media import MediaUploadError

__all__ = [
    # Base
    "VitrineException",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "ValidationError",
    "InternalError",
    # Auth
    "AuthenticationError",
    "InvalidCredentialsError",
    "MissingTokenError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "RefreshTokenReusedError",
    "TokenIssueError",
    # Media
    "MediaUploadError",
]
