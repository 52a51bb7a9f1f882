"""
JWT token handler for authentication.

Access and refresh tokens are signed with different secrets and carry a
`type` claim, so one can never be replayed in place of the other.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID, uuid4

from jose import JWTError, jwt

from vitrine.config.settings import Settings, get_settings
from vitrine.domain.entities.user import User
from vitrine.domain.exceptions.auth import ExpiredTokenError, InvalidTokenError

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


def create_access_token(user: User, settings: Optional[Settings] = None) -> str:
    """
    Create JWT access token for authenticated user.

    Args:
        user: Authenticated user
        settings: Settings override (defaults to process settings)

    Returns:
        Encoded JWT token string

    Example:
        >>> token = create_access_token(user)
    """
    settings = settings or get_settings()
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user.id),
        "email": user.email,
        "username": user.username,
        "full_name": user.full_name,
        "type": ACCESS_TOKEN_TYPE,
        "jti": uuid4().hex,
        "iat": now,
        "exp": now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    }
    return jwt.encode(
        payload, settings.ACCESS_TOKEN_SECRET, algorithm=settings.JWT_ALGORITHM
    )


def create_refresh_token(user_id: UUID, settings: Optional[Settings] = None) -> str:
    """
    Create JWT refresh token carrying only the user ID.

    Every call yields a distinct token (random `jti`), even within the
    same second.

    Args:
        user_id: User UUID
        settings: Settings override (defaults to process settings)

    Returns:
        Encoded JWT token string
    """
    settings = settings or get_settings()
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "type": REFRESH_TOKEN_TYPE,
        "jti": uuid4().hex,
        "iat": now,
        "exp": now + timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS),
    }
    return jwt.encode(
        payload, settings.REFRESH_TOKEN_SECRET, algorithm=settings.JWT_ALGORITHM
    )


def _decode(token: str, secret: str, algorithm: str, token_type: str) -> Dict[str, Any]:
    try:
        payload = jwt.decode(token, secret, algorithms=[algorithm])
    except jwt.ExpiredSignatureError:
        raise ExpiredTokenError()
    except JWTError:
        raise InvalidTokenError()

    if payload.get("type") != token_type or not payload.get("sub"):
        raise InvalidTokenError()

    return payload


def decode_access_token(
    token: str, settings: Optional[Settings] = None
) -> Dict[str, Any]:
    """
    Decode and validate JWT access token.

    Args:
        token: JWT token string
        settings: Settings override (defaults to process settings)

    Returns:
        Decoded claims (sub, email, username, full_name, ...)

    Raises:
        ExpiredTokenError: If token has expired
        InvalidTokenError: If token is invalid, malformed or not an access token
    """
    settings = settings or get_settings()
    return _decode(
        token,
        settings.ACCESS_TOKEN_SECRET,
        settings.JWT_ALGORITHM,
        ACCESS_TOKEN_TYPE,
    )


def decode_refresh_token(
    token: str, settings: Optional[Settings] = None
) -> Dict[str, Any]:
    """
    Decode and validate JWT refresh token.

    Raises:
        ExpiredTokenError: If token has expired
        InvalidTokenError: If token is invalid, malformed or not a refresh token
    """
    settings = settings or get_settings()
    return _decode(
        token,
        settings.REFRESH_TOKEN_SECRET,
        settings.JWT_ALGORITHM,
        REFRESH_TOKEN_TYPE,
    )


def extract_user_id(payload: Dict[str, Any]) -> UUID:
    """
    Extract user ID from decoded claims.

    Args:
        payload: Claims returned by a decode function

    Returns:
        User UUID

    Raises:
        InvalidTokenError: If the subject is not a UUID
    """
    try:
        return UUID(str(payload["sub"]))
    except (KeyError, ValueError):
        raise InvalidTokenError()
