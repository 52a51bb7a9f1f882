"""Domain service interfaces."""

from vitrine.domain.services.i_media_gateway import IMediaGateway
from vitrine.domain.services.i_password_hasher import IPasswordHasher
from vitrine.domain.services.i_session_manager import ISessionManager

__all__ = [
    "IMediaGateway",
    "IPasswordHasher",
    "ISessionManager",
]
