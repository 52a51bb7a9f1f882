"""
Authentication infrastructure package.
"""

from vitrine.infrastructure.auth.password_hasher import BcryptPasswordHasher
from vitrine.infrastructure.auth.session_manager import SessionManager

__all__ = [
    "BcryptPasswordHasher",
    "SessionManager",
]
