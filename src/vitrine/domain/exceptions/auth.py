"""
Authentication domain exceptions.
"""

from vitrine.domain.exceptions.base import InternalError, VitrineException


class AuthenticationError(VitrineException):
    """Raised when authentication fails."""

    def __init__(
        self,
        message: str = "Authentication failed",
        code: str = "AUTHENTICATION_ERROR",
    ):
        super().__init__(message, code=code)


class InvalidCredentialsError(AuthenticationError):
    """Raised when a password does not match the stored hash."""

    def __init__(self, message: str = "Invalid user credentials"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class MissingTokenError(AuthenticationError):
    """Raised when a request carries no token at all."""

    def __init__(self, message: str = "Unauthorized request"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidTokenError(AuthenticationError):
    """Raised when JWT token is malformed or invalid."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when JWT token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="EXPIRED_TOKEN")


class RefreshTokenReusedError(AuthenticationError):
    """Raised when a refresh token no longer matches the stored one."""

    def __init__(self):
        super().__init__(
            "Refresh token is expired or used", code="REFRESH_TOKEN_REUSED"
        )


class TokenIssueError(InternalError):
    """Raised when a token pair cannot be issued or persisted."""

    def __init__(self):
        super().__init__(
            "Something went wrong while generating access and refresh tokens",
            code="TOKEN_ISSUE_FAILED",
        )
