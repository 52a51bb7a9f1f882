"""
Login user use case.
"""

from dataclasses import dataclass
from typing import Optional

from vitrine.application.dto import LoginResult
from vitrine.domain.exceptions import (
    EntityNotFoundError,
    InvalidCredentialsError,
    ValidationError,
)
from vitrine.domain.repositories.i_user_repository import IUserRepository
from vitrine.domain.services.i_password_hasher import IPasswordHasher
from vitrine.domain.services.i_session_manager import ISessionManager
from vitrine.infrastructure.monitoring.logger import get_logger
from vitrine.infrastructure.monitoring.metrics import auth_events_total

logger = get_logger(__name__)


@dataclass
class LoginUserCommand:
    """Command to log in with email or username."""

    password: str
    email: Optional[str] = None
    username: Optional[str] = None


class LoginUser:
    """
    Use case for credential login.

    Issues a new access/refresh pair on success; the new refresh token
    replaces whatever was stored before.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        password_hasher: IPasswordHasher,
        session_manager: ISessionManager,
    ):
        """
        Initialize use case.

        Args:
            user_repository: User repository
            password_hasher: Password verification
            session_manager: Token issuer
        """
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.session_manager = session_manager

    async def execute(self, command: LoginUserCommand) -> LoginResult:
        """
        Log a user in.

        Args:
            command: Identifier and password

        Returns:
            LoginResult with user and tokens

        Raises:
            ValidationError: If neither email nor username is given
            EntityNotFoundError: If no user matches
            InvalidCredentialsError: If the password does not verify
            TokenIssueError: If tokens cannot be issued
        """
        email = (command.email or "").strip() or None
        username = (command.username or "").strip() or None
        if not email and not username:
            raise ValidationError("username", "Username or email is required")

        user = await self.user_repository.get_by_username_or_email(username, email)
        if user is None:
            raise EntityNotFoundError(
                "User", email or username, message="User does not exist"
            )

        if not self.password_hasher.verify(command.password, user.password_hash):
            auth_events_total.labels(event="login", outcome="rejected").inc()
            raise InvalidCredentialsError()

        tokens = await self.session_manager.rotate(user.id)

        auth_events_total.labels(event="login", outcome="success").inc()
        logger.info("User logged in", extra={"user_id": str(user.id)})
        return LoginResult(user=user, tokens=tokens)
