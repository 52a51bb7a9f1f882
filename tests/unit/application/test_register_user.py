"""
Unit tests for RegisterUser use case.

Usage:
    pytest tests/unit/application/test_register_user.py
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from vitrine.application.use_cases.register_user import (
    RegisterUser,
    RegisterUserCommand,
)
from vitrine.domain.entities.user import User
from vitrine.domain.exceptions import (
    DuplicateEntityError,
    InternalError,
    MediaUploadError,
    ValidationError,
)
from vitrine.domain.value_objects.session import UploadedMedia


class TestRegisterUser:
    """Unit tests for RegisterUser use case."""

    # ================================================================
    # Helper Methods
    # ================================================================

    def _command(self, **overrides) -> RegisterUserCommand:
        data = {
            "full_name": "Alice Liddell",
            "email": "A@X.com",
            "username": "Alice",
            "password": "s3cret-pass",
            "avatar_path": "/tmp/avatar.png",
            "cover_image_path": None,
        }
        data.update(overrides)
        return RegisterUserCommand(**data)

    def _use_case(self, user_repo=None, hasher=None, gateway=None):
        if user_repo is None:
            user_repo = AsyncMock()
            user_repo.get_by_username_or_email.return_value = None
        if hasher is None:
            hasher = MagicMock()
            hasher.hash.return_value = "$2b$04$hashed"
        if gateway is None:
            gateway = AsyncMock()
            gateway.upload.side_effect = lambda path: UploadedMedia(
                url=f"https://media.test/{path.rsplit('/', 1)[-1]}",
                public_id=path.rsplit("/", 1)[-1],
            )

        # create() echoes the entity, get_by_id returns what was created
        async def create(user):
            user_repo.get_by_id.return_value = user
            return user

        user_repo.create.side_effect = create
        return (
            RegisterUser(
                user_repository=user_repo,
                password_hasher=hasher,
                media_gateway=gateway,
            ),
            user_repo,
            hasher,
            gateway,
        )

    # ================================================================
    # Success
    # ================================================================

    async def test_register_success(self):
        """Test user is created with normalized identity and hashed password."""
        use_case, user_repo, hasher, gateway = self._use_case()

        user = await use_case.execute(self._command())

        assert isinstance(user, User)
        assert user.username == "alice"
        assert user.email == "a@x.com"
        assert user.password_hash == "$2b$04$hashed"
        assert user.avatar == "https://media.test/avatar.png"
        assert user.cover_image is None
        hasher.hash.assert_called_once_with("s3cret-pass")
        gateway.upload.assert_awaited_once_with("/tmp/avatar.png")
        user_repo.get_by_username_or_email.assert_awaited_once_with(
            "alice", "a@x.com"
        )
        user_repo.get_by_id.assert_awaited_once_with(user.id)

    async def test_register_with_cover_image(self):
        """Test optional cover image is uploaded too."""
        use_case, _, _, gateway = self._use_case()

        user = await use_case.execute(
            self._command(cover_image_path="/tmp/cover.jpg")
        )

        assert user.cover_image == "https://media.test/cover.jpg"
        assert gateway.upload.await_count == 2

    async def test_cover_upload_failure_not_fatal(self):
        """Test failed cover upload registers without a cover."""
        gateway = AsyncMock()
        gateway.upload.side_effect = [
            UploadedMedia(url="https://media.test/avatar.png", public_id="avatar"),
            None,
        ]
        use_case, _, _, _ = self._use_case(gateway=gateway)

        user = await use_case.execute(
            self._command(cover_image_path="/tmp/cover.jpg")
        )

        assert user.cover_image is None

    # ================================================================
    # Failures
    # ================================================================

    @pytest.mark.parametrize(
        "field", ["full_name", "email", "username", "password"]
    )
    async def test_blank_field_rejected(self, field):
        """Test each required text field must be non-blank."""
        use_case, user_repo, _, gateway = self._use_case()

        with pytest.raises(ValidationError, match="All fields are required"):
            await use_case.execute(self._command(**{field: "   "}))

        user_repo.create.assert_not_called()
        gateway.upload.assert_not_called()

    async def test_duplicate_rejected_before_upload(self):
        """Test existing username/email stops registration before uploads."""
        user_repo = AsyncMock()
        user_repo.get_by_username_or_email.return_value = MagicMock(spec=User)
        use_case, _, _, gateway = self._use_case(user_repo=user_repo)

        with pytest.raises(DuplicateEntityError) as exc_info:
            await use_case.execute(self._command())

        assert exc_info.value.message == "User with email or username already exists"
        gateway.upload.assert_not_called()
        user_repo.create.assert_not_called()

    async def test_missing_avatar(self):
        """Test avatar file is required."""
        use_case, user_repo, _, gateway = self._use_case()

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(self._command(avatar_path=None))

        assert exc_info.value.field == "avatar"
        gateway.upload.assert_not_called()
        user_repo.create.assert_not_called()

    async def test_avatar_upload_failure(self):
        """Test failed avatar upload aborts without creating the user."""
        gateway = AsyncMock()
        gateway.upload.return_value = None
        use_case, user_repo, _, _ = self._use_case(gateway=gateway)

        with pytest.raises(MediaUploadError, match="avatar"):
            await use_case.execute(self._command())

        user_repo.create.assert_not_called()

    async def test_race_lost_on_create(self):
        """Test store constraint violation propagates as Conflict."""
        use_case, user_repo, _, _ = self._use_case()
        user_repo.create.side_effect = DuplicateEntityError(
            "User", "email or username"
        )

        with pytest.raises(DuplicateEntityError):
            await use_case.execute(self._command())

    async def test_created_user_not_readable(self):
        """Test missing read-back is an internal error."""
        use_case, user_repo, _, _ = self._use_case()

        async def create(user):
            return user

        user_repo.create.side_effect = create
        user_repo.get_by_id.return_value = None

        with pytest.raises(InternalError):
            await use_case.execute(self._command())

    async def test_invalid_email(self):
        """Test malformed email is a validation error."""
        use_case, _, _, _ = self._use_case()

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(self._command(email="not-an-email"))

        assert exc_info.value.field == "email"

    async def test_invalid_username_reported_on_username(self):
        """Test a rejected handle is reported against username, not email."""
        use_case, user_repo, _, _ = self._use_case()

        with patch(
            "vitrine.application.use_cases.register_user.Username",
            side_effect=ValueError("Username cannot be empty"),
        ):
            with pytest.raises(ValidationError) as exc_info:
                await use_case.execute(self._command())

        assert exc_info.value.field == "username"
        user_repo.get_by_username_or_email.assert_not_called()
