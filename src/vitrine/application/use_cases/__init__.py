"""Application use cases."""

from vitrine.application.use_cases.change_password import (
    ChangePassword,
    ChangePasswordCommand,
)
from vitrine.application.use_cases.get_channel_profile import GetChannelProfile
from vitrine.application.use_cases.get_watch_history import GetWatchHistory
from vitrine.application.use_cases.login_user import LoginUser, LoginUserCommand
from vitrine.application.use_cases.logout_user import LogoutUser
from vitrine.application.use_cases.refresh_session import RefreshSession
from vitrine.application.use_cases.register_user import (
    RegisterUser,
    RegisterUserCommand,
)
from vitrine.application.use_cases.toggle_subscription import ToggleSubscription
from vitrine.application.use_cases.update_account_details import (
    UpdateAccountDetails,
    UpdateAccountDetailsCommand,
)
from vitrine.application.use_cases.update_user_image import UpdateUserImage

__all__ = [
    "RegisterUser",
    "RegisterUserCommand",
    "LoginUser",
    "LoginUserCommand",
    "LogoutUser",
    "RefreshSession",
    "ChangePassword",
    "ChangePasswordCommand",
    "UpdateAccountDetails",
    "UpdateAccountDetailsCommand",
    "UpdateUserImage",
    "GetChannelProfile",
    "GetWatchHistory",
    "ToggleSubscription",
]
