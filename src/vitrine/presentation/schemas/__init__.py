"""API request/response schemas."""

from vitrine.presentation.schemas.envelope import (
    ApiErrorResponse,
    ApiResponse,
    CamelModel,
    EmptyData,
)
from vitrine.presentation.schemas.subscription_schemas import (
    SubscriptionToggleResponse,
)
from vitrine.presentation.schemas.user_schemas import (
    ChangePasswordRequest,
    ChannelProfileResponse,
    LoginRequest,
    LoginResponse,
    RefreshTokenRequest,
    TokenPairResponse,
    UpdateAccountRequest,
    UserResponse,
    VideoOwnerResponse,
    WatchedVideoResponse,
)

__all__ = [
    "ApiResponse",
    "ApiErrorResponse",
    "CamelModel",
    "EmptyData",
    "UserResponse",
    "LoginRequest",
    "LoginResponse",
    "TokenPairResponse",
    "RefreshTokenRequest",
    "ChangePasswordRequest",
    "UpdateAccountRequest",
    "ChannelProfileResponse",
    "VideoOwnerResponse",
    "WatchedVideoResponse",
    "SubscriptionToggleResponse",
]
