"""
User API routes.

Provides endpoints for account management:
- POST /users/register - Create account (multipart, avatar required)
- POST /users/login - Log in, sets session cookies
- POST /users/logout - Log out, clears session cookies
- POST /users/refresh-token - Rotate the token pair
- POST /users/change-password - Change password
- GET /users/current-user - Authenticated user's record
- PATCH /users/update-account - Update full name and email
- PATCH|POST /users/update-avatar - Replace avatar
- PATCH|POST /users/update-cover-image - Replace cover image
- GET /users/channel/{username} - Channel page with subscription counts
- GET /users/watch-history - Watched videos with their owners
"""

from typing import List, Optional

from fastapi import (
    APIRouter,
    Body,
    Depends,
    File,
    Form,
    Request,
    Response,
    UploadFile,
    status,
)

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
from vitrine.application.use_cases.update_account_details import (
    UpdateAccountDetails,
    UpdateAccountDetailsCommand,
)
from vitrine.application.use_cases.update_user_image import UpdateUserImage
from vitrine.config.settings import Settings
from vitrine.di.dependencies import (
    get_app_settings,
    get_change_password,
    get_get_channel_profile,
    get_get_watch_history,
    get_login_user,
    get_logout_user,
    get_refresh_session,
    get_register_user,
    get_update_account_details,
    get_update_avatar,
    get_update_cover_image,
)
from vitrine.domain.entities.user import User
from vitrine.domain.value_objects.session import TokenPair
from vitrine.presentation.api.middleware.auth import (
    ACCESS_TOKEN_COOKIE,
    get_current_user,
    get_optional_user,
)
from vitrine.presentation.api.uploads import discard_staged, stage_upload
from vitrine.presentation.schemas.envelope import ApiResponse, EmptyData
from vitrine.presentation.schemas.user_schemas import (
    ChangePasswordRequest,
    ChannelProfileResponse,
    LoginRequest,
    LoginResponse,
    RefreshTokenRequest,
    TokenPairResponse,
    UpdateAccountRequest,
    UserResponse,
    WatchedVideoResponse,
)

REFRESH_TOKEN_COOKIE = "refreshToken"

router = APIRouter(prefix="/users", tags=["Users"])


def _set_session_cookies(
    response: Response, tokens: TokenPair, settings: Settings
) -> None:
    """Write both tokens as HTTP-only cookies."""
    cookies = (
        (
            ACCESS_TOKEN_COOKIE,
            tokens.access_token,
            settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        ),
        (
            REFRESH_TOKEN_COOKIE,
            tokens.refresh_token,
            settings.REFRESH_TOKEN_EXPIRE_DAYS * 24 * 3600,
        ),
    )
    for name, value, max_age in cookies:
        response.set_cookie(
            name,
            value,
            max_age=max_age,
            httponly=True,
            secure=settings.COOKIE_SECURE,
            samesite=settings.COOKIE_SAMESITE,
        )


def _clear_session_cookies(response: Response, settings: Settings) -> None:
    for name in (ACCESS_TOKEN_COOKIE, REFRESH_TOKEN_COOKIE):
        response.delete_cookie(
            name,
            httponly=True,
            secure=settings.COOKIE_SECURE,
            samesite=settings.COOKIE_SAMESITE,
        )


@router.post(
    "/register",
    response_model=ApiResponse[UserResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
)
async def register_user(
    full_name: Optional[str] = Form(None, alias="fullName"),
    email: Optional[str] = Form(None),
    username: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    avatar: Optional[UploadFile] = File(None),
    cover_image: Optional[UploadFile] = File(None, alias="coverImage"),
    use_case: RegisterUser = Depends(get_register_user),
    settings: Settings = Depends(get_app_settings),
) -> ApiResponse[UserResponse]:
    """
    Create an account.

    Text fields and files arrive as multipart form data; files are staged
    on disk before being pushed to the object store.
    """
    avatar_path = await stage_upload(avatar, settings.UPLOAD_TEMP_DIR)
    cover_image_path = await stage_upload(cover_image, settings.UPLOAD_TEMP_DIR)

    try:
        user = await use_case.execute(
            RegisterUserCommand(
                full_name=full_name or "",
                email=email or "",
                username=username or "",
                password=password or "",
                avatar_path=avatar_path,
                cover_image_path=cover_image_path,
            )
        )
    finally:
        discard_staged(avatar_path, cover_image_path)

    return ApiResponse.ok(
        data=UserResponse.from_entity(user),
        message="User registered successfully",
        status_code=status.HTTP_201_CREATED,
    )


@router.post(
    "/login",
    response_model=ApiResponse[LoginResponse],
    summary="Log in with email or username",
)
async def login_user(
    request: LoginRequest,
    response: Response,
    use_case: LoginUser = Depends(get_login_user),
    settings: Settings = Depends(get_app_settings),
) -> ApiResponse[LoginResponse]:
    """Verify credentials, issue a token pair and set session cookies."""
    result = await use_case.execute(
        LoginUserCommand(
            password=request.password,
            email=request.email,
            username=request.username,
        )
    )

    _set_session_cookies(response, result.tokens, settings)

    return ApiResponse.ok(
        data=LoginResponse(
            user=UserResponse.from_entity(result.user),
            access_token=result.tokens.access_token,
            refresh_token=result.tokens.refresh_token,
        ),
        message="User logged in successfully",
    )


@router.post(
    "/logout",
    response_model=ApiResponse[EmptyData],
    summary="Log out",
)
async def logout_user(
    response: Response,
    current_user: User = Depends(get_current_user),
    use_case: LogoutUser = Depends(get_logout_user),
    settings: Settings = Depends(get_app_settings),
) -> ApiResponse[EmptyData]:
    """Forget the stored refresh token and clear both cookies."""
    await use_case.execute(current_user.id)
    _clear_session_cookies(response, settings)

    return ApiResponse.ok(data=EmptyData(), message="User logged out")


@router.post(
    "/refresh-token",
    response_model=ApiResponse[TokenPairResponse],
    summary="Rotate access and refresh tokens",
)
async def refresh_access_token(
    request: Request,
    response: Response,
    body: Optional[RefreshTokenRequest] = Body(None),
    use_case: RefreshSession = Depends(get_refresh_session),
    settings: Settings = Depends(get_app_settings),
) -> ApiResponse[TokenPairResponse]:
    """
    Exchange a refresh token for a new pair.

    The token is read from the `refreshToken` cookie, or from the body
    when no cookie is present.
    """
    presented = request.cookies.get(REFRESH_TOKEN_COOKIE) or (
        body.refresh_token if body else None
    )

    tokens = await use_case.execute(presented)
    _set_session_cookies(response, tokens, settings)

    return ApiResponse.ok(
        data=TokenPairResponse(
            access_token=tokens.access_token,
            refresh_token=tokens.refresh_token,
        ),
        message="Access token refreshed",
    )


@router.post(
    "/change-password",
    response_model=ApiResponse[EmptyData],
    summary="Change password",
)
async def change_password(
    request: ChangePasswordRequest,
    current_user: User = Depends(get_current_user),
    use_case: ChangePassword = Depends(get_change_password),
) -> ApiResponse[EmptyData]:
    """Change the password after checking the old one."""
    await use_case.execute(
        ChangePasswordCommand(
            user_id=current_user.id,
            old_password=request.old_password,
            new_password=request.new_password,
        )
    )
    return ApiResponse.ok(data=EmptyData(), message="Password changed successfully")


@router.get(
    "/current-user",
    response_model=ApiResponse[UserResponse],
    summary="Get current user",
)
async def get_current_user_profile(
    current_user: User = Depends(get_current_user),
) -> ApiResponse[UserResponse]:
    """Return the authenticated user's public record."""
    return ApiResponse.ok(
        data=UserResponse.from_entity(current_user),
        message="Current user fetched successfully",
    )


@router.patch(
    "/update-account",
    response_model=ApiResponse[UserResponse],
    summary="Update full name and email",
)
async def update_account_details(
    request: UpdateAccountRequest,
    current_user: User = Depends(get_current_user),
    use_case: UpdateAccountDetails = Depends(get_update_account_details),
) -> ApiResponse[UserResponse]:
    """Update account details."""
    user = await use_case.execute(
        UpdateAccountDetailsCommand(
            user_id=current_user.id,
            full_name=request.full_name,
            email=request.email,
        )
    )
    return ApiResponse.ok(
        data=UserResponse.from_entity(user),
        message="Account details updated successfully",
    )


@router.api_route(
    "/update-avatar",
    methods=["PATCH", "POST"],
    response_model=ApiResponse[UserResponse],
    summary="Replace avatar",
)
async def update_avatar(
    avatar: Optional[UploadFile] = File(None),
    current_user: User = Depends(get_current_user),
    use_case: UpdateUserImage = Depends(get_update_avatar),
    settings: Settings = Depends(get_app_settings),
) -> ApiResponse[UserResponse]:
    """Upload a new avatar and delete the previous one."""
    staged = await stage_upload(avatar, settings.UPLOAD_TEMP_DIR)
    try:
        user = await use_case.execute(current_user.id, staged)
    finally:
        discard_staged(staged)

    return ApiResponse.ok(
        data=UserResponse.from_entity(user),
        message="Avatar image updated successfully",
    )


@router.api_route(
    "/update-cover-image",
    methods=["PATCH", "POST"],
    response_model=ApiResponse[UserResponse],
    summary="Replace cover image",
)
async def update_cover_image(
    cover_image: Optional[UploadFile] = File(None, alias="coverImage"),
    current_user: User = Depends(get_current_user),
    use_case: UpdateUserImage = Depends(get_update_cover_image),
    settings: Settings = Depends(get_app_settings),
) -> ApiResponse[UserResponse]:
    """Upload a new cover image and delete the previous one."""
    staged = await stage_upload(cover_image, settings.UPLOAD_TEMP_DIR)
    try:
        user = await use_case.execute(current_user.id, staged)
    finally:
        discard_staged(staged)

    return ApiResponse.ok(
        data=UserResponse.from_entity(user),
        message="Cover image updated successfully",
    )


@router.get(
    "/channel/{username}",
    response_model=ApiResponse[ChannelProfileResponse],
    summary="Get channel profile",
)
async def get_channel_profile(
    username: str,
    viewer: Optional[User] = Depends(get_optional_user),
    use_case: GetChannelProfile = Depends(get_get_channel_profile),
) -> ApiResponse[ChannelProfileResponse]:
    """Channel page with subscriber counts and the viewer's subscription flag."""
    profile = await use_case.execute(username, viewer.id if viewer else None)
    return ApiResponse.ok(
        data=ChannelProfileResponse.from_view(profile),
        message="User channel fetched successfully",
    )


@router.get(
    "/watch-history",
    response_model=ApiResponse[List[WatchedVideoResponse]],
    summary="Get watch history",
)
async def get_watch_history(
    current_user: User = Depends(get_current_user),
    use_case: GetWatchHistory = Depends(get_get_watch_history),
) -> ApiResponse[List[WatchedVideoResponse]]:
    """Watched videos in stored order, each with a reduced owner projection."""
    history = await use_case.execute(current_user.id)
    return ApiResponse.ok(
        data=[WatchedVideoResponse.from_view(video) for video in history.videos],
        message="Watch history fetched successfully",
    )
