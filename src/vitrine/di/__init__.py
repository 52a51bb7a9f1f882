"""
Dependency Injection module for Vitrine.

Provides container and dependency functions for FastAPI routes.
"""

from vitrine.di.container import (
    DIContainer,
    get_container,
    initialize_container,
    set_container,
    shutdown_container,
)
from vitrine.di.dependencies import (
    get_app_settings,
    get_change_password,
    get_db_session,
    get_get_channel_profile,
    get_get_watch_history,
    get_login_user,
    get_logout_user,
    get_media_gateway,
    get_password_hasher,
    get_refresh_session,
    get_register_user,
    get_toggle_subscription,
    get_update_account_details,
    get_update_avatar,
    get_update_cover_image,
)

__all__ = [
    # Container
    "DIContainer",
    "get_container",
    "set_container",
    "initialize_container",
    "shutdown_container",
    # Dependencies
    "get_db_session",
    "get_app_settings",
    "get_media_gateway",
    "get_password_hasher",
    "get_register_user",
    "get_login_user",
    "get_logout_user",
    "get_refresh_session",
    "get_change_password",
    "get_update_account_details",
    "get_update_avatar",
    "get_update_cover_image",
    "get_get_channel_profile",
    "get_get_watch_history",
    "get_toggle_subscription",
]
