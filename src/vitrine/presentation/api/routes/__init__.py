"""API routers."""

from vitrine.presentation.api.routes import subscriptions, users

__all__ = ["users", "subscriptions"]
