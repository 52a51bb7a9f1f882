"""
Unit tests for route templates used as metric labels.

Usage:
    pytest tests/unit/presentation/test_metrics_middleware.py
"""

from starlette.requests import Request
from starlette.responses import PlainTextResponse
from starlette.routing import Route

from vitrine.presentation.api.middleware.metrics_middleware import (
    UNMATCHED_ROUTE,
    route_template,
)


async def _endpoint(request):
    return PlainTextResponse("ok")


def _request(path: str, route=None) -> Request:
    scope = {"type": "http", "method": "GET", "path": path, "headers": []}
    if route is not None:
        scope["route"] = route
    return Request(scope)


class TestRouteTemplate:
    """Tests for route_template."""

    def test_full_path_route(self):
        """Test a route registered with its full path keeps its template."""
        route = Route("/api/v1/users/channel/{username}", _endpoint)

        request = _request("/api/v1/users/channel/alice", route)

        assert route_template(request) == "/api/v1/users/channel/{username}"

    def test_include_prefix_restored(self):
        """Test a route that only knows its router-relative path gets the prefix back."""
        route = Route("/users/channel/{username}", _endpoint)

        request = _request("/api/v1/users/channel/alice", route)

        assert route_template(request) == "/api/v1/users/channel/{username}"

    def test_static_route(self):
        """Test routes without parameters."""
        request = _request("/health", Route("/health", _endpoint))

        assert route_template(request) == "/health"

    def test_no_route_selected(self):
        """Test unrouted requests (404) share one label."""
        request = _request("/api/v1/nowhere/42")

        assert route_template(request) == UNMATCHED_ROUTE
