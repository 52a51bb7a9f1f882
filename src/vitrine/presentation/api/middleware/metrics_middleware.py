"""
Request metrics middleware.
"""

import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from vitrine.infrastructure.monitoring.metrics import (
    http_request_duration_seconds,
    http_requests_in_progress,
    http_requests_total,
    http_unhandled_exceptions_total,
)

UNMATCHED_ROUTE = "unmatched"


def route_template(request: Request) -> str:
    """
    Path template of the route that served the request.

    `/api/v1/users/channel/{username}` keeps label cardinality bounded no
    matter how many channels exist. Only valid once the router has run.
    """
    route = request.scope.get("route")
    template = getattr(route, "path_format", None)
    path_regex = getattr(route, "path_regex", None)
    if not template or path_regex is None:
        return UNMATCHED_ROUTE

    # Included routers may keep their own path; the prefix is what precedes it
    path = request.scope.get("path", "")
    for index, char in enumerate(path):
        if char == "/" and path_regex.match(path[index:]):
            return path[:index] + template
    return template


class MetricsMiddleware(BaseHTTPMiddleware):
    """Count requests, time them and track how many are in flight."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path == "/metrics":
            return await call_next(request)

        method = request.method
        in_progress = http_requests_in_progress.labels(method=method)
        started = time.perf_counter()

        in_progress.inc()
        try:
            response = await call_next(request)
        except Exception as e:
            route = route_template(request)
            http_request_duration_seconds.labels(method=method, route=route).observe(
                time.perf_counter() - started
            )
            http_unhandled_exceptions_total.labels(
                route=route, exception=type(e).__name__
            ).inc()
            http_requests_total.labels(method=method, route=route, status=500).inc()
            raise
        finally:
            in_progress.dec()
            elapsed = time.perf_counter() - started

        route = route_template(request)
        http_request_duration_seconds.labels(method=method, route=route).observe(
            elapsed
        )
        http_requests_total.labels(
            method=method, route=route, status=response.status_code
        ).inc()
        return response
