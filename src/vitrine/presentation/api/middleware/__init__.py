"""API middleware and request dependencies."""

from vitrine.presentation.api.middleware.error_handler import (
    http_exception_handler,
    request_validation_handler,
    unhandled_exception_handler,
    vitrine_exception_handler,
)
from vitrine.presentation.api.middleware.metrics_middleware import (
    MetricsMiddleware,
)
from vitrine.presentation.api.middleware.request_id_middleware import (
    RequestIDMiddleware,
)

__all__ = [
    "vitrine_exception_handler",
    "request_validation_handler",
    "http_exception_handler",
    "unhandled_exception_handler",
    "MetricsMiddleware",
    "RequestIDMiddleware",
]
