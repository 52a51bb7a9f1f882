"""
Monitoring and observability infrastructure.
"""

from vitrine.infrastructure.monitoring import metrics
from vitrine.infrastructure.monitoring.logger import (
    get_logger,
    get_request_id,
    reset_request_id,
    set_request_id,
    setup_logging,
)

__all__ = [
    "metrics",
    "get_logger",
    "get_request_id",
    "reset_request_id",
    "set_request_id",
    "setup_logging",
]
