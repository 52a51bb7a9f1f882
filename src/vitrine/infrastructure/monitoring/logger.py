"""
Logging setup for Vitrine.

Every record passes through RequestIdFilter, so both output modes can show
which request produced it:
- production: one JSON object per line (JsonLogFormatter)
- elsewhere: pipe-separated text
"""

import json
import logging
import sys
from contextvars import ContextVar, Token
from typing import Any, Optional
from uuid import uuid4

_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

# LogRecord attributes; anything else arrived through `extra=`
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName", "request_id"}

# Extra keys whose values never reach the output
_SECRET_KEYS = frozenset(
    {
        "password",
        "password_hash",
        "access_token",
        "refresh_token",
        "token",
        "authorization",
    }
)

_QUIET_LOGGERS = ("botocore", "boto3", "s3transfer", "urllib3", "asyncio")

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(request_id)s | %(name)s | %(message)s"


class RequestIdFilter(logging.Filter):
    """Stamp each record with the request ID of the current context."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = _request_id.get() or "-"
        return True


class JsonLogFormatter(logging.Formatter):
    """
    Render records as single-line JSON.

    Fields passed with `extra=` are copied to the top level; keys that
    name a credential are replaced with a placeholder.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", "-"),
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
        }

        for key, value in record.__dict__.items():
            if key in _RECORD_ATTRS or key.startswith("_"):
                continue
            entry[key] = "[redacted]" if key.lower() in _SECRET_KEYS else value

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def setup_logging(level: str = "INFO", json_logs: bool = True) -> None:
    """
    Install a single stdout handler on the root logger.

    Args:
        level: Root level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: JSON lines when True, text otherwise
    """
    numeric_level = logging.getLevelName(level.upper())

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdFilter())
    if json_logs:
        handler.setFormatter(JsonLogFormatter(datefmt="%Y-%m-%dT%H:%M:%S"))
    else:
        handler.setFormatter(
            logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric_level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Module logger (pass __name__)."""
    return logging.getLogger(name)


def set_request_id(request_id: Optional[str] = None) -> tuple[str, Token]:
    """
    Bind a request ID to the current context.

    Args:
        request_id: Incoming ID, a new UUID4 is generated when empty

    Returns:
        The bound ID and the token that restores the previous value
    """
    request_id = request_id or str(uuid4())
    return request_id, _request_id.set(request_id)


def reset_request_id(token: Token) -> None:
    """Restore the request ID that was bound before set_request_id."""
    _request_id.reset(token)


def get_request_id() -> Optional[str]:
    """Request ID bound to the current context, if any."""
    return _request_id.get()
