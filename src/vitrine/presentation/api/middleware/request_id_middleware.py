"""
Request ID propagation.
"""

from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from vitrine.infrastructure.monitoring.logger import reset_request_id, set_request_id

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Bind a request ID for the lifetime of each request.

    A caller-supplied X-Request-ID is kept so IDs can be followed across
    services; otherwise one is generated. The ID is echoed back on the
    response, error responses included.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id, token = set_request_id(request.headers.get(REQUEST_ID_HEADER))
        try:
            response = await call_next(request)
        finally:
            reset_request_id(token)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
