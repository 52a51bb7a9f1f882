"""
Global error handling.

Every failure leaves the API as {statusCode, message, success: false, errors}.
"""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from vitrine.domain.exceptions import ValidationError, VitrineException
from vitrine.infrastructure.monitoring.logger import get_logger
from vitrine.presentation.schemas.envelope import ApiErrorResponse

logger = get_logger(__name__)

STATUS_CODE_MAP = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "UPLOAD_FAILED": status.HTTP_400_BAD_REQUEST,
    "AUTHENTICATION_ERROR": status.HTTP_401_UNAUTHORIZED,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "MISSING_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "INVALID_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "EXPIRED_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "REFRESH_TOKEN_REUSED": status.HTTP_401_UNAUTHORIZED,
    "ENTITY_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "DUPLICATE_ENTITY": status.HTTP_409_CONFLICT,
    "INTERNAL_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "TOKEN_ISSUE_FAILED": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(status_code: int, message: str, errors: list | None = None):
    """Render the failure envelope."""
    envelope = ApiErrorResponse(
        status_code=status_code, message=message, errors=errors or []
    )
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(by_alias=True, mode="json"),
    )


async def vitrine_exception_handler(
    request: Request, exc: VitrineException
) -> JSONResponse:
    """
    Handle Vitrine domain exceptions.

    Converts domain exceptions to appropriate HTTP responses.
    """
    status_code = STATUS_CODE_MAP.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    errors = []
    if isinstance(exc, ValidationError):
        errors.append({"field": exc.field, "message": exc.reason})

    if status_code >= 500:
        logger.error(
            f"{exc.code}: {exc.message}",
            extra={"path": request.url.path},
        )

    response = error_response(status_code, exc.message, errors)
    if status_code == status.HTTP_401_UNAUTHORIZED:
        response.headers["WWW-Authenticate"] = "Bearer"
    return response


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle malformed request bodies/params as 400."""
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ())),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request", errors)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Wrap framework HTTP errors (404 route, 405 ...) in the envelope."""
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and hide their details from the client."""
    logger.exception(
        "Unhandled error",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Something went wrong on our side"
    )
