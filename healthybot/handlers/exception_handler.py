"""Global exception handlers for consistent error responses."""

from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse

from healthybot.exceptions import HealthyBotError
from healthybot.logging.config import get_logger

logger = get_logger(__name__)


def create_error_response(
    error_code: str,
    message: str,
    status_code: int,
    details: dict[str, Any] | None = None,
    correlation_id: str | None = None,
) -> JSONResponse:
    """
    Create standardized error response.

    Args:
        error_code: Machine-readable error code
        message: Human-readable error message
        status_code: HTTP status code
        details: Additional error details
        correlation_id: Request correlation ID for tracing

    Returns:
        JSONResponse with error information
    """
    content = {
        "status": "error",
        "error_code": error_code,
        "message": message,
        "details": details or {},
    }

    if correlation_id:
        content["correlation_id"] = correlation_id

    return JSONResponse(status_code=status_code, content=content)


async def healthybot_exception_handler(
    request: Request, exc: HealthyBotError
) -> JSONResponse:
    """
    Handle custom HealthyBotError.

    Args:
        request: FastAPI request
        exc: HealthyBotError instance

    Returns:
        JSONResponse with error details
    """
    correlation_id = getattr(request.state, "correlation_id", None)

    logger.warning(
        f"Request rejected: {exc.message}",
        extra={
            "correlation_id": correlation_id,
            "context": {
                "error_code": exc.error_code,
                "status_code": exc.status_code,
                "path": request.url.path,
            },
        },
    )

    return create_error_response(
        error_code=exc.error_code,
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details,
        correlation_id=correlation_id,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Logs full traceback and returns generic error to client.

    Args:
        request: FastAPI request
        exc: Any unhandled exception

    Returns:
        JSONResponse with generic error message
    """
    correlation_id = getattr(request.state, "correlation_id", None)

    logger.error(
        f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
        exc_info=exc,
        extra={
            "correlation_id": correlation_id,
            "context": {
                "exception_type": type(exc).__name__,
                "method": request.method,
                "path": request.url.path,
            },
        },
    )

    return create_error_response(
        error_code="INTERNAL_ERROR",
        message="An internal error occurred.",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        details={},
        correlation_id=correlation_id,
    )
