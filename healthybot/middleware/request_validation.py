"""Request validation middleware."""

from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from healthybot.config import settings
from healthybot.exceptions import RequestTooLargeError
from healthybot.handlers.exception_handler import create_error_response


def check_request_size(size: int) -> None:
    """
    Raise if a request body size exceeds the configured limit.

    Args:
        size: Body size in bytes

    Raises:
        RequestTooLargeError: If size is over max_request_size_bytes
    """
    max_size = settings.max_request_size_bytes
    if size > max_size:
        size_kb = size / 1024
        max_kb = max_size / 1024
        raise RequestTooLargeError(
            message=f"Request size {size_kb:.1f}KB exceeds maximum {max_kb:.0f}KB",
            max_size=f"{max_kb:.0f}KB",
            details={"request_size": f"{size_kb:.1f}KB"},
        )


class RequestSizeValidationMiddleware(BaseHTTPMiddleware):
    """
    Middleware to validate request size before processing.

    Rejects webhook bodies whose Content-Length is over the limit before
    they are read or verified. Bodies sent without Content-Length are
    checked by the route once read.
    Returns 413 Payload Too Large for oversized requests.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Validate request size and process request.

        Args:
            request: The incoming request
            call_next: The next middleware/handler in the chain

        Returns:
            The response from the handler, or a 413 error response
        """
        content_length = request.headers.get("content-length")

        if content_length:
            try:
                size = int(content_length)
            except ValueError:
                # Invalid Content-Length header, let the server deal with it
                size = 0

            try:
                check_request_size(size)
            except RequestTooLargeError as exc:
                return create_error_response(
                    error_code=exc.error_code,
                    message=exc.message,
                    status_code=exc.status_code,
                    details=exc.details,
                    correlation_id=getattr(request.state, "correlation_id", None),
                )

        return await call_next(request)
