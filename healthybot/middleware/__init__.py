"""Middleware components for request processing."""

from healthybot.middleware.logging import LoggingMiddleware
from healthybot.middleware.request_validation import RequestSizeValidationMiddleware

__all__ = [
    "LoggingMiddleware",
    "RequestSizeValidationMiddleware",
]
