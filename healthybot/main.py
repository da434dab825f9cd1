"""FastAPI application factory."""

from fastapi import FastAPI

from healthybot.config import settings
from healthybot.exceptions import HealthyBotError
from healthybot.handlers.exception_handler import (
    generic_exception_handler,
    healthybot_exception_handler,
)
from healthybot.logging.config import configure_logging
from healthybot.middleware.logging import LoggingMiddleware
from healthybot.middleware.request_validation import RequestSizeValidationMiddleware
from healthybot.routes import callback, ping
from healthybot.runtime import BotRuntime

# Configure logging before creating the app
configure_logging()


def create_app(runtime: BotRuntime) -> FastAPI:
    """
    Create the webhook application.

    Args:
        runtime: Resolved secrets and clients, shared read-only by all requests

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        description="""
## HealthyBot LINE Webhook

Receives LINE Messaging API webhooks and replies to each message event.

### Replies

- **Text**: echoed back verbatim
- **Sticker**: sticker ID and resource type
- **Image**: message ID and original content URL
- **Video** and other kinds: no reply

### Signature

Every `POST /callback` must carry an `X-Line-Signature` header signed with
the channel secret. Unsigned or mis-signed requests get `400`.
""",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.runtime = runtime

    # Register middleware (order matters: last added = outermost layer)
    app.add_middleware(RequestSizeValidationMiddleware)
    app.add_middleware(LoggingMiddleware)

    app.add_exception_handler(HealthyBotError, healthybot_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(ping.router)
    app.include_router(callback.router)

    return app
