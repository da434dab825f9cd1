"""AWS Lambda handler for the HealthyBot webhook.

Secrets are resolved and the application is built once, at import time
(cold start). Warm invocations reuse the same runtime and app.
"""

import asyncio

from mangum import Mangum

from healthybot.config import settings
from healthybot.logging.config import get_logger
from healthybot.main import create_app
from healthybot.runtime import load_runtime

logger = get_logger(__name__)

logger.info("Cold start")

# Mangum runs each invocation on the current event loop, so keep this one
# installed instead of using asyncio.run (which unsets it when done)
loop = asyncio.new_event_loop()
asyncio.set_event_loop(loop)

# MessagingClientInitError propagates and fails the cold start
runtime = loop.run_until_complete(load_runtime(settings))
app = create_app(runtime)

# Mangum converts API Gateway events to ASGI requests and back
handler = Mangum(
    app, lifespan="off", api_gateway_base_path=settings.api_gateway_base_path
)


def lambda_handler(event: dict, context: object) -> dict:
    """
    AWS Lambda function handler.

    Args:
        event: API Gateway event containing request details
        context: Lambda context object with runtime information

    Returns:
        API Gateway response dict with statusCode, headers, and body
    """
    return handler(event, context)
