"""FastAPI dependencies."""

from fastapi import Request

from healthybot.runtime import BotRuntime


def get_runtime(request: Request) -> BotRuntime:
    """
    Return the runtime the application was created with.

    Args:
        request: FastAPI request

    Returns:
        BotRuntime stored on app.state
    """
    return request.app.state.runtime
