"""Tests for request size validation middleware."""

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient

from healthybot.config import settings
from healthybot.exceptions import RequestTooLargeError
from healthybot.middleware.request_validation import (
    RequestSizeValidationMiddleware,
    check_request_size,
)


@pytest.fixture
def app_with_size_limit() -> FastAPI:
    """Create a test FastAPI app with request size validation."""
    app = FastAPI()
    app.add_middleware(RequestSizeValidationMiddleware)

    @app.post("/echo")
    async def echo(request: Request) -> dict[str, int]:
        """Return the body length."""
        return {"length": len(await request.body())}

    return app


@pytest.mark.asyncio
async def test_small_request_passes(app_with_size_limit: FastAPI) -> None:
    """Test that requests under the limit reach the handler."""
    transport = ASGITransport(app=app_with_size_limit)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post("/echo", content=b"{}")

    assert response.status_code == 200
    assert response.json() == {"length": 2}


@pytest.mark.asyncio
async def test_oversized_request_rejected(app_with_size_limit: FastAPI) -> None:
    """Test that requests over the limit get 413."""
    transport = ASGITransport(app=app_with_size_limit)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post(
            "/echo", content=b"x" * (settings.max_request_size_bytes + 1)
        )

    assert response.status_code == 413
    data = response.json()
    assert data["status"] == "error"
    assert data["error_code"] == "PAYLOAD_TOO_LARGE"
    assert data["details"]["max_size"] == "1024KB"



def test_check_request_size_at_limit() -> None:
    """Test that a body exactly at the limit is accepted."""
    check_request_size(settings.max_request_size_bytes)


def test_check_request_size_over_limit() -> None:
    """Test that a body over the limit raises RequestTooLargeError."""
    with pytest.raises(RequestTooLargeError) as exc_info:
        check_request_size(settings.max_request_size_bytes + 1)

    assert exc_info.value.status_code == 413
    assert exc_info.value.details["max_size"] == "1024KB"
