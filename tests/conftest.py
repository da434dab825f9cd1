"""Shared pytest fixtures."""

import base64
import hashlib
import hmac
import json
from collections.abc import AsyncGenerator, Callable
from typing import Any
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from healthybot.main import create_app
from healthybot.messaging.client import LineMessagingClient
from healthybot.runtime import BotRuntime
from healthybot.services.webhook_parser import WebhookParser

CHANNEL_SECRET = "test-channel-secret"
CHANNEL_ACCESS_TOKEN = "test-channel-access-token"


def sign_body(body: str | bytes, secret: str = CHANNEL_SECRET) -> str:
    """Compute the X-Line-Signature value LINE would send for a body."""
    if isinstance(body, str):
        body = body.encode("utf-8")
    digest = hmac.new(secret.encode("utf-8"), body, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("utf-8")


def text_event(text: str, reply_token: str = "reply-token-1") -> dict[str, Any]:
    """Build a LINE text message event."""
    return {
        "type": "message",
        "replyToken": reply_token,
        "timestamp": 1462629479859,
        "mode": "active",
        "webhookEventId": f"evt-{reply_token}",
        "source": {"type": "user", "userId": "U4af4980629"},
        "message": {"type": "text", "id": "444573844083572737", "text": text},
    }


def sticker_event(
    sticker_id: str, resource_type: str, reply_token: str = "reply-token-2"
) -> dict[str, Any]:
    """Build a LINE sticker message event."""
    return {
        "type": "message",
        "replyToken": reply_token,
        "timestamp": 1462629479859,
        "mode": "active",
        "webhookEventId": f"evt-{reply_token}",
        "source": {"type": "user", "userId": "U4af4980629"},
        "message": {
            "type": "sticker",
            "id": "1501597916",
            "packageId": "446",
            "stickerId": sticker_id,
            "stickerResourceType": resource_type,
        },
    }


def webhook_body(*events: dict[str, Any]) -> str:
    """Serialize a webhook payload the way LINE delivers it."""
    return json.dumps(
        {"destination": "Uxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxx", "events": list(events)}
    )


@pytest.fixture
def sign() -> Callable[..., str]:
    """Signature helper."""
    return sign_body


@pytest.fixture
def mock_messaging_client() -> Mock:
    """Create mock LineMessagingClient."""
    return Mock(spec=LineMessagingClient)


@pytest.fixture
def runtime(mock_messaging_client: Mock) -> BotRuntime:
    """Create a runtime with a real parser and a mocked messaging client."""
    return BotRuntime(
        channel_secret=CHANNEL_SECRET,
        channel_access_token=CHANNEL_ACCESS_TOKEN,
        parser=WebhookParser(CHANNEL_SECRET),
        messaging_client=mock_messaging_client,
    )


@pytest.fixture
def app(runtime: BotRuntime) -> FastAPI:
    """Create the application under test."""
    return create_app(runtime)


@pytest.fixture
async def api_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for testing API endpoints."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client
