"""Tests for LINE webhook schemas."""

import pytest
from pydantic import ValidationError

from healthybot.schemas.webhook import (
    ImageMessageContent,
    MessageEvent,
    StickerMessageContent,
    TextMessageContent,
    UnknownMessageContent,
    UnsupportedEvent,
    VideoMessageContent,
    WebhookPayload,
)


def _payload(*events) -> WebhookPayload:
    return WebhookPayload.model_validate({"destination": "U123", "events": list(events)})


def _message(message: dict) -> dict:
    return {"type": "message", "replyToken": "token", "message": message}


@pytest.mark.parametrize(
    "message, model",
    [
        ({"type": "text", "id": "1", "text": "hi"}, TextMessageContent),
        (
            {
                "type": "sticker",
                "id": "2",
                "packageId": "446",
                "stickerId": "1988",
                "stickerResourceType": "STATIC",
                "keywords": ["happy"],
            },
            StickerMessageContent,
        ),
        ({"type": "image", "id": "3", "contentProvider": {"type": "line"}}, ImageMessageContent),
        ({"type": "video", "id": "4", "duration": 60000}, VideoMessageContent),
        ({"type": "audio", "id": "5", "duration": 6000}, UnknownMessageContent),
        ({"type": "location", "id": "6", "latitude": 35.6, "longitude": 139.7}, UnknownMessageContent),
    ],
)
def test_message_content_variants(message, model):
    """Test that each message kind parses into its variant."""
    payload = _payload(_message(message))

    event = payload.events[0]
    assert isinstance(event, MessageEvent)
    assert isinstance(event.message, model)
    assert event.message.type == message["type"]


def test_camel_case_fields():
    """Test that camelCase wire fields map to snake_case attributes."""
    payload = _payload(
        {
            "type": "message",
            "replyToken": "nHuyWiB7yP5Zw52FIkcQobQuGDXCTA",
            "webhookEventId": "01FZ74A0TDDPYRVKNK77XKC3ZR",
            "timestamp": 1462629479859,
            "message": {
                "type": "image",
                "id": "354718705033693859",
                "contentProvider": {
                    "type": "external",
                    "originalContentUrl": "https://example.com/original.jpg",
                    "previewImageUrl": "https://example.com/preview.jpg",
                },
            },
        }
    )

    event = payload.events[0]
    assert event.reply_token == "nHuyWiB7yP5Zw52FIkcQobQuGDXCTA"
    assert event.webhook_event_id == "01FZ74A0TDDPYRVKNK77XKC3ZR"
    assert event.message.content_provider.original_content_url == (
        "https://example.com/original.jpg"
    )


def test_sticker_fields():
    """Test sticker identifiers are read from the payload."""
    payload = _payload(
        _message(
            {
                "type": "sticker",
                "id": "2",
                "stickerId": "1",
                "stickerResourceType": "custom",
            }
        )
    )

    message = payload.events[0].message
    assert message.sticker_id == "1"
    assert message.sticker_resource_type == "custom"
    assert message.package_id is None


@pytest.mark.parametrize("event_type", ["follow", "unfollow", "postback", "join", "beacon"])
def test_non_message_events(event_type):
    """Test that non-message events become UnsupportedEvent."""
    payload = _payload({"type": event_type, "timestamp": 1})

    assert payload.events == [UnsupportedEvent(type=event_type)]


def test_event_order_preserved():
    """Test that events keep delivery order."""
    payload = _payload(
        _message({"type": "text", "id": "1", "text": "first"}),
        {"type": "follow"},
        _message({"type": "text", "id": "2", "text": "second"}),
    )

    assert [e.type for e in payload.events] == ["message", "follow", "message"]
    assert payload.events[2].message.text == "second"


def test_missing_events_defaults_to_empty():
    """Test that a payload without events has an empty list."""
    assert WebhookPayload.model_validate({"destination": "U123"}).events == []


def test_missing_content_fields_default_to_empty():
    """Test that absent message fields parse as empty strings."""
    payload = _payload(
        _message({"type": "text"}),
        _message({"type": "sticker", "stickerId": "1"}),
    )

    text, sticker = (event.message for event in payload.events)
    assert text == TextMessageContent(id="", text="")
    assert sticker.sticker_id == "1"
    assert sticker.sticker_resource_type == ""


def test_models_are_frozen():
    """Test that parsed events are immutable."""
    event = MessageEvent(reply_token="t", message=TextMessageContent(id="1", text="hi"))

    with pytest.raises(ValidationError):
        event.reply_token = "other"
