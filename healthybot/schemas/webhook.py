"""Pydantic schemas for LINE webhook payloads.

Events and message contents are closed tagged unions discriminated on the
``type`` field. Any ``type`` outside the known set is routed to a fallback
model that only keeps its tag, so new LINE kinds never fail parsing.
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag
from pydantic.alias_generators import to_camel


class WebhookModel(BaseModel):
    """Base model for LINE payload objects (camelCase on the wire)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class TextMessageContent(WebhookModel):
    """Text message sent by a user."""

    type: Literal["text"] = "text"
    id: str = Field("", description="Message ID")
    text: str = Field("", description="Message text")


class StickerMessageContent(WebhookModel):
    """Sticker message sent by a user."""

    type: Literal["sticker"] = "sticker"
    id: str = Field("", description="Message ID")
    package_id: Optional[str] = Field(None, description="Sticker package ID")
    sticker_id: str = Field("", description="Sticker ID")
    sticker_resource_type: str = Field(
        "", description="Sticker resource type (STATIC, ANIMATION, ...)"
    )


class ContentProvider(WebhookModel):
    """Where the binary content of a media message is hosted."""

    type: str = Field("line", description="'line' or 'external'")
    original_content_url: Optional[str] = Field(
        None, description="Original file URL (external provider only)"
    )
    preview_image_url: Optional[str] = Field(
        None, description="Preview image URL (external provider only)"
    )


class ImageMessageContent(WebhookModel):
    """Image message sent by a user."""

    type: Literal["image"] = "image"
    id: str = Field("", description="Message ID")
    content_provider: ContentProvider = Field(default_factory=ContentProvider)


class VideoMessageContent(WebhookModel):
    """Video message sent by a user."""

    type: Literal["video"] = "video"
    id: str = Field("", description="Message ID")


class UnknownMessageContent(WebhookModel):
    """Any message kind the bot does not handle (audio, file, location, ...)."""

    type: str = "unknown"


_MESSAGE_CONTENT_TAGS = frozenset({"text", "sticker", "image", "video"})
_EVENT_TAGS = frozenset({"message"})


def _type_of(value: Any) -> Any:
    if isinstance(value, dict):
        return value.get("type")
    return getattr(value, "type", None)


def _message_content_tag(value: Any) -> str:
    kind = _type_of(value)
    return kind if kind in _MESSAGE_CONTENT_TAGS else "unknown"


def _event_tag(value: Any) -> str:
    kind = _type_of(value)
    return kind if kind in _EVENT_TAGS else "unsupported"


MessageContent = Annotated[
    Union[
        Annotated[TextMessageContent, Tag("text")],
        Annotated[StickerMessageContent, Tag("sticker")],
        Annotated[ImageMessageContent, Tag("image")],
        Annotated[VideoMessageContent, Tag("video")],
        Annotated[UnknownMessageContent, Tag("unknown")],
    ],
    Discriminator(_message_content_tag),
]


class MessageEvent(WebhookModel):
    """
    Event sent when a user messages the bot.

    Attributes:
        reply_token: Single-use token required to reply to this event
        message: Message content
        timestamp: Event time in milliseconds since epoch
        webhook_event_id: Unique webhook event ID
        mode: Channel state ('active' or 'standby')
    """

    type: Literal["message"] = "message"
    reply_token: str = Field("", description="Reply token")
    message: MessageContent
    timestamp: Optional[int] = None
    webhook_event_id: Optional[str] = None
    mode: Optional[str] = None


class UnsupportedEvent(WebhookModel):
    """Any event kind the bot does not handle (follow, postback, ...)."""

    type: str = "unknown"


WebhookEvent = Annotated[
    Union[
        Annotated[MessageEvent, Tag("message")],
        Annotated[UnsupportedEvent, Tag("unsupported")],
    ],
    Discriminator(_event_tag),
]


class WebhookPayload(WebhookModel):
    """
    Request body POSTed by the LINE platform.

    Attributes:
        destination: User ID of the bot that should receive the events
        events: Webhook events, in the order LINE delivered them
    """

    destination: Optional[str] = None
    events: list[WebhookEvent] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "destination": "Uxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxx",
                "events": [
                    {
                        "type": "message",
                        "replyToken": "nHuyWiB7yP5Zw52FIkcQobQuGDXCTA",
                        "timestamp": 1462629479859,
                        "mode": "active",
                        "webhookEventId": "01FZ74A0TDDPYRVKNK77XKC3ZR",
                        "message": {
                            "type": "text",
                            "id": "444573844083572737",
                            "text": "hi",
                        },
                    }
                ],
            }
        }
    )
