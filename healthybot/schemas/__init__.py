"""Schemas for LINE webhook payloads and replies."""

from healthybot.schemas.reply import ReplyMessage, TextReply
from healthybot.schemas.webhook import (
    ContentProvider,
    ImageMessageContent,
    MessageContent,
    MessageEvent,
    StickerMessageContent,
    TextMessageContent,
    UnknownMessageContent,
    UnsupportedEvent,
    VideoMessageContent,
    WebhookEvent,
    WebhookPayload,
)

__all__ = [
    "ContentProvider",
    "ImageMessageContent",
    "MessageContent",
    "MessageEvent",
    "ReplyMessage",
    "StickerMessageContent",
    "TextMessageContent",
    "TextReply",
    "UnknownMessageContent",
    "UnsupportedEvent",
    "VideoMessageContent",
    "WebhookEvent",
    "WebhookPayload",
]
