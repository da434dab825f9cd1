"""Routes parsed webhook events to replies."""

from collections.abc import Iterable, Sequence
from typing import Protocol, assert_never, runtime_checkable

from pydantic import BaseModel

from healthybot.exceptions import ReplySendError
from healthybot.logging.config import get_logger
from healthybot.schemas.reply import ReplyMessage, TextReply
from healthybot.schemas.webhook import (
    ImageMessageContent,
    MessageContent,
    MessageEvent,
    StickerMessageContent,
    TextMessageContent,
    UnknownMessageContent,
    UnsupportedEvent,
    VideoMessageContent,
    WebhookEvent,
)

logger = get_logger(__name__)


@runtime_checkable
class ReplyClient(Protocol):
    """Anything that can reply to a reply token."""

    def reply(self, reply_token: str, messages: Sequence[ReplyMessage]) -> None:
        ...


class DispatchResult(BaseModel):
    """Per-batch outcome counts."""

    replied: int = 0
    skipped: int = 0
    failed: int = 0


def build_reply_text(message: MessageContent) -> str | None:
    """
    Build the reply body for a message, or None if it gets no reply.

    Args:
        message: Message content from a message event

    Returns:
        Reply text, None for video and unknown message kinds
    """
    match message:
        case TextMessageContent():
            return message.text
        case StickerMessageContent():
            return (
                f"sticker id is {message.sticker_id}, "
                f"stickerResourceType is {message.sticker_resource_type}"
            )
        case ImageMessageContent():
            original_content_url = message.content_provider.original_content_url or ""
            return (
                f"image id is {message.id}, "
                f"imageOriginalContentUrl is {original_content_url}"
            )
        case VideoMessageContent():
            return None
        case UnknownMessageContent():
            logger.info(
                "Unsupported message content",
                extra={"context": {"message_type": message.type}},
            )
            return None
        case _:
            assert_never(message)


class EventDispatcher:
    """
    Replies to each message event of a webhook batch.

    Events are handled one at a time in delivery order. A failed reply is
    logged and never stops the rest of the batch; dispatch never raises.
    """

    def __init__(self, client: ReplyClient) -> None:
        """
        Initialize EventDispatcher.

        Args:
            client: Messaging client used to send replies
        """
        self.client = client

    def dispatch(self, events: Iterable[WebhookEvent]) -> DispatchResult:
        """
        Handle a batch of events.

        Args:
            events: Parsed webhook events

        Returns:
            DispatchResult with replied/skipped/failed counts
        """
        result = DispatchResult()
        for event in events:
            outcome = self._handle_event(event)
            setattr(result, outcome, getattr(result, outcome) + 1)
        return result

    def _handle_event(self, event: WebhookEvent) -> str:
        logger.debug(
            "Dispatching event", extra={"context": {"event_type": event.type}}
        )

        match event:
            case MessageEvent():
                pass
            case UnsupportedEvent():
                logger.info(
                    "Unsupported event",
                    extra={"context": {"event_type": event.type}},
                )
                return "skipped"
            case _:
                assert_never(event)

        reply_text = build_reply_text(event.message)
        if reply_text is None:
            return "skipped"

        return self._send(event, reply_text)

    def _send(self, event: MessageEvent, reply_text: str) -> str:
        context = {
            "message_type": event.message.type,
            "webhook_event_id": event.webhook_event_id,
        }
        try:
            self.client.reply(event.reply_token, [TextReply(text=reply_text)])
        except ReplySendError as e:
            logger.error(
                f"Failed to send {event.message.type} reply: {e.message}",
                exc_info=e,
                extra={
                    "context": {
                        **context,
                        "error_code": e.error_code,
                        "api_status": e.api_status,
                    }
                },
            )
            return "failed"
        except Exception as e:
            logger.error(
                f"Unexpected error sending {event.message.type} reply: "
                f"{type(e).__name__}: {e}",
                exc_info=e,
                extra={"context": context},
            )
            return "failed"

        logger.info(f"Sent {event.message.type} reply", extra={"context": context})
        return "replied"
