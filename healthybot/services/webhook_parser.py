"""Signature verification and parsing of LINE webhook requests."""

import base64
import hashlib
import hmac

from linebot.v3.webhook import SignatureValidator, compare_digest
from pydantic import ValidationError

from healthybot.exceptions import SignatureInvalidError, WebhookParseError
from healthybot.logging.config import get_logger
from healthybot.schemas.webhook import WebhookEvent, WebhookPayload

logger = get_logger(__name__)


class RawBodySignatureValidator(SignatureValidator):
    """LINE SDK signature validator that also accepts the undecoded body."""

    def validate(self, body: bytes | str, signature: str) -> bool:
        if isinstance(body, str):
            return super().validate(body, signature)
        digest = hmac.new(self.channel_secret, body, hashlib.sha256).digest()
        return compare_digest(signature.encode("utf-8"), base64.b64encode(digest))


class WebhookParser:
    """
    Verifies the ``X-Line-Signature`` header and parses the request body.

    The signature is checked against the raw body (HMAC-SHA256 keyed by the
    channel secret) before the body is decoded, so a signed body that is not
    UTF-8 is a parse error rather than a signature error.
    """

    def __init__(self, channel_secret: str) -> None:
        """
        Initialize parser.

        Args:
            channel_secret: Channel secret used to sign webhook bodies
        """
        self._validator = RawBodySignatureValidator(channel_secret)

    def parse(self, body: bytes | str, signature: str | None) -> list[WebhookEvent]:
        """
        Verify and parse a webhook body.

        Args:
            body: Raw request body
            signature: Value of the X-Line-Signature header

        Returns:
            Parsed events in delivery order

        Raises:
            SignatureInvalidError: If the signature is missing or wrong
            WebhookParseError: If the signed body is not a valid payload
        """
        if not signature:
            raise SignatureInvalidError(message="Missing X-Line-Signature header")

        if not self._validator.validate(body, signature):
            raise SignatureInvalidError()

        if isinstance(body, bytes):
            try:
                body = body.decode("utf-8")
            except UnicodeDecodeError as e:
                raise WebhookParseError(
                    message="Webhook body is not valid UTF-8",
                    details={"position": e.start},
                ) from e

        try:
            payload = WebhookPayload.model_validate_json(body)
        except ValidationError as e:
            raise WebhookParseError(
                message=f"Failed to parse webhook body: {e.error_count()} error(s)",
                details={
                    "errors": [
                        {
                            "loc": list(error["loc"]),
                            "msg": error["msg"],
                            "type": error["type"],
                        }
                        for error in e.errors()
                    ]
                },
            ) from e

        logger.debug(
            "Parsed webhook payload",
            extra={
                "context": {
                    "destination": payload.destination,
                    "event_count": len(payload.events),
                }
            },
        )
        return payload.events
