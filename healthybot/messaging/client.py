"""LINE Messaging API client wrapper."""

from collections.abc import Sequence

from linebot.v3.messaging import (
    ApiClient,
    ApiException,
    Configuration,
    MessagingApi,
    ReplyMessageRequest,
    TextMessage,
)

from healthybot.exceptions import MessagingClientInitError, ReplySendError
from healthybot.schemas.reply import ReplyMessage


class LineMessagingClient:
    """
    Thin wrapper over the LINE Messaging API exposing a single reply call.

    The underlying API client is created once and reused for the life of
    the process (warm Lambda invocations included).
    """

    def __init__(self, access_token: str) -> None:
        """
        Initialize the client.

        Args:
            access_token: Channel access token

        Raises:
            MessagingClientInitError: If the SDK client cannot be constructed
        """
        try:
            configuration = Configuration(access_token=access_token)
            self._api_client = ApiClient(configuration)
            self._api = MessagingApi(self._api_client)
        except Exception as e:
            raise MessagingClientInitError(
                message=f"Failed to construct messaging API client: {e}"
            ) from e

    def reply(self, reply_token: str, messages: Sequence[ReplyMessage]) -> None:
        """
        Reply to a message event.

        Args:
            reply_token: Reply token from the webhook event
            messages: Ordered reply messages

        Raises:
            ReplySendError: If the messaging API rejects the call
        """
        request = ReplyMessageRequest(
            reply_token=reply_token,
            messages=[TextMessage(text=message.text) for message in messages],
        )
        try:
            self._api.reply_message(request)
        except ApiException as e:
            raise ReplySendError(
                message=f"Messaging API returned {e.status}: {e.reason}",
                reply_token=reply_token,
                api_status=e.status,
                details={"body": e.body} if e.body else None,
            ) from e
