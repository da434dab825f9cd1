"""Process-wide runtime state built once at cold start."""

from pydantic import BaseModel, ConfigDict, Field

from healthybot.config import Settings, settings
from healthybot.exceptions import MessagingClientInitError, SecretResolutionError
from healthybot.logging.config import get_logger
from healthybot.messaging.client import LineMessagingClient
from healthybot.repositories.parameter_repository import ParameterRepository
from healthybot.services.event_dispatcher import EventDispatcher, ReplyClient
from healthybot.services.webhook_parser import WebhookParser

logger = get_logger(__name__)


class BotRuntime(BaseModel):
    """
    Resolved secrets and the clients built from them.

    Frozen after construction; shared read-only across warm invocations.

    Attributes:
        channel_secret: Secret used to verify webhook signatures
        channel_access_token: Token used to call the Messaging API
        parser: Webhook verifier/parser keyed by channel_secret
        messaging_client: Reply client authorized by channel_access_token
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    channel_secret: str = Field(..., repr=False)
    channel_access_token: str = Field(..., repr=False)
    parser: WebhookParser
    messaging_client: ReplyClient

    @property
    def dispatcher(self) -> EventDispatcher:
        """Event dispatcher bound to this runtime's messaging client."""
        return EventDispatcher(self.messaging_client)


def build_runtime(channel_secret: str, channel_access_token: str) -> BotRuntime:
    """
    Build a runtime from already resolved secrets.

    Args:
        channel_secret: Channel secret
        channel_access_token: Channel access token

    Returns:
        BotRuntime

    Raises:
        MessagingClientInitError: If the messaging client cannot be built
    """
    return BotRuntime(
        channel_secret=channel_secret,
        channel_access_token=channel_access_token,
        parser=WebhookParser(channel_secret),
        messaging_client=LineMessagingClient(channel_access_token),
    )


async def resolve_secret(repository: ParameterRepository, name: str) -> str:
    """
    Read one decrypted parameter, falling back to an empty string.

    Args:
        repository: Parameter store repository
        name: Parameter name

    Returns:
        Parameter value, or "" if it could not be read
    """
    try:
        return await repository.get_value(name, with_decryption=True)
    except SecretResolutionError as e:
        logger.error(
            f"Secret resolution failed: {e.message}",
            extra={"context": {"error_code": e.error_code, **e.details}},
        )
        return ""


async def load_runtime(
    app_settings: Settings | None = None,
    repository: ParameterRepository | None = None,
) -> BotRuntime:
    """
    Resolve channel secrets from Parameter Store and build the runtime.

    A secret that cannot be read becomes an empty string; startup carries
    on. Failing to build the messaging client is fatal.

    Args:
        app_settings: Settings to read parameter names from
        repository: ParameterRepository instance (creates new if None)

    Returns:
        BotRuntime

    Raises:
        MessagingClientInitError: If the messaging client cannot be built
    """
    app_settings = app_settings or settings
    repository = repository or ParameterRepository(app_settings)

    channel_secret = await resolve_secret(
        repository, app_settings.channel_secret_parameter
    )
    channel_access_token = await resolve_secret(
        repository, app_settings.channel_access_token_parameter
    )

    try:
        runtime = build_runtime(channel_secret, channel_access_token)
    except MessagingClientInitError as e:
        logger.critical(
            f"Cannot start: {e.message}",
            extra={"context": {"error_code": e.error_code}},
        )
        raise

    logger.info(
        "Runtime initialized",
        extra={
            "context": {
                "channel_secret_resolved": bool(channel_secret),
                "channel_access_token_resolved": bool(channel_access_token),
            }
        },
    )
    return runtime
