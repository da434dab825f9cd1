"""Base repository class with common AWS client configuration."""

from typing import Any

import aioboto3

from healthybot.config import Settings, settings
from healthybot.logging.config import get_logger

logger = get_logger(__name__)


def get_aws_client_config(
    app_settings: Settings | None = None,
    endpoint_url: str | None = None,
) -> dict[str, Any]:
    """
    Build AWS client configuration based on environment.

    For AWS Lambda with IAM roles, returns minimal config (region only).
    For LocalStack, includes endpoint_url and explicit credentials.

    Args:
        app_settings: Settings to read from (defaults to global settings)
        endpoint_url: Service endpoint override (LocalStack)

    Returns:
        Dictionary of boto3 client parameters
    """
    app_settings = app_settings or settings
    config: dict[str, Any] = {"region_name": app_settings.aws_region}

    if endpoint_url:
        config["endpoint_url"] = endpoint_url
        logger.info(
            "AWS client config: using endpoint override",
            extra={"context": {"endpoint_url": endpoint_url}},
        )

    # In Lambda, AWS provides AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY and
    # AWS_SESSION_TOKEN; temporary credentials need all three
    if app_settings.aws_access_key_id:
        config["aws_access_key_id"] = app_settings.aws_access_key_id
    if app_settings.aws_secret_access_key:
        config["aws_secret_access_key"] = app_settings.aws_secret_access_key
    if app_settings.aws_session_token:
        config["aws_session_token"] = app_settings.aws_session_token

    if "aws_access_key_id" not in config:
        logger.debug("AWS client config: using default credential chain")

    return config


class BaseRepository:
    """
    Base repository holding an aioboto3 session for one AWS service.

    Clients are opened per call with ``async with`` so no connection
    outlives the event loop that created it.
    """

    service_name: str = ""

    def __init__(
        self,
        app_settings: Settings | None = None,
        endpoint_url: str | None = None,
    ) -> None:
        """
        Initialize repository.

        Args:
            app_settings: Settings to read from (defaults to global settings)
            endpoint_url: Service endpoint override (LocalStack)
        """
        self.settings = app_settings or settings
        self.endpoint_url = endpoint_url
        self.session = aioboto3.Session()

    def client(self):
        """Return an async context manager for this repository's service client."""
        return self.session.client(
            self.service_name,
            **get_aws_client_config(self.settings, self.endpoint_url),
        )
