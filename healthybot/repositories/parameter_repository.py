"""Repository for SSM Parameter Store lookups."""

from botocore.exceptions import BotoCoreError, ClientError

from healthybot.config import Settings
from healthybot.exceptions import SecretResolutionError
from healthybot.repositories.base import BaseRepository


class ParameterRepository(BaseRepository):
    """Reads (optionally encrypted) parameters from SSM Parameter Store."""

    service_name = "ssm"

    def __init__(self, app_settings: Settings | None = None) -> None:
        """
        Initialize parameter repository.

        Args:
            app_settings: Settings to read from (defaults to global settings)
        """
        super().__init__(app_settings)
        self.endpoint_url = self.settings.ssm_endpoint_url

    async def get_value(self, name: str, with_decryption: bool = True) -> str:
        """
        Get a parameter value by name.

        Args:
            name: Parameter name
            with_decryption: Decrypt SecureString parameters

        Returns:
            Parameter value

        Raises:
            SecretResolutionError: If the parameter is missing or unreadable
        """
        try:
            async with self.client() as ssm:
                response = await ssm.get_parameter(
                    Name=name, WithDecryption=with_decryption
                )
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            raise SecretResolutionError(
                message=f"Failed to get parameter {name}: {error_code}",
                parameter_name=name,
                details={"aws_error_code": error_code},
            ) from e
        except BotoCoreError as e:
            raise SecretResolutionError(
                message=f"Failed to get parameter {name}: {e}",
                parameter_name=name,
            ) from e

        return response["Parameter"]["Value"]

    async def put_value(self, name: str, value: str, overwrite: bool = False) -> bool:
        """
        Store a value as an encrypted SecureString parameter.

        Args:
            name: Parameter name
            value: Plaintext value
            overwrite: Replace an existing parameter

        Returns:
            True if written, False if it already exists and overwrite is off

        Raises:
            ClientError: For any other Parameter Store error
        """
        try:
            async with self.client() as ssm:
                await ssm.put_parameter(
                    Name=name,
                    Value=value,
                    Type="SecureString",
                    Overwrite=overwrite,
                )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ParameterAlreadyExists":
                return False
            raise
        return True
