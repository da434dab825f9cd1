"""Configuration management using Pydantic Settings."""

import os

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        # Only load .env file in development (not Lambda/production)
        env_file=".env" if os.getenv("AWS_EXECUTION_ENV") is None else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # AWS Configuration
    aws_region: str = "ap-northeast-1"
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None
    aws_session_token: str | None = None  # Required for temporary credentials

    @field_validator(
        "aws_access_key_id",
        "aws_secret_access_key",
        "aws_session_token",
        "ssm_endpoint_url",
        mode="before",
    )
    @classmethod
    def convert_empty_string_to_none(cls, v):
        """Convert empty strings to None so boto3 can use IAM role in Lambda."""
        if v is None:
            return None
        if isinstance(v, str) and v.strip() == "":
            return None
        return v

    # SSM Parameter Store Configuration
    ssm_endpoint_url: str | None = None
    channel_secret_parameter: str = "HEALTHYBOT_CHANNEL_SECRET"
    channel_access_token_parameter: str = "HEALTHYBOT_CHANNEL_ACCESS_TOKEN"

    # Application Configuration
    log_level: str = "INFO"
    api_title: str = "HealthyBot LINE Webhook"
    api_version: str = "1.0.0"
    api_gateway_base_path: str = "/"

    # API Limits
    max_request_size_bytes: int = 1024 * 1024  # 1MB


# Global settings instance
settings = Settings()
