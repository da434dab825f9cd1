"""Custom exception classes for the HealthyBot webhook."""

from typing import Any


class HealthyBotError(Exception):
    """Base exception for HealthyBot."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize exception.

        Args:
            message: Human-readable error message
            status_code: HTTP status code
            error_code: Machine-readable error code
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}


class SecretResolutionError(HealthyBotError):
    """Raised when a parameter cannot be read from the parameter store."""

    def __init__(
        self,
        message: str = "Failed to resolve secret parameter",
        parameter_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize SecretResolutionError.

        Args:
            message: Error message
            parameter_name: Name of the parameter that could not be read
            details: Additional error details
        """
        error_details = details or {}
        if parameter_name:
            error_details["parameter_name"] = parameter_name
        super().__init__(
            message=message,
            status_code=500,
            error_code="SECRET_RESOLUTION_ERROR",
            details=error_details,
        )


class MessagingClientInitError(HealthyBotError):
    """Raised when the messaging API client cannot be constructed."""

    def __init__(
        self,
        message: str = "Failed to construct messaging API client",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=500,
            error_code="MESSAGING_CLIENT_INIT_ERROR",
            details=details,
        )


class SignatureInvalidError(HealthyBotError):
    """Raised when the webhook signature does not match the body (400)."""

    def __init__(
        self,
        message: str = "Invalid signature",
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize SignatureInvalidError.

        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(
            message=message,
            status_code=400,
            error_code="INVALID_SIGNATURE",
            details=details,
        )


class WebhookParseError(HealthyBotError):
    """Raised when a signed webhook body cannot be parsed (500)."""

    def __init__(
        self,
        message: str = "Failed to parse webhook body",
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize WebhookParseError.

        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(
            message=message,
            status_code=500,
            error_code="WEBHOOK_PARSE_ERROR",
            details=details,
        )


class ReplySendError(HealthyBotError):
    """Raised when the messaging API rejects or fails a reply call."""

    def __init__(
        self,
        message: str = "Failed to send reply",
        reply_token: str | None = None,
        api_status: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize ReplySendError.

        Args:
            message: Error message
            reply_token: Reply token the call was made with
            api_status: HTTP status returned by the messaging API, if any
            details: Additional error details
        """
        error_details = details or {}
        if reply_token:
            error_details["reply_token"] = reply_token
        if api_status is not None:
            error_details["api_status"] = api_status
        super().__init__(
            message=message,
            status_code=502,
            error_code="REPLY_SEND_ERROR",
            details=error_details,
        )
        self.api_status = api_status


class RequestTooLargeError(HealthyBotError):
    """Raised when request payload exceeds size limit (413)."""

    def __init__(
        self,
        message: str = "Request payload too large",
        max_size: str = "1024KB",
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize RequestTooLargeError.

        Args:
            message: Error message
            max_size: Maximum allowed size
            details: Additional error details
        """
        error_details = details or {}
        error_details["max_size"] = max_size
        super().__init__(
            message=message,
            status_code=413,
            error_code="PAYLOAD_TOO_LARGE",
            details=error_details,
        )
