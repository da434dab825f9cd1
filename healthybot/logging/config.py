"""JSON logging for the webhook.

Lambda forwards stdout to CloudWatch Logs, so each record becomes one JSON
line there. Context passed as ``extra={"context": {...}}`` is merged into
the top level of the line.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from healthybot.config import settings

REDACTED = "***"

# Context keys whose values must never reach the log stream
SENSITIVE_KEYS = frozenset(
    {
        "channel_secret",
        "channel_access_token",
        "access_token",
        "x_line_signature",
        "signature",
    }
)

# Third-party loggers that flood CloudWatch below INFO
NOISY_LOGGERS = ("botocore", "aiobotocore", "urllib3", "linebot")


def _redact(context: dict[str, Any]) -> dict[str, Any]:
    return {
        key: REDACTED if key.lower() in SENSITIVE_KEYS else value
        for key, value in context.items()
    }


class JSONFormatter(logging.Formatter):
    """
    Render a log record as a single JSON object.

    Fields: ``timestamp`` (UTC, from the record), ``level``, ``logger``,
    ``message``, ``correlation_id`` when the request has one, the record's
    ``context`` with sensitive keys masked, ``exception`` when exc_info is
    set, and the source location for DEBUG records.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        correlation_id = getattr(record, "correlation_id", None)
        if correlation_id:
            entry["correlation_id"] = correlation_id

        context = getattr(record, "context", None)
        if isinstance(context, dict):
            entry.update(_redact(context))

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        if record.levelno == logging.DEBUG:
            entry.update(
                file=record.pathname, line=record.lineno, function=record.funcName
            )

        return json.dumps(entry, default=str, ensure_ascii=False)


def configure_logging(level: str | None = None) -> None:
    """
    Route all logging to stdout as JSON lines.

    Replaces any handlers already on the root logger (the Lambda runtime
    installs one) so records are not written twice.

    Args:
        level: Level name; defaults to the LOG_LEVEL setting
    """
    level_name = (level or settings.log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(log_level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.INFO))

    root_logger.info("Logging configured", extra={"context": {"log_level": level_name}})


def get_logger(name: str) -> logging.Logger:
    """Return the module logger for ``name`` (usually ``__name__``)."""
    return logging.getLogger(name)
