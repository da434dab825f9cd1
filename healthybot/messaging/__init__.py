"""Outbound messaging clients."""

from healthybot.messaging.client import LineMessagingClient

__all__ = ["LineMessagingClient"]
