"""Repository layer for AWS-backed lookups."""

from healthybot.repositories.base import BaseRepository
from healthybot.repositories.parameter_repository import ParameterRepository

__all__ = ["BaseRepository", "ParameterRepository"]
