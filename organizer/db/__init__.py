"""Database connection layer."""

from .database import MongoDatabaseManager

__all__ = ["MongoDatabaseManager"]
