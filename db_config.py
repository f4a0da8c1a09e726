# db_config.py
"""Database configuration for switching between disk and in-memory storage."""

from enum import Enum
from typing import Any, Optional
import os
import logging

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///perfpages.db"
MEMORY_DATABASE_URL = "sqlite:///:memory:"


class DatabaseMode(Enum):
    """Enum for database operation modes."""

    DISK = "disk"
    MEMORY = "memory"


class DatabaseConfig:
    """Process-wide database mode used by the application factory."""

    _mode: DatabaseMode = DatabaseMode.DISK

    @classmethod
    def set_mode(cls, mode: DatabaseMode) -> None:
        """Set the database mode."""
        cls._mode = mode
        if mode == DatabaseMode.MEMORY:
            logger.warning("Using memory-only database; pages will not survive a restart")

    @classmethod
    def is_memory_mode(cls) -> bool:
        return cls._mode == DatabaseMode.MEMORY

    @classmethod
    def get_database_uri(cls) -> str:
        """Return the SQLAlchemy URI for the current mode.

        Memory mode ignores ``DATABASE_URL``; disk mode honours it and falls
        back to a local SQLite file.
        """
        if cls._mode == DatabaseMode.MEMORY:
            return MEMORY_DATABASE_URL
        return os.environ.get("DATABASE_URL", DEFAULT_DATABASE_URL)

    @classmethod
    def get_engine_options(cls, database_uri: Optional[str] = None) -> dict[str, Any]:
        """Return engine options suitable for *database_uri*."""
        uri = database_uri if database_uri is not None else cls.get_database_uri()

        # Each connection to sqlite:///:memory: is a separate database, so the
        # whole app has to share a single connection.
        if uri.strip().lower() == MEMORY_DATABASE_URL:
            from sqlalchemy.pool import StaticPool  # pylint: disable=import-outside-toplevel

            return {
                "poolclass": StaticPool,
                "connect_args": {"check_same_thread": False},
            }

        return {
            "pool_pre_ping": True,
            "pool_recycle": 300,
        }

    @classmethod
    def reset(cls) -> None:
        """Reset configuration to defaults (useful for testing)."""
        cls._mode = DatabaseMode.DISK
