"""SQLite access for Tally."""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from config import Config, get_migrations_dir
from logger import get_logger

logger = get_logger()


class DatabaseManager:
    """Owns the wallet database file and hands out short-lived connections.

    Services open a connection per call; nothing is shared between threads.

    Args:
        config: Application configuration object.
    """

    def __init__(self, config: Config):
        self.config = config

    @contextmanager
    def connect(self):
        """Open a connection, creating the data directory on first use.

        Uncommitted work is rolled back if the block raises.

        Yields:
            sqlite3.Connection: Database connection.
        """
        db_path = self.get_db_path()
        db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(db_path)
        try:
            yield conn
        except sqlite3.Error as e:
            logger.debug(f"Rolling back after database error: {e}")
            conn.rollback()
            raise
        finally:
            conn.close()

    def exists(self) -> bool:
        """Whether the database file has been created yet."""
        return self.get_db_path().exists()

    def get_db_path(self) -> Path:
        return self.config.db_path

    def get_migrations_dir(self) -> Path:
        return get_migrations_dir()
