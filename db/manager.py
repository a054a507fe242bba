"""Database manager for the Kakeibo SQLite ledger."""

import sqlite3
from contextlib import contextmanager
from config import Config, get_migrations_dir, get_seed_dir


class DatabaseManager:
    """Opens connections to the ledger database and locates its schema files.

    Args:
        config: Application configuration object.
    """

    def __init__(self, config: Config):
        self.config = config

    @contextmanager
    def connect(self):
        """Get a database connection with automatic cleanup.

        The data directory is created on first use.

        Yields:
            sqlite3.Connection: Database connection.
        """
        db_path = self.config.db_path
        db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(db_path)
        try:
            yield conn
        finally:
            conn.close()

    def get_db_path(self):
        """Path to the SQLite database file."""
        return self.config.db_path

    def get_migrations_dir(self):
        """Directory holding the numbered *.sql migrations."""
        return get_migrations_dir()

    def get_seed_dir(self):
        """Directory holding the bundled seed JSON files."""
        return get_seed_dir()
