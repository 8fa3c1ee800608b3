"""
Database bootstrap.
"""

import logging
import sqlite3

from infrastructure.schema_manager import SchemaManager

logger = logging.getLogger("rift_shuffle.database")


class Database:
    """
    Entry point for a SQLite database file.

    Creating an instance ensures the schema exists and all migrations are applied.
    """

    def __init__(self, db_path: str):
        self.db_path = db_path
        self.schema_manager = SchemaManager(db_path)
        self.schema_manager.initialize()

    def get_connection(self) -> sqlite3.Connection:
        """Open a connection with row access by name, WAL journaling and a busy timeout."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode=WAL")
        conn.execute("PRAGMA busy_timeout=5000")
        return conn
