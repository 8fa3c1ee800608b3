"""
Base repository with common database operations.
"""

import sqlite3
from abc import ABC
from contextlib import contextmanager

from database import Database



class BaseRepository(ABC):
    """
    Base class for all repositories.

    Provides common database connection management and utilities.
    """

    # One Database per path, so the schema is initialized once per process
    _databases: dict[str, Database] = {}

    def __init__(self, db_path: str):
        """
        Initialize repository with database path.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = db_path
        if db_path not in BaseRepository._databases:
            BaseRepository._databases[db_path] = Database(db_path)
        self.database = BaseRepository._databases[db_path]

    def get_connection(self) -> sqlite3.Connection:
        """Get a connection from the shared Database for this path."""
        return self.database.get_connection()

    @contextmanager
    def connection(self):
        """
        Context manager for database connections.

        Automatically commits on success, rolls back on exception,
        and always closes the connection.
        """
        conn = self.get_connection()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    @contextmanager
    def atomic_transaction(self):
        """
        Context manager for atomic transactions with immediate write lock.

        Uses BEGIN IMMEDIATE so that multi-row updates (such as post-match
        score adjustments) cannot interleave with another writer.
        """
        conn = self.get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("BEGIN IMMEDIATE")
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()
