"""
Schema and migration management for SQLite database.
"""

import logging
import sqlite3

logger = logging.getLogger("rift_shuffle.schema")


class SchemaManager:
    """
    Owns schema creation and migrations.

    Call initialize() to ensure schema is present and migrations are applied.
    """

    def __init__(self, db_path: str, use_uri: bool = False):
        self.db_path = db_path
        self.use_uri = use_uri

    def initialize(self) -> None:
        """Create base schema and apply migrations."""
        logger.info(f"Initializing database schema: {self.db_path}")
        with self._connect() as conn:
            cursor = conn.cursor()
            self._create_base_schema(cursor)
            self._create_schema_migrations_table(cursor)
            self._run_migrations(cursor)
            conn.commit()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path, uri=self.use_uri)
        conn.row_factory = sqlite3.Row
        if not self.use_uri:  # Skip WAL for in-memory databases
            conn.execute("PRAGMA journal_mode=WAL")
            conn.execute("PRAGMA busy_timeout=5000")
        return conn

    def _create_base_schema(self, cursor) -> None:
        # Roster
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS players (
                player_id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                top INTEGER DEFAULT 0,
                jungle INTEGER DEFAULT 0,
                mid INTEGER DEFAULT 0,
                adc INTEGER DEFAULT 0,
                support INTEGER DEFAULT 0,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
            """
        )

        # Match history; team columns hold JSON lists of assignment dicts
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS matches (
                match_id INTEGER PRIMARY KEY AUTOINCREMENT,
                team1_players TEXT NOT NULL,
                team2_players TEXT NOT NULL,
                winning_team INTEGER,
                match_date TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                notes TEXT
            )
            """
        )

        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS match_participants (
                match_id INTEGER,
                player_id TEXT,
                team_number INTEGER,
                role TEXT,
                assigned_score INTEGER,
                won BOOLEAN,
                FOREIGN KEY (match_id) REFERENCES matches(match_id),
                PRIMARY KEY (match_id, player_id)
            )
            """
        )

    # --- Migration helpers ---

    def _add_column_if_not_exists(self, cursor, table: str, column: str, column_type: str) -> None:
        try:
            cursor.execute(f"ALTER TABLE {table} ADD COLUMN {column} {column_type}")
        except sqlite3.OperationalError:
            pass

    def _create_schema_migrations_table(self, cursor) -> None:
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS schema_migrations (
                name TEXT PRIMARY KEY,
                applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
            """
        )

    def _run_migrations(self, cursor) -> None:
        applied = {row["name"] for row in cursor.execute("SELECT name FROM schema_migrations")}
        for name, action in self._get_migrations():
            if name in applied:
                continue
            logger.info(f"Applying migration: {name}")
            action(cursor)
            cursor.execute(
                "INSERT INTO schema_migrations (name) VALUES (?)",
                (name,),
            )

    def _get_migrations(self):
        return [
            ("add_match_balance_columns", self._migration_add_match_balance_columns),
            ("add_indexes_v1", self._migration_add_indexes_v1),
        ]

    # --- Migrations ---

    def _migration_add_match_balance_columns(self, cursor) -> None:
        self._add_column_if_not_exists(cursor, "matches", "balanced", "BOOLEAN DEFAULT 1")
        self._add_column_if_not_exists(cursor, "matches", "score_diff", "INTEGER")

    def _migration_add_indexes_v1(self, cursor) -> None:
        cursor.execute(
            "CREATE INDEX IF NOT EXISTS idx_match_participants_player ON match_participants(player_id)"
        )
        cursor.execute("CREATE INDEX IF NOT EXISTS idx_matches_date ON matches(match_date)")
        cursor.execute("CREATE INDEX IF NOT EXISTS idx_players_name ON players(name)")
