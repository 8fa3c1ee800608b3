"""
Repository for player data access.
"""

import logging
import uuid

from config import ROLES
from domain.models.player import Player
from repositories.base_repository import BaseRepository
from repositories.interfaces import IPlayerRepository

logger = logging.getLogger("rift_shuffle.repositories.player")

_UPDATABLE_FIELDS = {"name", *ROLES}


class PlayerRepository(BaseRepository, IPlayerRepository):
    """
    Handles all player-related database operations.

    Responsibilities:
    - CRUD operations for roster players
    - Role score persistence
    """

    def add(
        self,
        name: str,
        top: int = 0,
        jungle: int = 0,
        mid: int = 0,
        adc: int = 0,
        support: int = 0,
        player_id: str | None = None,
    ) -> Player:
        """
        Add a new player to the roster.

        Args:
            name: Display name
            top, jungle, mid, adc, support: Role scores
            player_id: Optional id; a random hex uuid is generated when omitted

        Returns:
            The stored Player

        Raises:
            ValueError: If a player with this id already exists
        """
        player_id = player_id or uuid.uuid4().hex
        with self.connection() as conn:
            cursor = conn.cursor()

            cursor.execute("SELECT player_id FROM players WHERE player_id = ?", (player_id,))
            if cursor.fetchone():
                raise ValueError(f"Player with ID {player_id} already exists.")

            cursor.execute(
                """
                INSERT INTO players (player_id, name, top, jungle, mid, adc, support, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, CURRENT_TIMESTAMP)
            """,
                (player_id, name, top, jungle, mid, adc, support),
            )

        logger.info(f"Added player {name} ({player_id})")
        return Player(
            player_id=player_id,
            name=name,
            top=top,
            jungle=jungle,
            mid=mid,
            adc=adc,
            support=support,
        )

    def get_by_id(self, player_id: str) -> Player | None:
        """
        Get player by ID.

        Returns:
            Player object or None if not found
        """
        with self.connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM players WHERE player_id = ?", (player_id,))
            row = cursor.fetchone()

            if not row:
                return None

            return self._row_to_player(row)

    def get_by_ids(self, player_ids: list[str]) -> list[Player]:
        """
        Get multiple players by ID.

        IMPORTANT: Returns players in the SAME ORDER as the input player_ids.
        Unknown ids are skipped.
        """
        if not player_ids:
            return []

        with self.connection() as conn:
            cursor = conn.cursor()

            placeholders = ",".join("?" * len(player_ids))
            cursor.execute(
                f"SELECT * FROM players WHERE player_id IN ({placeholders})",
                list(player_ids),
            )
            by_id = {row["player_id"]: self._row_to_player(row) for row in cursor.fetchall()}

        return [by_id[pid] for pid in player_ids if pid in by_id]

    def get_all(self) -> list[Player]:
        """Get all players ordered by name."""
        with self.connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM players ORDER BY name COLLATE NOCASE, player_id")
            return [self._row_to_player(row) for row in cursor.fetchall()]

    def exists(self, player_id: str) -> bool:
        with self.connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT 1 FROM players WHERE player_id = ?", (player_id,))
            return cursor.fetchone() is not None

    def update(self, player_id: str, **fields) -> Player | None:
        """
        Update a player's name and/or role scores.

        Returns:
            The updated Player, or None if the player does not exist

        Raises:
            ValueError: If an unknown field is given
        """
        unknown = set(fields) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update field(s): {', '.join(sorted(unknown))}")

        if fields:
            # Column names come from the _UPDATABLE_FIELDS whitelist
            assignments = ", ".join(f"{column} = ?" for column in fields)
            with self.connection() as conn:
                cursor = conn.cursor()
                cursor.execute(
                    f"UPDATE players SET {assignments}, updated_at = CURRENT_TIMESTAMP WHERE player_id = ?",
                    (*fields.values(), player_id),
                )
                if cursor.rowcount == 0:
                    return None

        return self.get_by_id(player_id)

    def set_role_scores(self, scores: dict[str, dict[str, int]]) -> None:
        """
        Write several role scores in one transaction.

        Args:
            scores: Mapping of player_id -> {role: new_score}

        Raises:
            ValueError: If a role name is unknown
        """
        with self.atomic_transaction() as conn:
            cursor = conn.cursor()
            for player_id, role_scores in scores.items():
                for role, value in role_scores.items():
                    if role not in ROLES:
                        raise ValueError(f"Unknown role: {role!r}")
                    cursor.execute(
                        f"UPDATE players SET {role} = ?, updated_at = CURRENT_TIMESTAMP WHERE player_id = ?",
                        (value, player_id),
                    )

    def delete(self, player_id: str) -> bool:
        """Delete a player. Returns True if a row was removed."""
        with self.connection() as conn:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM players WHERE player_id = ?", (player_id,))
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info(f"Deleted player {player_id}")
        return deleted

    def _row_to_player(self, row) -> Player:
        """Convert database row to Player object."""
        return Player(
            player_id=row["player_id"],
            name=row["name"],
            top=row["top"] or 0,
            jungle=row["jungle"] or 0,
            mid=row["mid"] or 0,
            adc=row["adc"] or 0,
            support=row["support"] or 0,
        )
