"""
Repository for match data access.
"""

import json
import logging

from config import ROLES
from repositories.base_repository import BaseRepository
from repositories.interfaces import IMatchRepository

logger = logging.getLogger("rift_shuffle.repositories.match")


class MatchRepository(BaseRepository, IMatchRepository):
    """
    Handles all match-related database operations.

    Responsibilities:
    - Match recording
    - Match participant tracking
    - Match history queries
    """

    def record_match(
        self,
        team1: list[dict],
        team2: list[dict],
        winning_team: int,
        balanced: bool = True,
        score_diff: int | None = None,
        notes: str | None = None,
        score_updates: dict[str, dict[str, int]] | None = None,
    ) -> int:
        """
        Record a match result and apply post-match role scores in one transaction.

        Args:
            team1: Assignment dicts ({id, name, role, assignedScore}) of team 1
            team2: Assignment dicts of team 2
            winning_team: 1 (team 1 won) or 2 (team 2 won)
            balanced: Whether the teams came from the balanced path
            score_diff: Difference between team totals at match time
            notes: Optional match notes
            score_updates: Mapping of player_id -> {role: new_score} written
                together with the match row

        Returns:
            Match ID

        Raises:
            ValueError: If a score update names an unknown role
        """
        with self.atomic_transaction() as conn:
            cursor = conn.cursor()

            cursor.execute(
                """
                INSERT INTO matches (team1_players, team2_players, winning_team,
                                    balanced, score_diff, notes)
                VALUES (?, ?, ?, ?, ?, ?)
            """,
                (
                    json.dumps(team1),
                    json.dumps(team2),
                    winning_team,
                    balanced,
                    score_diff,
                    notes,
                ),
            )

            match_id = cursor.lastrowid
            team1_won = winning_team == 1

            for team_number, members, won in ((1, team1, team1_won), (2, team2, not team1_won)):
                for member in members:
                    cursor.execute(
                        """
                        INSERT INTO match_participants
                        (match_id, player_id, team_number, role, assigned_score, won)
                        VALUES (?, ?, ?, ?, ?, ?)
                    """,
                        (
                            match_id,
                            member["id"],
                            team_number,
                            member.get("role"),
                            member.get("assignedScore"),
                            won,
                        ),
                    )

            for player_id, role_scores in (score_updates or {}).items():
                for role, value in role_scores.items():
                    if role not in ROLES:
                        raise ValueError(f"Unknown role: {role!r}")
                    cursor.execute(
                        f"UPDATE players SET {role} = ?, updated_at = CURRENT_TIMESTAMP WHERE player_id = ?",
                        (value, player_id),
                    )

        logger.info(f"Recorded match {match_id} (winner: team {winning_team})")
        return match_id

    def get_match(self, match_id: int) -> dict | None:
        """Get match by ID."""
        with self.connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM matches WHERE match_id = ?", (match_id,))
            row = cursor.fetchone()

            if not row:
                return None

            return self._row_to_match(row)

    def get_recent_matches(self, limit: int = 20) -> list[dict]:
        """Get the most recent matches, newest first."""
        with self.connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT * FROM matches ORDER BY match_date DESC, match_id DESC LIMIT ?",
                (limit,),
            )
            return [self._row_to_match(row) for row in cursor.fetchall()]

    def get_player_matches(self, player_id: str, limit: int = 10) -> list[dict]:
        """Get recent matches for a player."""
        with self.connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT m.*, mp.team_number, mp.role, mp.assigned_score, mp.won
                FROM matches m
                JOIN match_participants mp ON m.match_id = mp.match_id
                WHERE mp.player_id = ?
                ORDER BY m.match_date DESC, m.match_id DESC
                LIMIT ?
            """,
                (player_id, limit),
            )

            rows = cursor.fetchall()
            return [
                {
                    **self._row_to_match(row),
                    "player_team": row["team_number"],
                    "player_role": row["role"],
                    "player_score": row["assigned_score"],
                    "player_won": bool(row["won"]),
                }
                for row in rows
            ]

    def get_match_count(self) -> int:
        with self.connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT COUNT(*) AS count FROM matches")
            return cursor.fetchone()["count"]

    def _row_to_match(self, row) -> dict:
        return {
            "match_id": row["match_id"],
            "team1_players": json.loads(row["team1_players"]),
            "team2_players": json.loads(row["team2_players"]),
            "winning_team": row["winning_team"],
            "match_date": row["match_date"],
            "balanced": bool(row["balanced"]) if row["balanced"] is not None else True,
            "score_diff": row["score_diff"],
            "notes": row["notes"],
        }
