"""
Roster business logic (create, edit, delete, list players).
"""

import logging

from config import ROLE_SCORE_MAX, ROLE_SCORE_MIN, ROLES
from domain.models.player import Player
from repositories.interfaces import IPlayerRepository

logger = logging.getLogger("rift_shuffle.services.player")


class PlayerService:
    """Encapsulates roster validation on top of the player repository."""

    def __init__(self, player_repo: IPlayerRepository):
        self.player_repo = player_repo

    @staticmethod
    def _validate_name(name: str) -> str:
        cleaned = (name or "").strip()
        if not cleaned:
            raise ValueError("Name required.")
        return cleaned

    @staticmethod
    def _validate_scores(scores: dict) -> dict[str, int]:
        validated: dict[str, int] = {}
        for role, value in scores.items():
            if role not in ROLES:
                raise ValueError(f"Unknown role: {role!r}")
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Score for {role} must be an integer.")
            if value < ROLE_SCORE_MIN or value > ROLE_SCORE_MAX:
                raise ValueError(
                    f"Score for {role} must be between {ROLE_SCORE_MIN} and {ROLE_SCORE_MAX}."
                )
            validated[role] = value
        return validated

    def create_player(self, name: str, player_id: str | None = None, **scores: int) -> Player:
        """
        Add a player to the roster.

        Args:
            name: Display name (required, surrounding whitespace removed)
            player_id: Optional explicit id
            **scores: Role scores keyed by role name; missing roles default to 0

        Raises:
            ValueError: On a blank name, unknown role or out-of-range score
        """
        cleaned = self._validate_name(name)
        validated = self._validate_scores(scores)
        return self.player_repo.add(cleaned, player_id=player_id, **validated)

    def edit_player(self, player_id: str, name: str | None = None, **scores: int) -> Player:
        """
        Change a player's name and/or role scores.

        Raises:
            ValueError: If the player does not exist or the input is invalid
        """
        fields: dict = self._validate_scores(scores)
        if name is not None:
            fields["name"] = self._validate_name(name)

        updated = self.player_repo.update(player_id, **fields)
        if updated is None:
            raise ValueError(f"Player {player_id} not found.")
        return updated

    def delete_player(self, player_id: str) -> None:
        if not self.player_repo.delete(player_id):
            raise ValueError(f"Player {player_id} not found.")

    def get_player(self, player_id: str) -> Player | None:
        return self.player_repo.get_by_id(player_id)

    def list_players(self) -> list[Player]:
        return self.player_repo.get_all()

    def list_selectable_players(self) -> list[Player]:
        """Players who can fill at least one role; only these may be picked for a match."""
        return [p for p in self.player_repo.get_all() if p.has_any_role()]
