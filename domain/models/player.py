"""
Player domain model.
"""

from dataclasses import dataclass

from config import ROLES


def coerce_score(value) -> int:
    """Normalize a stored role score: negative or non-numeric values count as 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value if value > 0 else 0
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return 0
    return parsed if parsed > 0 else 0


@dataclass(frozen=True)
class Player:
    """
    Represents a ranked player with a proficiency score per role.

    This is a pure domain model with no infrastructure dependencies. Instances
    are treated as immutable snapshots while teams are being built.
    """

    player_id: str
    name: str
    top: int = 0
    jungle: int = 0
    mid: int = 0
    adc: int = 0
    support: int = 0

    def get_role_score(self, role: str) -> int:
        """
        Get this player's score for a role.

        Raises:
            ValueError: If role is not one of the five known roles
        """
        if role not in ROLES:
            raise ValueError(f"Unknown role: {role!r}")
        return coerce_score(getattr(self, role))

    def can_play(self, role: str) -> bool:
        """Check if the player has a positive score for a role."""
        return self.get_role_score(role) > 0

    def playable_roles(self) -> list[str]:
        """Roles with a positive score, in standard role order."""
        return [role for role in ROLES if self.can_play(role)]

    def has_any_role(self) -> bool:
        return any(self.can_play(role) for role in ROLES)

    def role_scores(self) -> dict[str, int]:
        return {role: self.get_role_score(role) for role in ROLES}

    def __str__(self) -> str:
        scores = "/".join(str(self.get_role_score(role)) for role in ROLES)
        return f"{self.name} ({scores})"
