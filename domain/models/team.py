"""
Team domain model.
"""

from dataclasses import dataclass

from config import TEAM_SIZE
from domain.models.player import Player, coerce_score


@dataclass(frozen=True)
class RoleAssignment:
    """A player placed into one role, with the score they held for it at assignment time."""

    player: Player
    role: str
    assigned_score: int

    @classmethod
    def for_role(cls, player: Player, role: str) -> "RoleAssignment":
        return cls(player=player, role=role, assigned_score=player.get_role_score(role))

    @property
    def player_id(self) -> str:
        return self.player.player_id

    def to_dict(self) -> dict:
        return {
            "id": self.player.player_id,
            "name": self.player.name,
            "role": self.role,
            "assignedScore": self.assigned_score,
        }


class Team:
    """
    Represents a team of 5 role assignments.

    Only the size is enforced here. Role completeness and positive scores are
    guaranteed by the role assigner and checked by the validation service.
    """

    TEAM_SIZE = TEAM_SIZE

    def __init__(self, assignments: list[RoleAssignment]):
        """
        Initialize a team.

        Args:
            assignments: List of 5 role assignments
        """
        if len(assignments) != self.TEAM_SIZE:
            raise ValueError(f"Team must have exactly {self.TEAM_SIZE} players")
        self.assignments: tuple[RoleAssignment, ...] = tuple(assignments)

    def player_ids(self) -> list[str]:
        return [a.player_id for a in self.assignments]

    def roles(self) -> list[str]:
        return [a.role for a in self.assignments]

    def total_score(self) -> int:
        """Sum of assigned scores; negative or non-numeric scores count as 0."""
        return sum(coerce_score(a.assigned_score) for a in self.assignments)

    def get_assignment_by_role(self, role: str) -> RoleAssignment | None:
        for assignment in self.assignments:
            if assignment.role == role:
                return assignment
        return None

    def replace_assignment(self, role: str, new_assignment: RoleAssignment) -> "Team":
        """
        Return a new team with the assignment for `role` replaced.

        Raises:
            ValueError: If no player holds that role on this team
        """
        replaced = False
        updated = []
        for assignment in self.assignments:
            if not replaced and assignment.role == role:
                updated.append(new_assignment)
                replaced = True
            else:
                updated.append(assignment)
        if not replaced:
            raise ValueError(f"No player assigned to role {role}")
        return Team(updated)

    def to_list(self) -> list[dict]:
        return [a.to_dict() for a in self.assignments]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Team):
            return NotImplemented
        return self.assignments == other.assignments

    def __hash__(self) -> int:
        return hash(self.assignments)

    def __repr__(self) -> str:
        return f"Team({list(self.assignments)!r})"

    def __str__(self) -> str:
        members = ", ".join(f"{a.role}: {a.player.name} ({a.assigned_score})" for a in self.assignments)
        return f"Team: {members}"
