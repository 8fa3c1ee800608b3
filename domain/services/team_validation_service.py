"""
Team validation domain service.

Checks a pair of teams against the invariants the role assigner guarantees.
"""

from collections import Counter

from config import ROLES, TEAM_SIZE
from domain.models.player import Player
from domain.models.team import Team


class TeamValidationService:
    """Pure checks over an assignment result. Never mutates its input."""

    def validate_team(self, team: Team, label: str = "team") -> list[str]:
        """
        Collect invariant violations for a single team.

        Returns:
            List of human-readable problems, empty if the team is valid
        """
        problems: list[str] = []
        if len(team.assignments) != TEAM_SIZE:
            problems.append(f"{label} has {len(team.assignments)} players, expected {TEAM_SIZE}")

        role_counts = Counter(team.roles())
        for role in ROLES:
            if role_counts.get(role, 0) == 0:
                problems.append(f"{label} has no {role}")
            elif role_counts[role] > 1:
                problems.append(f"{label} has {role_counts[role]} players on {role}")
        for role in role_counts:
            if role not in ROLES:
                problems.append(f"{label} has unknown role {role!r}")

        for assignment in team.assignments:
            if not isinstance(assignment.assigned_score, int) or assignment.assigned_score <= 0:
                problems.append(
                    f"{label}: {assignment.player.name} has non-positive score on {assignment.role}"
                )
        return problems

    def validate_matchup(
        self,
        team_a: Team,
        team_b: Team,
        selection: list[Player] | None = None,
    ) -> list[str]:
        """
        Collect invariant violations for a pair of teams.

        Args:
            team_a: First team
            team_b: Second team
            selection: Optional original selection; when given, the teams must
                use every selected player exactly once

        Returns:
            List of problems, empty if the pair is valid
        """
        problems = self.validate_team(team_a, "team A") + self.validate_team(team_b, "team B")

        ids = team_a.player_ids() + team_b.player_ids()
        duplicates = sorted(pid for pid, count in Counter(ids).items() if count > 1)
        if duplicates:
            problems.append(f"players assigned more than once: {', '.join(duplicates)}")

        if selection is not None:
            selected_ids = {p.player_id for p in selection}
            assigned_ids = set(ids)
            missing = sorted(selected_ids - assigned_ids)
            extra = sorted(assigned_ids - selected_ids)
            if missing:
                problems.append(f"selected players not assigned: {', '.join(missing)}")
            if extra:
                problems.append(f"players not in selection: {', '.join(extra)}")

        return problems

    def is_valid(self, team_a: Team, team_b: Team, selection: list[Player] | None = None) -> bool:
        return not self.validate_matchup(team_a, team_b, selection)
