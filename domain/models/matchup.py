"""
Matchup domain model: the outcome of splitting a selection into two teams.
"""

from dataclasses import dataclass, field

from config import MAX_ACCEPTABLE_DIFF
from domain.models.team import Team


@dataclass(frozen=True)
class SwapRecord:
    """One accepted same-role swap made by the balancer."""

    role: str
    diff_before: int
    diff_after: int


@dataclass(frozen=True)
class BalanceReport:
    """Trace of a balancing run."""

    team_a: Team
    team_b: Team
    initial_diff: int
    final_diff: int
    swaps: tuple[SwapRecord, ...] = ()
    threshold_reached: int | None = None

    @property
    def diff_sequence(self) -> list[int]:
        """Diff before any swap followed by the diff after each accepted swap."""
        return [self.initial_diff] + [s.diff_after for s in self.swaps]


@dataclass(frozen=True)
class Matchup:
    """
    Two teams produced for one match.

    `balanced` is True only when the role/score-aware path produced the teams.
    `max_acceptable_diff` is the largest diff the producer accepts.
    """

    team_a: Team
    team_b: Team
    balanced: bool = True
    balance_report: BalanceReport | None = None
    fallback_reason: str | None = None
    metadata: dict = field(default_factory=dict, hash=False)
    max_acceptable_diff: int = MAX_ACCEPTABLE_DIFF

    @property
    def diff(self) -> int:
        return abs(self.team_a.total_score() - self.team_b.total_score())

    @property
    def within_acceptable_diff(self) -> bool:
        return self.diff <= self.max_acceptable_diff

    def teams(self) -> tuple[Team, Team]:
        return self.team_a, self.team_b

    def to_dict(self) -> dict:
        return {
            "team1": self.team_a.to_list(),
            "team2": self.team_b.to_list(),
            "balanced": self.balanced,
            "diff": self.diff,
        }
