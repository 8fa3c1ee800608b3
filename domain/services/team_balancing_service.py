"""
Team balancing domain service.

Greedy same-role swapping to bring two teams' score totals together.
"""

import logging

from config import BALANCE_THRESHOLDS, SWAP_ROLE_PRIORITY
from domain.models.matchup import BalanceReport, SwapRecord
from domain.models.team import Team

logger = logging.getLogger("rift_shuffle.domain.team_balancing")


class TeamBalancingService:
    """
    Pure domain service for team balancing logic.

    Responsibilities:
    - Calculate team sums and the difference between two teams
    - Swap same-role players across teams while that strictly reduces the difference
    - Stop at the first threshold of the ladder that is reached

    The search is a local heuristic. It never undoes a swap and is not
    guaranteed to find the smallest possible difference.
    """

    def __init__(
        self,
        thresholds: list[int] | None = None,
        swap_priority: list[str] | None = None,
    ):
        """
        Initialize team balancing service.

        Args:
            thresholds: Ascending ladder of acceptable differences (default [3, 5, 7])
            swap_priority: Role order in which swaps are tried
        """
        self.thresholds = sorted(thresholds if thresholds is not None else BALANCE_THRESHOLDS)
        self.swap_priority = list(swap_priority if swap_priority is not None else SWAP_ROLE_PRIORITY)

    @staticmethod
    def team_sum(team: Team) -> int:
        return team.total_score()

    def score_diff(self, team_a: Team, team_b: Team) -> int:
        """Absolute difference between the two team totals."""
        return abs(self.team_sum(team_a) - self.team_sum(team_b))

    def swap_role(self, team_a: Team, team_b: Team, role: str) -> tuple[Team, Team] | None:
        """
        Exchange the players holding `role` between the two teams.

        Role and assigned score travel with each player.

        Returns:
            The swapped pair, or None if either team has nobody in that role
        """
        assignment_a = team_a.get_assignment_by_role(role)
        assignment_b = team_b.get_assignment_by_role(role)
        if assignment_a is None or assignment_b is None:
            return None
        return (
            team_a.replace_assignment(role, assignment_b),
            team_b.replace_assignment(role, assignment_a),
        )

    def optimize(self, team_a: Team, team_b: Team) -> BalanceReport:
        """
        Run the threshold ladder search and report every accepted swap.

        Args:
            team_a: First team
            team_b: Second team

        Returns:
            BalanceReport with the final teams and the diff trace
        """
        initial_diff = self.score_diff(team_a, team_b)
        diff = initial_diff
        swaps: list[SwapRecord] = []
        # A pass with no accepted swap ends the search for every remaining threshold
        exhausted = False

        for threshold in self.thresholds:
            while diff > threshold and not exhausted:
                changed = False
                for role in self.swap_priority:
                    swapped = self.swap_role(team_a, team_b, role)
                    if swapped is None:
                        continue
                    new_diff = self.score_diff(*swapped)
                    if new_diff < diff:
                        swaps.append(SwapRecord(role=role, diff_before=diff, diff_after=new_diff))
                        logger.debug(f"Swapped {role}: diff {diff} -> {new_diff}")
                        team_a, team_b = swapped
                        diff = new_diff
                        changed = True
                    if diff <= threshold:
                        break
                if not changed:
                    exhausted = True

            if diff <= threshold:
                logger.debug(f"Balanced within {threshold} (diff={diff}, swaps={len(swaps)})")
                return BalanceReport(
                    team_a=team_a,
                    team_b=team_b,
                    initial_diff=initial_diff,
                    final_diff=diff,
                    swaps=tuple(swaps),
                    threshold_reached=threshold,
                )

        logger.debug(f"No threshold reached (diff={diff}, swaps={len(swaps)})")
        return BalanceReport(
            team_a=team_a,
            team_b=team_b,
            initial_diff=initial_diff,
            final_diff=diff,
            swaps=tuple(swaps),
            threshold_reached=None,
        )

    def balance(self, team_a: Team, team_b: Team) -> tuple[Team, Team]:
        """
        Reduce the score difference between two teams.

        Never fails; worst case the input teams are returned unchanged.
        """
        report = self.optimize(team_a, team_b)
        return report.team_a, report.team_b
