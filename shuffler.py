"""
Balanced team shuffling algorithm.
"""

import logging
import random

from config import BALANCE_THRESHOLDS, MAX_ACCEPTABLE_DIFF, ROLE_ORDER, SWAP_ROLE_PRIORITY
from domain.exceptions import InsufficientRoleCandidatesError, WrongSelectionSizeError
from domain.models.matchup import Matchup
from domain.models.player import Player
from domain.services.role_assignment_service import RoleAssignmentService
from domain.services.team_balancing_service import TeamBalancingService
from services import error_codes
from services.result import Result

logger = logging.getLogger("rift_shuffle.shuffler")


class BalancedShuffler:
    """
    Splits ten players into two role-complete, score-balanced teams.

    Runs the role assigner and then the balancer. A role assigner failure
    ends the operation; the balancer is only invoked on complete teams.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        thresholds: list[int] | None = None,
        swap_priority: list[str] | None = None,
        role_order: list[str] | None = None,
        max_acceptable_diff: int | None = None,
    ):
        """
        Initialize the shuffler.

        Args:
            rng: Random source for role assignment coin flips
            thresholds: Balancer threshold ladder (default BALANCE_THRESHOLDS)
            swap_priority: Role order for balancing swaps (default SWAP_ROLE_PRIORITY)
            role_order: Role fill order (default ROLE_ORDER)
            max_acceptable_diff: Difference above which a warning is logged
        """
        self.role_service = RoleAssignmentService(
            rng=rng, role_order=role_order if role_order is not None else ROLE_ORDER
        )
        self.balancing_service = TeamBalancingService(
            thresholds=thresholds if thresholds is not None else BALANCE_THRESHOLDS,
            swap_priority=swap_priority if swap_priority is not None else SWAP_ROLE_PRIORITY,
        )
        self.max_acceptable_diff = (
            max_acceptable_diff if max_acceptable_diff is not None else MAX_ACCEPTABLE_DIFF
        )

    def shuffle(self, players: list[Player]) -> Result[Matchup]:
        """
        Build a balanced matchup from exactly ten players.

        Args:
            players: The selection (ten distinct players)

        Returns:
            Result.ok(Matchup) on success, otherwise Result.fail with code
            WRONG_SELECTION_SIZE or INSUFFICIENT_ROLE_CANDIDATES
        """
        try:
            team_a, team_b = self.role_service.assign(players)
        except WrongSelectionSizeError as exc:
            logger.info(f"Shuffle rejected: {exc}")
            return Result.fail(
                str(exc),
                code=error_codes.WRONG_SELECTION_SIZE,
                details={"size": exc.size, "distinct": exc.distinct},
            )
        except InsufficientRoleCandidatesError as exc:
            logger.info(f"Shuffle failed: {exc}")
            return Result.fail(
                str(exc),
                code=error_codes.INSUFFICIENT_ROLE_CANDIDATES,
                details={"role": exc.role, "available": exc.available},
            )

        report = self.balancing_service.optimize(team_a, team_b)
        matchup = Matchup(
            team_a=report.team_a,
            team_b=report.team_b,
            balanced=True,
            balance_report=report,
            max_acceptable_diff=self.max_acceptable_diff,
        )

        logger.info(
            f"Shuffled teams: A={report.team_a.total_score()} B={report.team_b.total_score()} "
            f"diff {report.initial_diff} -> {report.final_diff} after {len(report.swaps)} swap(s)"
        )
        if report.final_diff > self.max_acceptable_diff:
            logger.warning(
                f"Could not balance teams within {self.max_acceptable_diff} points "
                f"(diff={report.final_diff}); roles must stay unique and scores positive"
            )

        return Result.ok(matchup)
