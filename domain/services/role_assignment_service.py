"""
Role assignment domain service.

Fills every role once per team from a ten-player selection.
"""

import logging
import random

from config import ROLE_ORDER, SELECTION_SIZE
from domain.exceptions import InsufficientRoleCandidatesError, WrongSelectionSizeError
from domain.models.player import Player
from domain.models.team import RoleAssignment, Team

logger = logging.getLogger("rift_shuffle.domain.role_assignment")


class RoleAssignmentService:
    """
    Pure domain service for role assignment logic.

    Responsibilities:
    - Reject selections that are not exactly ten distinct players
    - Pick the two strongest unused players for each role, one per team
    - Randomize which team receives the stronger player of each pair
    """

    def __init__(self, rng: random.Random | None = None, role_order: list[str] | None = None):
        """
        Initialize the service.

        Args:
            rng: Random source for the per-role coin flip. Pass a seeded
                random.Random in tests for deterministic outcomes.
            role_order: Order in which roles are filled (default ROLE_ORDER)
        """
        self.rng = rng if rng is not None else random.Random()
        self.role_order = list(role_order) if role_order is not None else list(ROLE_ORDER)

    @staticmethod
    def validate_selection(selection: list[Player], expected: int = SELECTION_SIZE) -> None:
        """
        Check the selection holds exactly `expected` distinct players.

        Raises:
            WrongSelectionSizeError: On wrong size or duplicate ids
        """
        distinct = len({p.player_id for p in selection})
        if len(selection) != expected or distinct != expected:
            raise WrongSelectionSizeError(len(selection), distinct, expected)

    def get_candidates(self, selection: list[Player], role: str, used_ids: set[str]) -> list[Player]:
        """
        Unused players with a positive score for `role`, strongest first.

        Ties keep selection order since sorted() is stable.
        """
        eligible = [p for p in selection if p.player_id not in used_ids and p.can_play(role)]
        return sorted(eligible, key=lambda p: p.get_role_score(role), reverse=True)

    def assign(self, selection: list[Player]) -> tuple[Team, Team]:
        """
        Build two role-complete teams from the selection.

        Args:
            selection: Exactly ten distinct players

        Returns:
            Tuple of (team_a, team_b)

        Raises:
            WrongSelectionSizeError: If the selection is not ten distinct players
            InsufficientRoleCandidatesError: If some role has fewer than two
                eligible unused players. No partial teams are produced.
        """
        self.validate_selection(selection)

        used_ids: set[str] = set()
        team_a: list[RoleAssignment] = []
        team_b: list[RoleAssignment] = []

        for role in self.role_order:
            candidates = self.get_candidates(selection, role, used_ids)
            if len(candidates) < 2:
                logger.info(f"Role assignment aborted: {len(candidates)} candidate(s) for {role}")
                raise InsufficientRoleCandidatesError(role, len(candidates))

            stronger, weaker = candidates[0], candidates[1]
            if self.rng.random() < 0.5:
                first, second = stronger, weaker
            else:
                first, second = weaker, stronger

            team_a.append(RoleAssignment.for_role(first, role))
            team_b.append(RoleAssignment.for_role(second, role))
            used_ids.add(stronger.player_id)
            used_ids.add(weaker.player_id)

            logger.debug(
                f"{role}: {first.name} ({first.get_role_score(role)}) -> A, "
                f"{second.name} ({second.get_role_score(role)}) -> B"
            )

        return Team(team_a), Team(team_b)
