"""
Match orchestration: shuffling and recording.
"""

import logging
import random

from config import (
    ALLOW_UNBALANCED_FALLBACK,
    BALANCE_MODE_DEFAULT,
    MATCH_SCORE_CEILING,
    MATCH_SCORE_DELTA,
    MATCH_SCORE_FLOOR,
    RECENT_MATCHES_LIMIT,
    SELECTION_SIZE,
)
from domain.models.matchup import Matchup
from domain.models.player import coerce_score
from domain.models.team import Team
from domain.services.random_split_service import RandomSplitService
from repositories.interfaces import IMatchRepository, IPlayerRepository
from services import error_codes
from services.result import Result
from shuffler import BalancedShuffler

logger = logging.getLogger("rift_shuffle.services.match")


def adjust_role_score(current, delta: int) -> int:
    """
    Apply a post-match delta to a role score and clamp it to the match range.

    Missing or zero scores are treated as the floor before adjusting.
    """
    base = coerce_score(current) or MATCH_SCORE_FLOOR
    return min(MATCH_SCORE_CEILING, max(MATCH_SCORE_FLOOR, base + delta))


class MatchService:
    """Handles team shuffling and match recording for a ten-player selection."""

    def __init__(
        self,
        player_repo: IPlayerRepository,
        match_repo: IMatchRepository,
        *,
        shuffler: BalancedShuffler | None = None,
        split_service: RandomSplitService | None = None,
        rng: random.Random | None = None,
        allow_fallback: bool | None = None,
    ):
        """
        Initialize MatchService with required repository dependencies.

        Args:
            player_repo: Repository for player data access
            match_repo: Repository for match data access
            shuffler: Balanced shuffler (built from rng when omitted)
            split_service: Random split service (built from rng when omitted)
            rng: Shared random source for the default shuffler and splitter
            allow_fallback: Use a role-fill split when balancing fails
                (default ALLOW_UNBALANCED_FALLBACK)
        """
        self.player_repo = player_repo
        self.match_repo = match_repo
        rng = rng if rng is not None else random.Random()
        self.shuffler = shuffler if shuffler is not None else BalancedShuffler(rng=rng)
        self.split_service = split_service if split_service is not None else RandomSplitService(rng=rng)
        self.allow_fallback = ALLOW_UNBALANCED_FALLBACK if allow_fallback is None else allow_fallback

    def shuffle(self, player_ids: list[str], balance_mode: bool | None = None) -> Result[Matchup]:
        """
        Split the selected players into two teams.

        Args:
            player_ids: Ids of exactly ten distinct roster players
            balance_mode: Use the role/score-aware path (default BALANCE_MODE_DEFAULT)

        Returns:
            Result.ok(Matchup) or a failure with PLAYER_NOT_FOUND,
            WRONG_SELECTION_SIZE or INSUFFICIENT_ROLE_CANDIDATES
        """
        if balance_mode is None:
            balance_mode = BALANCE_MODE_DEFAULT

        distinct_ids = list(dict.fromkeys(player_ids))
        if len(player_ids) != SELECTION_SIZE or len(distinct_ids) != SELECTION_SIZE:
            return Result.fail(
                f"Select exactly {SELECTION_SIZE} different players (got {len(distinct_ids)}).",
                code=error_codes.WRONG_SELECTION_SIZE,
                details={"size": len(player_ids), "distinct": len(distinct_ids)},
            )

        players = self.player_repo.get_by_ids(distinct_ids)
        if len(players) != len(distinct_ids):
            found = {p.player_id for p in players}
            missing = [pid for pid in distinct_ids if pid not in found]
            return Result.fail(
                f"Unknown player id(s): {', '.join(missing)}",
                code=error_codes.PLAYER_NOT_FOUND,
                details={"missing": missing},
            )

        if not balance_mode:
            team_a, team_b = self.split_service.split_unbalanced(players)
            logger.info("Split teams without balancing")
            return Result.ok(
                Matchup(
                    team_a=team_a,
                    team_b=team_b,
                    balanced=False,
                    max_acceptable_diff=self.shuffler.max_acceptable_diff,
                )
            )

        result = self.shuffler.shuffle(players)
        if result.success:
            return result

        if result.error_code == error_codes.INSUFFICIENT_ROLE_CANDIDATES and self.allow_fallback:
            logger.warning(f"Balanced shuffle failed, falling back to role-fill split: {result.error}")
            team_a, team_b = self.split_service.split_role_fill(players)
            return Result.ok(
                Matchup(
                    team_a=team_a,
                    team_b=team_b,
                    balanced=False,
                    fallback_reason=result.error,
                    metadata=dict(result.details),
                    max_acceptable_diff=self.shuffler.max_acceptable_diff,
                )
            )

        return result

    def _score_updates(self, team: Team, delta: int, updates: dict[str, dict[str, int]]) -> None:
        for assignment in team.assignments:
            if not assignment.role:
                continue
            current = self.player_repo.get_by_id(assignment.player_id)
            if current is None:
                logger.warning(f"Player {assignment.player_id} left the roster; score not adjusted")
                continue
            new_score = adjust_role_score(current.get_role_score(assignment.role), delta)
            updates.setdefault(assignment.player_id, {})[assignment.role] = new_score

    def record_result(self, matchup: Matchup, winning_team: int, notes: str | None = None) -> Result[int]:
        """
        Apply post-match score changes and append the match to history.

        Each winner gains MATCH_SCORE_DELTA on the role they played, each loser
        loses it, clamped to [MATCH_SCORE_FLOOR, MATCH_SCORE_CEILING]. Scores
        are read fresh from the roster. The matchup itself is not modified.

        Args:
            matchup: Teams that played
            winning_team: 1 if team A won, 2 if team B won

        Returns:
            Result.ok(match_id) or a failure with INVALID_RESULT
        """
        if winning_team not in (1, 2):
            return Result.fail("Winning team must be 1 or 2.", code=error_codes.INVALID_RESULT)

        winners, losers = (
            (matchup.team_a, matchup.team_b) if winning_team == 1 else (matchup.team_b, matchup.team_a)
        )

        updates: dict[str, dict[str, int]] = {}
        self._score_updates(winners, MATCH_SCORE_DELTA, updates)
        self._score_updates(losers, -MATCH_SCORE_DELTA, updates)

        # Match row and score changes commit together or not at all
        match_id = self.match_repo.record_match(
            team1=matchup.team_a.to_list(),
            team2=matchup.team_b.to_list(),
            winning_team=winning_team,
            balanced=matchup.balanced,
            score_diff=matchup.diff,
            notes=notes,
            score_updates=updates,
        )
        logger.info(f"Match {match_id}: team {winning_team} won, adjusted {len(updates)} player(s)")
        return Result.ok(match_id)

    def get_match_history(self, limit: int = RECENT_MATCHES_LIMIT) -> list[dict]:
        return self.match_repo.get_recent_matches(limit)
