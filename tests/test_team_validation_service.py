"""
Tests for TeamValidationService.
"""

import random

import pytest

from domain.models.team import RoleAssignment
from domain.services.team_validation_service import TeamValidationService
from shuffler import BalancedShuffler
from tests.helpers import all_rounder_selection, make_player, make_team

EVEN = {"top": 5, "jungle": 5, "mid": 5, "adc": 5, "support": 5}


@pytest.fixture
def validator():
    return TeamValidationService()


class TestValidateMatchup:
    def test_valid_pair(self, validator):
        assert validator.validate_matchup(make_team(EVEN, "a"), make_team(EVEN, "b")) == []

    def test_duplicate_role_reported(self, validator):
        team_a = make_team(EVEN, "a").replace_assignment(
            "mid", RoleAssignment.for_role(make_player("x", top=4), "top")
        )
        problems = validator.validate_matchup(team_a, make_team(EVEN, "b"))
        assert "team A has no mid" in problems
        assert "team A has 2 players on top" in problems

    def test_zero_score_reported(self, validator):
        team_b = make_team({**EVEN, "support": 0}, "b")
        problems = validator.validate_matchup(make_team(EVEN, "a"), team_b)
        assert any("non-positive score on support" in p for p in problems)

    def test_empty_role_reported(self, validator):
        team_b = make_team(EVEN, "b").replace_assignment(
            "adc", RoleAssignment(player=make_player("x"), role="", assigned_score=0)
        )
        problems = validator.validate_matchup(make_team(EVEN, "a"), team_b)
        assert "team B has no adc" in problems
        assert "team B has unknown role ''" in problems

    def test_player_on_both_teams_reported(self, validator):
        team_a = make_team(EVEN, "a")
        team_b = make_team(EVEN, "b").replace_assignment("top", team_a.get_assignment_by_role("top"))
        problems = validator.validate_matchup(team_a, team_b)
        assert "players assigned more than once: a-top" in problems

    def test_selection_mismatch_reported(self, validator):
        team_a = make_team(EVEN, "a")
        team_b = make_team(EVEN, "b")
        selection = [a.player for a in team_a.assignments + team_b.assignments[:4]]
        selection.append(make_player("benched", top=1))

        problems = validator.validate_matchup(team_a, team_b, selection)

        assert "selected players not assigned: benched" in problems
        assert "players not in selection: b-support" in problems

    @pytest.mark.parametrize("seed", range(15))
    def test_shuffled_result_is_valid_and_stays_valid(self, validator, seed):
        selection = all_rounder_selection()
        matchup = BalancedShuffler(rng=random.Random(seed)).shuffle(selection).unwrap()

        first = validator.validate_matchup(matchup.team_a, matchup.team_b, selection)
        second = validator.validate_matchup(matchup.team_a, matchup.team_b, selection)

        assert first == []
        assert second == []
        assert validator.is_valid(matchup.team_a, matchup.team_b, selection)
