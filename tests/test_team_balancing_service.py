"""
Tests for TeamBalancingService.
"""

import random

import pytest

from domain.services.role_assignment_service import RoleAssignmentService
from domain.services.team_balancing_service import TeamBalancingService
from tests.helpers import all_rounder_selection, make_team

ALL_TEN = {"top": 10, "jungle": 10, "mid": 10, "adc": 10, "support": 10}


@pytest.fixture
def balancer():
    return TeamBalancingService(thresholds=[3, 5, 7], swap_priority=["adc", "support", "top", "jungle", "mid"])


class TestScoring:
    def test_team_sum_and_diff(self, balancer):
        team_a = make_team({"top": 14, "jungle": 10, "mid": 10, "adc": 8, "support": 10}, "a")
        team_b = make_team({"top": 6, "jungle": 10, "mid": 10, "adc": 4, "support": 10}, "b")
        assert balancer.team_sum(team_a) == 52
        assert balancer.team_sum(team_b) == 40
        assert balancer.score_diff(team_a, team_b) == 12
        assert balancer.score_diff(team_b, team_a) == 12

    def test_swap_role_exchanges_players_keeping_roles(self, balancer):
        team_a = make_team(ALL_TEN, "a")
        team_b = make_team({**ALL_TEN, "adc": 4}, "b")
        new_a, new_b = balancer.swap_role(team_a, team_b, "adc")

        assert new_a.get_assignment_by_role("adc") == team_b.get_assignment_by_role("adc")
        assert new_b.get_assignment_by_role("adc") == team_a.get_assignment_by_role("adc")
        assert new_a.roles() == team_a.roles()

    def test_defaults_come_from_config(self):
        service = TeamBalancingService()
        assert service.thresholds == [3, 5, 7]
        assert service.swap_priority == ["adc", "support", "top", "jungle", "mid"]


class TestBalance:
    def test_equal_teams_returned_unchanged(self, balancer):
        team_a = make_team(ALL_TEN, "a")
        team_b = make_team(ALL_TEN, "b")

        report = balancer.optimize(team_a, team_b)

        assert report.team_a == team_a
        assert report.team_b == team_b
        assert report.swaps == ()
        assert report.final_diff == 0
        assert report.threshold_reached == 3

    def test_adc_swap_brings_diff_from_12_to_4(self, balancer):
        team_a = make_team({"top": 14, "jungle": 10, "mid": 10, "adc": 8, "support": 10}, "a")
        team_b = make_team({"top": 6, "jungle": 10, "mid": 10, "adc": 4, "support": 10}, "b")

        new_a, new_b = balancer.balance(team_a, team_b)

        assert new_a.get_assignment_by_role("adc").player_id == "b-adc"
        assert new_b.get_assignment_by_role("adc").player_id == "a-adc"
        for role in ["top", "jungle", "mid", "support"]:
            assert new_a.get_assignment_by_role(role) == team_a.get_assignment_by_role(role)
            assert new_b.get_assignment_by_role(role) == team_b.get_assignment_by_role(role)
        assert balancer.score_diff(new_a, new_b) == 4

        report = balancer.optimize(team_a, team_b)
        assert report.final_diff <= 5
        assert report.threshold_reached == 5
        assert [s.role for s in report.swaps] == ["adc"]

    def test_greedy_takes_first_improving_swaps_in_priority_order(self, balancer):
        team_a = make_team({"top": 8, "jungle": 5, "mid": 5, "adc": 6, "support": 4}, "a")
        team_b = make_team({"top": 2, "jungle": 5, "mid": 5, "adc": 3, "support": 3}, "b")

        report = balancer.optimize(team_a, team_b)

        assert report.initial_diff == 10
        assert [s.role for s in report.swaps] == ["adc", "support"]
        assert report.final_diff == 2
        assert report.threshold_reached == 3
        assert report.team_a.get_assignment_by_role("top").player_id == "a-top"

    def test_swap_priority_is_configurable(self):
        balancer = TeamBalancingService(thresholds=[3, 5, 7], swap_priority=["top", "adc", "support", "jungle", "mid"])
        team_a = make_team({"top": 8, "jungle": 5, "mid": 5, "adc": 6, "support": 4}, "a")
        team_b = make_team({"top": 2, "jungle": 5, "mid": 5, "adc": 3, "support": 3}, "b")

        report = balancer.optimize(team_a, team_b)

        assert [s.role for s in report.swaps] == ["top"]
        assert report.final_diff == 2

    def test_unreachable_threshold_returns_input(self, balancer):
        team_a = make_team({**ALL_TEN, "top": 20}, "a")
        team_b = make_team({**ALL_TEN, "top": 1}, "b")

        report = balancer.optimize(team_a, team_b)

        assert report.team_a == team_a
        assert report.team_b == team_b
        assert report.final_diff == 19
        assert report.threshold_reached is None

    def test_exhausted_search_is_not_repeated_per_threshold(self, balancer, monkeypatch):
        team_a = make_team({**ALL_TEN, "top": 20}, "a")
        team_b = make_team({**ALL_TEN, "top": 1}, "b")
        attempted = []
        original = balancer.swap_role

        def _counting_swap(a, b, role):
            attempted.append(role)
            return original(a, b, role)

        monkeypatch.setattr(balancer, "swap_role", _counting_swap)

        report = balancer.optimize(team_a, team_b)

        assert report.threshold_reached is None
        assert attempted == ["adc", "support", "top", "jungle", "mid"]

    def test_swap_that_does_not_strictly_reduce_is_rejected(self, balancer):
        # Swapping adc flips the sign of the difference without shrinking it
        team_a = make_team({**ALL_TEN, "adc": 14}, "a")
        team_b = make_team({**ALL_TEN, "adc": 10}, "b")

        report = balancer.optimize(team_a, team_b)

        assert report.swaps == ()
        assert report.final_diff == 4
        assert report.threshold_reached == 5

    def test_best_effort_stops_above_largest_threshold(self, balancer):
        team_a = make_team({"top": 30, "jungle": 10, "mid": 10, "adc": 12, "support": 10}, "a")
        team_b = make_team({"top": 1, "jungle": 10, "mid": 10, "adc": 2, "support": 10}, "b")

        report = balancer.optimize(team_a, team_b)

        # adc swap: 39 -> 19; nothing else improves
        assert [s.role for s in report.swaps] == ["adc"]
        assert report.final_diff == 19
        assert report.threshold_reached is None

    @pytest.mark.parametrize("seed", range(25))
    def test_diff_never_increases(self, balancer, seed):
        team_a, team_b = RoleAssignmentService(rng=random.Random(seed)).assign(all_rounder_selection())
        report = balancer.optimize(team_a, team_b)

        sequence = report.diff_sequence
        assert all(later < earlier for earlier, later in zip(sequence, sequence[1:]))
        for swap in report.swaps:
            assert swap.diff_after < swap.diff_before
        assert report.final_diff == balancer.score_diff(report.team_a, report.team_b)
        assert report.final_diff <= report.initial_diff

    @pytest.mark.parametrize("seed", range(10))
    def test_balance_is_deterministic(self, balancer, seed):
        team_a, team_b = RoleAssignmentService(rng=random.Random(seed)).assign(all_rounder_selection())
        assert balancer.balance(team_a, team_b) == balancer.balance(team_a, team_b)

    @pytest.mark.parametrize("seed", range(10))
    def test_balanced_teams_keep_roles_and_players(self, balancer, seed):
        team_a, team_b = RoleAssignmentService(rng=random.Random(seed)).assign(all_rounder_selection())
        new_a, new_b = balancer.balance(team_a, team_b)

        assert sorted(new_a.roles()) == sorted(team_a.roles())
        assert sorted(new_b.roles()) == sorted(team_b.roles())
        assert sorted(new_a.player_ids() + new_b.player_ids()) == sorted(
            team_a.player_ids() + team_b.player_ids()
        )
