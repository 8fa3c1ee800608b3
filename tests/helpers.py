"""
Shared builders for tests.
"""

from config import ROLES
from domain.models.player import Player
from domain.models.team import RoleAssignment, Team


class FixedCoin:
    """Stand-in random source whose random() always returns the same value."""

    def __init__(self, value: float):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


def make_player(player_id: str, name: str | None = None, **scores) -> Player:
    return Player(player_id=player_id, name=name or f"Player-{player_id}", **scores)


def paired_selection(pairs: dict[str, tuple[int, int]]) -> list[Player]:
    """
    Ten single-role players: for each role, two players who can only play it.

    Args:
        pairs: role -> (score of first player, score of second player)
    """
    players = []
    for role in ROLES:
        first, second = pairs[role]
        players.append(make_player(f"{role}-1", **{role: first}))
        players.append(make_player(f"{role}-2", **{role: second}))
    return players


def all_rounder_selection() -> list[Player]:
    """Ten players with a positive score in every role."""
    players = []
    for i in range(10):
        scores = {role: ((i * 3 + r * 7) % 10) + 1 for r, role in enumerate(ROLES)}
        players.append(make_player(f"p{i}", **scores))
    return players


def make_team(scores: dict[str, int], prefix: str) -> Team:
    """Team with one single-role player per role at the given scores."""
    assignments = []
    for role in ROLES:
        player = make_player(f"{prefix}-{role}", **{role: scores[role]})
        assignments.append(RoleAssignment.for_role(player, role))
    return Team(assignments)
