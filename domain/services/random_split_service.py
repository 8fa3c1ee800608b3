"""
Random split domain service.

Unconstrained team splits used when balancing is off or impossible.
"""

import random

from config import ROLE_ORDER, TEAM_SIZE
from domain.models.player import Player
from domain.models.team import RoleAssignment, Team


class RandomSplitService:
    """
    Simple shuffled splits. Neither method guarantees positive scores, and
    `split_unbalanced` does not guarantee unique roles per team.
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng if rng is not None else random.Random()

    def _shuffled(self, players: list[Player]) -> list[Player]:
        if len(players) != TEAM_SIZE * 2:
            raise ValueError(f"Need exactly {TEAM_SIZE * 2} players to split")
        shuffled = list(players)
        self.rng.shuffle(shuffled)
        return shuffled

    def split_unbalanced(self, players: list[Player]) -> tuple[Team, Team]:
        """
        Shuffle and cut in half; each player gets a random playable role.

        Players with no playable role get an empty role and a score of 0.
        """
        shuffled = self._shuffled(players)

        def _pick(player: Player) -> RoleAssignment:
            roles = player.playable_roles()
            if not roles:
                return RoleAssignment(player=player, role="", assigned_score=0)
            return RoleAssignment.for_role(player, self.rng.choice(roles))

        team_a = [_pick(p) for p in shuffled[:TEAM_SIZE]]
        team_b = [_pick(p) for p in shuffled[TEAM_SIZE:]]
        return Team(team_a), Team(team_b)

    def split_role_fill(self, players: list[Player]) -> tuple[Team, Team]:
        """
        Shuffle, then give each player the first free role they can play.

        Roles stay unique per team. A player who cannot play any free role
        takes the first free role anyway, possibly with a score of 0.
        """
        shuffled = self._shuffled(players)
        used_a: set[str] = set()
        used_b: set[str] = set()
        team_a: list[RoleAssignment] = []
        team_b: list[RoleAssignment] = []

        for i in range(TEAM_SIZE):
            team_a.append(self._first_free_role(shuffled[i], used_a))
            team_b.append(self._first_free_role(shuffled[i + TEAM_SIZE], used_b))

        return Team(team_a), Team(team_b)

    @staticmethod
    def _first_free_role(player: Player, used_roles: set[str]) -> RoleAssignment:
        free = [role for role in ROLE_ORDER if role not in used_roles]
        playable = [role for role in free if player.can_play(role)]
        role = playable[0] if playable else free[0]
        used_roles.add(role)
        return RoleAssignment.for_role(player, role)
