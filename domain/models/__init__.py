"""
Domain models - pure data structures representing business entities.
"""

from domain.models.matchup import BalanceReport, Matchup, SwapRecord
from domain.models.player import Player
from domain.models.team import RoleAssignment, Team

__all__ = ["Player", "RoleAssignment", "Team", "Matchup", "BalanceReport", "SwapRecord"]
