"""
Repository layer for data access abstraction.
"""

from repositories.base_repository import BaseRepository
from repositories.interfaces import IMatchRepository, IPlayerRepository
from repositories.match_repository import MatchRepository
from repositories.player_repository import PlayerRepository

__all__ = [
    "BaseRepository",
    "PlayerRepository",
    "MatchRepository",
    "IPlayerRepository",
    "IMatchRepository",
]
