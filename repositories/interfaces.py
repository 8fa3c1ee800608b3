"""
Abstract repository interfaces for data access.

These interfaces define the contracts implemented by concrete repositories.
"""

from abc import ABC, abstractmethod


class IPlayerRepository(ABC):
    @abstractmethod
    def add(
        self,
        name: str,
        top: int = 0,
        jungle: int = 0,
        mid: int = 0,
        adc: int = 0,
        support: int = 0,
        player_id: str | None = None,
    ): ...

    @abstractmethod
    def get_by_id(self, player_id: str): ...

    @abstractmethod
    def get_by_ids(self, player_ids: list[str]): ...

    @abstractmethod
    def get_all(self): ...

    @abstractmethod
    def exists(self, player_id: str) -> bool: ...

    @abstractmethod
    def update(self, player_id: str, **fields): ...

    @abstractmethod
    def set_role_scores(self, scores: dict[str, dict[str, int]]) -> None: ...

    @abstractmethod
    def delete(self, player_id: str) -> bool: ...


class IMatchRepository(ABC):
    @abstractmethod
    def record_match(
        self,
        team1: list[dict],
        team2: list[dict],
        winning_team: int,
        balanced: bool = True,
        score_diff: int | None = None,
        notes: str | None = None,
        score_updates: dict[str, dict[str, int]] | None = None,
    ) -> int: ...

    @abstractmethod
    def get_match(self, match_id: int) -> dict | None: ...

    @abstractmethod
    def get_recent_matches(self, limit: int = 20) -> list[dict]: ...

    @abstractmethod
    def get_player_matches(self, player_id: str, limit: int = 10) -> list[dict]: ...

    @abstractmethod
    def get_match_count(self) -> int: ...
