"""
Service container for dependency injection and initialization.

This module centralizes service creation and wiring.

Usage:
    container = ServiceContainer(ServiceConfig(db_path="rift.db"))
    container.initialize()

    # Access services
    match_service = container.match_service
    player_service = container.player_service
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Any

import config
from database import Database
from domain.services.random_split_service import RandomSplitService
from repositories.match_repository import MatchRepository
from repositories.player_repository import PlayerRepository
from services.match_service import MatchService
from services.player_service import PlayerService
from shuffler import BalancedShuffler

logger = logging.getLogger("rift_shuffle.infrastructure.container")


@dataclass
class RepositoryContainer:
    """Container for all repositories."""

    player: PlayerRepository | None = None
    match: MatchRepository | None = None


@dataclass
class ServiceConfig:
    """Configuration for service initialization."""

    # Database
    db_path: str = config.DB_PATH

    # Balancing settings
    balance_thresholds: list[int] = field(default_factory=lambda: list(config.BALANCE_THRESHOLDS))
    swap_role_priority: list[str] = field(default_factory=lambda: list(config.SWAP_ROLE_PRIORITY))
    max_acceptable_diff: int = config.MAX_ACCEPTABLE_DIFF
    allow_unbalanced_fallback: bool = config.ALLOW_UNBALANCED_FALLBACK

    # Seed for the shared random source; None means unseeded
    random_seed: int | None = None


class ServiceContainer:
    """
    Central container for all application services.

    Handles proper initialization order and dependency injection.
    """

    def __init__(self, config: ServiceConfig | None = None):
        """
        Initialize the container with configuration.

        Args:
            config: Service configuration (uses defaults if None)
        """
        self.config = config or ServiceConfig()
        self._initialized = False
        self._repos = RepositoryContainer()
        self._database: Database | None = None
        self._services: dict[str, Any] = {}

    @property
    def is_initialized(self) -> bool:
        """Check if container has been initialized."""
        return self._initialized

    def initialize(self) -> None:
        """
        Initialize all services in correct order.

        This method is idempotent - calling it multiple times has no effect.
        """
        if self._initialized:
            logger.debug("ServiceContainer already initialized, skipping")
            return

        logger.info("Initializing ServiceContainer...")
        self._init_database()
        self._init_repositories()
        self._init_services()
        self._initialized = True
        logger.info("ServiceContainer initialization complete")

    def _init_database(self) -> None:
        """Initialize database and run migrations."""
        logger.debug(f"Initializing database at {self.config.db_path}")
        self._database = Database(self.config.db_path)

    def _init_repositories(self) -> None:
        logger.debug("Initializing repositories")
        db_path = self.config.db_path
        self._repos.player = PlayerRepository(db_path)
        self._repos.match = MatchRepository(db_path)

    def _init_services(self) -> None:
        logger.debug("Initializing services")
        rng = random.Random(self.config.random_seed)

        shuffler = BalancedShuffler(
            rng=rng,
            thresholds=self.config.balance_thresholds,
            swap_priority=self.config.swap_role_priority,
            max_acceptable_diff=self.config.max_acceptable_diff,
        )
        self._services["shuffler"] = shuffler
        self._services["player"] = PlayerService(self._repos.player)
        self._services["match"] = MatchService(
            self._repos.player,
            self._repos.match,
            shuffler=shuffler,
            split_service=RandomSplitService(rng=rng),
            allow_fallback=self.config.allow_unbalanced_fallback,
        )

    def _require(self, name: str) -> Any:
        if not self._initialized:
            raise RuntimeError("ServiceContainer not initialized. Call initialize() first.")
        return self._services[name]

    @property
    def repositories(self) -> RepositoryContainer:
        return self._repos

    @property
    def shuffler(self) -> BalancedShuffler:
        return self._require("shuffler")

    @property
    def player_service(self) -> PlayerService:
        return self._require("player")

    @property
    def match_service(self) -> MatchService:
        return self._require("match")
