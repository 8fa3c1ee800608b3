"""
Pytest fixtures for tests.

Performance optimization: uses a session-scoped schema template so migrations
run once; each repository test copies the template file instead of
re-initializing the schema.
"""

import random
import shutil

import pytest

from database import Database
from repositories.match_repository import MatchRepository
from repositories.player_repository import PlayerRepository
from services.match_service import MatchService
from services.player_service import PlayerService
from tests.helpers import all_rounder_selection


@pytest.fixture(scope="session")
def _schema_template_path(tmp_path_factory):
    """Create a schema template database once per test session."""
    template_dir = tmp_path_factory.mktemp("schema_template")
    template_path = str(template_dir / "template.db")
    Database(template_path)
    yield template_path


@pytest.fixture
def temp_db_path(tmp_path):
    """Create a temporary database path (no schema)."""
    path = str(tmp_path / "temp.db")
    yield path


@pytest.fixture
def repo_db_path(_schema_template_path, tmp_path):
    """Create a temporary database with initialized schema for repository tests."""
    test_db_path = str(tmp_path / "test.db")
    shutil.copy2(_schema_template_path, test_db_path)
    yield test_db_path


@pytest.fixture
def player_repository(repo_db_path):
    """Create a player repository with temp database."""
    return PlayerRepository(repo_db_path)


@pytest.fixture
def match_repository(repo_db_path):
    """Create a match repository with temp database."""
    return MatchRepository(repo_db_path)


@pytest.fixture
def player_service(player_repository):
    return PlayerService(player_repository)


@pytest.fixture
def rng():
    """Seeded random source for deterministic shuffles."""
    return random.Random(1234)


@pytest.fixture
def match_service(player_repository, match_repository, rng):
    return MatchService(player_repository, match_repository, rng=rng, allow_fallback=True)


@pytest.fixture
def sample_players():
    """Ten players who can each play every role."""
    return all_rounder_selection()


@pytest.fixture
def stored_players(player_repository, sample_players):
    """Persist the sample players and return them."""
    for p in sample_players:
        player_repository.add(
            p.name,
            top=p.top,
            jungle=p.jungle,
            mid=p.mid,
            adc=p.adc,
            support=p.support,
            player_id=p.player_id,
        )
    return sample_players
