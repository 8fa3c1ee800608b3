"""
Centralized configuration for Rift Shuffle.
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()


def _parse_int(env_var: str, default: int) -> int:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_bool(env_var: str, default: bool) -> bool:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _parse_int_list(env_var: str, default: list[int]) -> list[int]:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return [int(x.strip()) for x in raw.split(",") if x.strip()]
    except ValueError:
        return default


def _parse_str_list(env_var: str, default: list[str], allowed: list[str]) -> list[str]:
    """Parse a comma separated list, falling back unless it is a permutation of `allowed`."""
    raw = os.getenv(env_var)
    if raw is None:
        return default
    values = [x.strip().lower() for x in raw.split(",") if x.strip()]
    if sorted(values) != sorted(allowed):
        return default
    return values


DB_PATH = os.getenv("RIFT_SHUFFLE_DB", "rift_shuffle.db")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Roles in the order the role assigner fills them
ROLES: list[str] = ["top", "jungle", "mid", "adc", "support"]
ROLE_ORDER: list[str] = list(ROLES)

# Roles in the order the balancer tries swapping them (bottom lane first)
SWAP_ROLE_PRIORITY: list[str] = _parse_str_list(
    "SWAP_ROLE_PRIORITY", ["adc", "support", "top", "jungle", "mid"], ROLES
)

# Ascending ladder of acceptable team score differences
BALANCE_THRESHOLDS: list[int] = sorted(_parse_int_list("BALANCE_THRESHOLDS", [3, 5, 7]))

# Above this difference callers should warn that teams are uneven
MAX_ACCEPTABLE_DIFF = _parse_int("MAX_ACCEPTABLE_DIFF", 5)

TEAM_SIZE = 5
SELECTION_SIZE = TEAM_SIZE * 2

# Roster bounds for role scores
ROLE_SCORE_MIN = 0
ROLE_SCORE_MAX = 100

# Post-match adjustments move the played role by MATCH_SCORE_DELTA and clamp to [floor, ceiling]
MATCH_SCORE_DELTA = _parse_int("MATCH_SCORE_DELTA", 1)
MATCH_SCORE_FLOOR = 1
MATCH_SCORE_CEILING = 10

BALANCE_MODE_DEFAULT = _parse_bool("BALANCE_MODE", True)
ALLOW_UNBALANCED_FALLBACK = _parse_bool("ALLOW_UNBALANCED_FALLBACK", True)

RECENT_MATCHES_LIMIT = _parse_int("RECENT_MATCHES_LIMIT", 20)


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the application."""
    logging.basicConfig(
        level=getattr(logging, level or LOG_LEVEL, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
