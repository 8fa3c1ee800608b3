"""
Application services layer.

Services orchestrate business operations using repositories and domain services.
Import concrete services from their modules (services.match_service,
services.player_service); the shuffler depends on this package for the
Result type and error codes.
"""

# Result type for consistent error handling
from services.result import Result

__all__ = ["Result"]
