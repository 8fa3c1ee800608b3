"""
Domain services containing pure business logic.
"""

from domain.services.random_split_service import RandomSplitService
from domain.services.role_assignment_service import RoleAssignmentService
from domain.services.team_balancing_service import TeamBalancingService
from domain.services.team_validation_service import TeamValidationService

__all__ = [
    "RoleAssignmentService",
    "TeamBalancingService",
    "TeamValidationService",
    "RandomSplitService",
]
