"""
Domain errors raised by the team construction services.
"""


class TeamAssignmentError(ValueError):
    """Base class for failures that abort team construction."""


class WrongSelectionSizeError(TeamAssignmentError):
    """The selection does not hold exactly the required number of distinct players."""

    def __init__(self, size: int, distinct: int, expected: int):
        self.size = size
        self.distinct = distinct
        self.expected = expected
        super().__init__(
            f"Need exactly {expected} distinct players, got {size} ({distinct} distinct)"
        )


class InsufficientRoleCandidatesError(TeamAssignmentError):
    """Fewer than two unused players have a positive score for a role."""

    def __init__(self, role: str, available: int):
        self.role = role
        self.available = available
        super().__init__(
            f"Cannot fill role {role} for both teams: only {available} eligible player(s) left"
        )
