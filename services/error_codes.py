"""
Standard error codes for service layer.

These error codes allow callers to programmatically handle specific error
conditions without parsing error message text.

Usage:
    from services.error_codes import WRONG_SELECTION_SIZE
    from services.result import Result

    if len(players) != 10:
        return Result.fail("Select exactly ten players", code=WRONG_SELECTION_SIZE)
"""

# General errors
NOT_FOUND = "not_found"
VALIDATION_ERROR = "validation_error"

# Roster errors
PLAYER_NOT_FOUND = "player_not_found"

# Team construction errors
WRONG_SELECTION_SIZE = "wrong_selection_size"
INSUFFICIENT_ROLE_CANDIDATES = "insufficient_role_candidates"

# Match errors
INVALID_RESULT = "invalid_result"
