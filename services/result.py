"""
Result type for consistent error handling across services.

This module provides a simple Result[T] type that allows services to return
success/failure states without raising exceptions, enabling cleaner error handling
in the calling layers.

Usage:
    # Returning success
    return Result.ok(matchup)  # Result with value
    return Result.ok()         # Result without value (for void operations)

    # Returning failure
    return Result.fail("Error message")
    return Result.fail("Error message", code="error_code")
    return Result.fail("Error message", code="error_code", details={"role": "mid"})

    # Checking results
    if result.success:
        print(result.value)
    else:
        print(f"Error ({result.error_code}): {result.error}")
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    A simple result type for service method return values.

    Attributes:
        success: Whether the operation succeeded
        value: The return value if successful (None if failed or void operation)
        error: Error message if failed (None if successful)
        error_code: Optional error code for programmatic error handling
        details: Structured data about a failure (e.g. the role that could not be filled)
    """

    success: bool
    value: T | None = None
    error: str | None = None
    error_code: str | None = None
    details: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, value: T | None = None) -> "Result[T]":
        """Create a successful result with an optional value."""
        return cls(success=True, value=value)

    @classmethod
    def fail(
        cls,
        error: str,
        code: str | None = None,
        details: Mapping[str, Any] | None = None,
    ) -> "Result[T]":
        """Create a failed result with an error message, optional code and details."""
        return cls(success=False, error=error, error_code=code, details=dict(details or {}))

    def __bool__(self) -> bool:
        """Allow using Result in boolean context: if result: ..."""
        return self.success

    def unwrap(self) -> T:
        """
        Get the value, raising ValueError if the result is a failure.

        Raises:
            ValueError: If the result is a failure
        """
        if not self.success:
            raise ValueError(f"Cannot unwrap failed result: {self.error}")
        return self.value  # type: ignore

