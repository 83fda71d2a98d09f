"""
Input validation helpers for the proficiency engine.

The level calculations never raise during normal operation: a skill that
cannot be performed is reported through the CANNOT_PERFORM sentinel. Inputs
that break the caller contract are rejected here, at the public boundary,
with an InvalidInput error after being logged with their context.
"""

from typing import Any, NoReturn, Optional

from .constants import Difficulty
from .logging import log_error


class InvalidInput(ValueError):
    """Raised when a caller hands the engine a malformed input."""


def _reject(
    message: str,
    param_name: str,
    value: Any,
    context: Optional[dict[str, Any]],
    error: Optional[str] = None,
) -> NoReturn:
    log_error(
        message,
        {
            **(context or {}),
            "param_name": param_name,
            "value": value,
            "type": type(value).__name__,
        },
    )
    raise InvalidInput(error or f"Invalid {param_name}: {value!r}")


# ==============================================================================
# VALIDATION HELPERS
# ==============================================================================


def require_difficulty(
    value: Any,
    param_name: str = "difficulty",
    allowed: Optional[tuple[Difficulty, ...]] = None,
    context: Optional[dict[str, Any]] = None,
) -> Difficulty:
    """
    Validates that a value is a Difficulty, optionally one of a subset.

    Args:
        value: The value to validate
        param_name: Human-readable parameter name for error messages
        allowed: The difficulties accepted, None to accept all of them
        context: Additional context for logging

    Returns:
        Difficulty: The validated difficulty

    Raises:
        InvalidInput: If validation fails
    """
    if not isinstance(value, Difficulty):
        _reject(
            f"{param_name} must be Difficulty enum, got: {type(value).__name__}",
            param_name,
            value,
            context,
            f"Invalid {param_name}: expected Difficulty, got {type(value).__name__}",
        )
    if allowed is not None and value not in allowed:
        _reject(
            f"{param_name} must be one of {[str(d) for d in allowed]}, got: {value}",
            param_name,
            value,
            context,
        )
    return value


def require_non_negative_int(
    value: Any, param_name: str, context: Optional[dict[str, Any]] = None
) -> int:
    """
    Validates that a value is an integer greater than or equal to zero.

    Negative point totals are rejected instead of being clamped.

    Args:
        value: The value to validate
        param_name: Human-readable parameter name for error messages
        context: Additional context for logging

    Returns:
        int: The validated integer

    Raises:
        InvalidInput: If validation fails
    """
    # bool is an int subclass.
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        _reject(
            f"{param_name} must be a non-negative integer, got: {value}",
            param_name,
            value,
            context,
        )
    return value


def require_non_empty_string(
    value: Any, param_name: str, context: Optional[dict[str, Any]] = None
) -> str:
    """
    Validates that a value is a string with something besides whitespace.

    Args:
        value: The value to validate
        param_name: Human-readable parameter name for error messages
        context: Additional context for logging

    Returns:
        str: The validated string value

    Raises:
        InvalidInput: If validation fails
    """
    if not isinstance(value, str) or not value.strip():
        _reject(
            f"{param_name} must be a non-empty string, got: {value!r}",
            param_name,
            value,
            context,
        )
    return value
