"""
Point cost module for the proficiency engine.

Implements the curve turning invested points into a relative level, and the
helpers that find how many points reach the next or previous level.

The curve, for the effective points p of a tier with base offset b:

    p < 1       not usable
    p == 1      b
    p in 2..3   b + 1
    p >= 4      b + 1 + p // 4

Wildcard tiers divide the invested points by three first.
"""

from gurps_skills.core.constants import (
    POINT_STEP_WINDOW,
    WILDCARD_POINT_DIVISOR,
    WILDCARD_POINT_STEP_WINDOW,
    Difficulty,
)
from gurps_skills.core.error_handling import require_difficulty, require_non_negative_int


def effective_points(points: int, difficulty: Difficulty) -> int:
    """
    Returns the points that count on the curve.

    Args:
        points (int): The invested points.
        difficulty (Difficulty): The difficulty tier.

    Returns:
        int: The points divided by three for wildcards, unchanged otherwise.

    """
    if difficulty == Difficulty.WILDCARD:
        return points // WILDCARD_POINT_DIVISOR
    return points


def points_to_relative_level(points: int, difficulty: Difficulty) -> tuple[bool, int]:
    """
    Converts invested points into a relative level.

    Args:
        points (int):
            The invested points, must not be negative.
        difficulty (Difficulty):
            The difficulty tier.

    Returns:
        tuple[bool, int]:
            Whether the investment is usable at all, and the relative level
            it buys (0 when unusable).

    Raises:
        InvalidInput: If the points are negative or the difficulty is invalid.

    """
    require_non_negative_int(points, "points")
    require_difficulty(difficulty)
    return _curve(points, difficulty)


def _curve(points: int, difficulty: Difficulty) -> tuple[bool, int]:
    points = effective_points(points, difficulty)
    base = difficulty.base_relative_level
    if points < 1:
        return False, 0
    if points == 1:
        return True, base
    if points < 4:
        return True, base + 1
    return True, base + 1 + points // 4


def _step_window(difficulty: Difficulty) -> int:
    if difficulty == Difficulty.WILDCARD:
        return WILDCARD_POINT_STEP_WINDOW
    return POINT_STEP_WINDOW


def points_for_next_level(points: int, difficulty: Difficulty) -> int:
    """
    Finds the smallest point total that buys a better level.

    Args:
        points (int): The points currently invested.
        difficulty (Difficulty): The difficulty tier.

    Returns:
        int: The new point total. If no better level is found within the
        search window the top of the window is returned.

    Raises:
        InvalidInput: If the points are negative or the difficulty is invalid.

    """
    require_non_negative_int(points, "points")
    require_difficulty(difficulty)
    current = _curve(points, difficulty)
    top = points + _step_window(difficulty)
    for candidate in range(points + 1, top + 1):
        if _curve(candidate, difficulty) > current:
            return candidate
    return top


def points_for_previous_level(points: int, difficulty: Difficulty) -> int:
    """
    Finds the smallest point total that buys the previous level.

    Steps down until the level drops, then keeps removing points as long as
    the level stays the same.

    Args:
        points (int): The points currently invested.
        difficulty (Difficulty): The difficulty tier.

    Returns:
        int: The new point total, never below zero.

    Raises:
        InvalidInput: If the points are negative or the difficulty is invalid.

    """
    require_non_negative_int(points, "points")
    require_difficulty(difficulty)
    if points == 0:
        return 0
    current = _curve(points, difficulty)
    floor = max(points - _step_window(difficulty), 0)
    result = floor
    for candidate in range(points - 1, floor - 1, -1):
        if _curve(candidate, difficulty) < current:
            result = candidate
            break
    target = _curve(result, difficulty)
    while result > 0 and _curve(result - 1, difficulty) == target:
        result -= 1
    return result
