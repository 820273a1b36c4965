# File: utils/math_utils.py
"""Math and calculation utilities for habitgrid.

Pure Python math functions shared by the engines.

Functions:
    - clamp: Bound a value to a range
    - progress_ratio: Count/target ratio bounded to 0.0-1.0
    - interpolate: Linear interpolation between two values
    - clamp_count: Coerce a raw completion count to a non-negative integer
"""

from __future__ import annotations

import logging

# Module-level logger
_LOGGER = logging.getLogger(__name__)


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp a value between minimum and maximum bounds.

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Value clamped to [min_val, max_val] range

    Examples:
        clamp(1.5, 0, 1) → 1
        clamp(-0.2, 0, 1) → 0
        clamp(0.5, 0, 1) → 0.5
    """
    return max(min_val, min(value, max_val))


def progress_ratio(current: float, target: float) -> float:
    """Return how far `current` is toward `target`, bounded to 0.0-1.0.

    Args:
        current: Current progress value
        target: Target value

    Returns:
        Ratio in [0.0, 1.0], or 0.0 if target is not positive

    Examples:
        progress_ratio(3, 8) → 0.375
        progress_ratio(10, 8) → 1.0
        progress_ratio(5, 0) → 0.0  # Division by zero protection
    """
    if target <= 0:
        return 0.0
    return clamp(current / target, 0.0, 1.0)


def interpolate(start: float, end: float, fraction: float) -> float:
    """Linearly interpolate between `start` and `end`.

    Examples:
        interpolate(0.4, 0.85, 0.0) → 0.4
        interpolate(0.4, 0.85, 1.0) → 0.85
    """
    return start + (fraction * (end - start))


def clamp_count(raw_count: int) -> int:
    """Coerce a completion count to a non-negative integer."""
    if raw_count < 0:
        _LOGGER.debug("Negative completion count %s clamped to 0", raw_count)
        return 0
    return raw_count
