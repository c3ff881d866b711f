"""
Input validation utilities for ralanova.

These validators guard the configuration layer only. They raise immediately
with clear error messages; the numeric core never calls them.

Design principles:
    - Each function validates ONE thing
    - Parameter names included in all error messages
    - No silent coercion (bool is not an integer count)
"""

from typing import Any

import numpy as np

from ralanova.core.exceptions import ValidationError, DimensionError


def is_sequence(obj: Any) -> bool:
    """
    True if obj is an ordered sequence the orchestrator can iterate.

    Lists, tuples and numpy arrays of ndim >= 1 qualify. Strings, bytes,
    mappings and scalars do not.
    """
    if isinstance(obj, np.ndarray):
        return obj.ndim >= 1
    return isinstance(obj, (list, tuple))


def check_count(value: Any, name: str, minimum: int = 0) -> int:
    """
    Validate a dimension count.

    Args:
        value: Candidate count
        name: Parameter name for error messages
        minimum: Smallest accepted value

    Returns:
        The count as a plain int

    Raises:
        ValidationError: If value is not an integer
        DimensionError: If value is below minimum
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        )
    count = int(value)
    if count < minimum:
        raise DimensionError(
            f"{name}: must be >= {minimum}, got {count}",
            name=name,
            value=count,
            minimum=minimum,
        )
    return count


def check_bounds(low: Any, high: Any, name: str) -> tuple[int, int]:
    """
    Validate an inclusive integer range [low, high].

    Raises:
        ValidationError: If either bound is not an integer or low > high
    """
    for label, bound in (("low", low), ("high", high)):
        if isinstance(bound, bool) or not isinstance(bound, (int, np.integer)):
            raise ValidationError(
                f"{name}.{label}: expected an integer, got {type(bound).__name__}"
            )
    lo, hi = int(low), int(high)
    if lo > hi:
        raise ValidationError(f"{name}: low ({lo}) exceeds high ({hi})")
    return lo, hi
