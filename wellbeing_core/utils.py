"""
Well-Being Core - Utility Functions

Numeric helpers shared by the evaluators.
"""

from numbers import Integral, Real
from typing import Any
import math

from .parameters import EXPERIENCE_LIMIT


def clip(x: float, lo: float, hi: float) -> float:
    """
    Clip value to range [lo, hi].

    Args:
        x: Value to clip
        lo: Lower bound
        hi: Upper bound

    Returns:
        Clipped value in [lo, hi]
    """
    return max(lo, min(hi, x))


def clamp_magnitude(x: float, limit: float = EXPERIENCE_LIMIT) -> float:
    """
    Limit the magnitude of an experience value.

    clamp(x) = min(|x|, limit)

    The sign of the raw input is discarded: a reported pain of -3 is
    a pain of 3.

    Args:
        x: Raw experience value
        limit: Upper bound (EXPERIENCE_LIMIT by default)

    Returns:
        Value in [0, limit]
    """
    return float(clip(abs(x), 0.0, limit))


def is_finite_number(value: Any) -> bool:
    """True for finite real numbers. Booleans are not numbers here."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    # Integers are always finite; math.isfinite would overflow on huge ones
    if isinstance(value, Integral):
        return True
    return math.isfinite(value)
