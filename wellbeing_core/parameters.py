"""
Well-Being Core - Parameter Definitions

Canonical constants for the experience evaluator and the needs model.

This is the single source of truth for limits, the canonical basic
needs and their default satisfaction values.
"""

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple


# Upper bound for pain quantity, pleasure quantity and pleasure quality
EXPERIENCE_LIMIT: float = 10.0

# Well-being of a subject with no experience to score
NEUTRAL_WELL_BEING: float = 0.0

# A non exhaustive list of needs that must be satisfied as a
# precondition for any desire. Order is the reporting order of the gates.
BASIC_NEEDS: Tuple[str, ...] = (
    'hunger',
    'thirst',
    'health',
    'security',
    'housing',
)


@dataclass(frozen=True)
class NeedRange:
    """
    Satisfaction scale of a basic need.

    0 is complete deprivation, 10 complete satisfaction and the
    default sits at the median.
    """
    minimum: float = 0.0
    maximum: float = 10.0
    default: float = 5.0

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum


NEED_RANGE: NeedRange = NeedRange()
NEED_MIN: float = NEED_RANGE.minimum
NEED_MAX: float = NEED_RANGE.maximum
NEED_DEFAULT: float = NEED_RANGE.default

# Read-only view; use needs.default_needs() for a mutable copy
BASIC_NEEDS_DEFAULT: Mapping[str, float] = MappingProxyType(
    {need: NEED_DEFAULT for need in BASIC_NEEDS}
)
