"""
Well-Being Core - Needs Model

Basic needs are quasi-conditions for any informed desire. A needs
mapping assigns each canonical need a satisfaction value in [0, 10];
extra keys are allowed and ignored.
"""

from typing import Any, Dict, Mapping, Optional

from .errors import InvalidNeedsError
from .parameters import BASIC_NEEDS, NEED_RANGE
from .runtime_config import get_effective_setting
from .utils import is_finite_number


def default_needs() -> Dict[str, float]:
    """Fresh mapping with every basic need at the default (median) value."""
    value = get_effective_setting("default_need_value")
    return {need: value for need in BASIC_NEEDS}


def validate_needs(candidate: Any) -> Mapping[str, float]:
    """
    Check that a needs mapping covers the basic needs.

    Args:
        candidate: Mapping of need name -> satisfaction value

    Returns:
        The candidate itself, unchanged

    Raises:
        InvalidNeedsError: if the candidate is not a mapping, a basic need
            is missing, or a basic need value is not a number in [0, 10]
    """
    if not isinstance(candidate, Mapping):
        raise InvalidNeedsError(
            f"Needs must be a mapping, got {type(candidate).__name__}",
            missing=BASIC_NEEDS,
        )

    missing = [need for need in BASIC_NEEDS if need not in candidate]
    if missing:
        raise InvalidNeedsError(
            f"Missing basic needs: {', '.join(missing)}",
            missing=missing,
        )

    for need in BASIC_NEEDS:
        value = candidate[need]
        if not is_finite_number(value) or not NEED_RANGE.contains(value):
            raise InvalidNeedsError(
                f"Need '{need}'={value!r} out of range "
                f"[{NEED_RANGE.minimum}, {NEED_RANGE.maximum}]",
                key=need,
            )

    return candidate


def has_basic_needs(candidate: Any) -> bool:
    """Non-raising form of validate_needs()."""
    try:
        validate_needs(candidate)
    except InvalidNeedsError:
        return False
    return True


def find_need_regression(before: Mapping[str, float], after: Mapping[str, float]) -> Optional[str]:
    """
    First basic need that is lower after than before.

    Strongly prudential: any single regression counts, whatever happens
    to the other needs. Checked in BASIC_NEEDS order.

    Returns:
        Name of the offending need, or None if no basic need regresses
    """
    for need in BASIC_NEEDS:
        if after[need] < before[need]:
            return need
    return None
