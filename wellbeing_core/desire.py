"""
Well-Being Core - Desire Validator

A desire is modeled as:
    - a person
    - a current state of the world for this person
    - a wished-for state of the world (after the desire is satisfied)

A desire is permissible only if it passes three gates, in order:

    START -> EXISTENCE -> RATIONALITY -> REASONABLENESS -> ADMITTED
    any gate failing -> REJECTED(reason)

Existence:       both states are real, coherent states of the world
Rationality:     no contradiction with the person's own basic needs and
                 potential long-term desires
Reasonableness:  no contradiction with the basic needs of the other
                 people affected by the desire

Rejection is a normal outcome and is returned, never raised.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .errors import InvalidStateError
from .logging_utils import get_logger
from .needs import find_need_regression
from .world import StateOfTheWorld, missing_state_field

logger = get_logger(__name__)


class Gate(Enum):
    EXISTENCE = "existence"
    RATIONALITY = "rationality"
    REASONABLENESS = "reasonableness"


class RejectionReason(Enum):
    EXISTENCE = "ExistenceTestFailure"
    RATIONALITY = "RationalityTestFailure"
    REASONABILITY = "ReasonabilityTestFailure"


GATE_FAILURES: Dict[Gate, RejectionReason] = {
    Gate.EXISTENCE: RejectionReason.EXISTENCE,
    Gate.RATIONALITY: RejectionReason.RATIONALITY,
    Gate.REASONABLENESS: RejectionReason.REASONABILITY,
}


@dataclass(frozen=True)
class DesireVerdict:
    """
    Outcome of the desire pipeline (or of a single gate).

    Attributes:
        admitted: True if the desire passed every gate evaluated
        reason: Failure tag of the first failing gate
        detail: Human readable explanation of the failure
        offending_need: Rationality - first basic need that regresses
        desire_deficit: Rationality - how many potential desires are lost
        third_party_index: Reasonableness - first third party worse off
    """
    admitted: bool
    reason: Optional[RejectionReason] = None
    detail: Optional[str] = None
    offending_need: Optional[str] = None
    desire_deficit: Optional[int] = None
    third_party_index: Optional[int] = None

    @property
    def gate(self) -> Optional[Gate]:
        """Gate that rejected the desire, None when admitted."""
        for gate, reason in GATE_FAILURES.items():
            if reason is self.reason:
                return gate
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Boundary form: {admitted, reason?, detail?}."""
        result: Dict[str, Any] = {'admitted': self.admitted}
        if self.reason is not None:
            result['reason'] = self.reason.value
        if self.detail is not None:
            result['detail'] = self.detail
        return result


ADMITTED = DesireVerdict(admitted=True)


def _reject(gate: Gate, detail: str, **extra: Any) -> DesireVerdict:
    return DesireVerdict(admitted=False, reason=GATE_FAILURES[gate], detail=detail, **extra)


def is_valid_desire(current: Any, wished: Any) -> DesireVerdict:
    """
    Existence test: is the desire about a real and coherent object?

    Both states, and the third-party states carried by the wished state,
    must satisfy the state-of-the-world capability set.
    """
    for label, state in (('current', current), ('wished', wished)):
        missing = missing_state_field(state)
        if missing is not None:
            return _reject(Gate.EXISTENCE, f"{label} state is not a state of the world: bad '{missing}'")

    for label in ('affected_others_current', 'affected_others_result'):
        for i, other in enumerate(getattr(wished, label)):
            missing = missing_state_field(other)
            if missing is not None:
                return _reject(
                    Gate.EXISTENCE,
                    f"wished.{label}[{i}] is not a state of the world: bad '{missing}'"
                )

    return ADMITTED


def is_rational_desire(current: StateOfTheWorld, wished: StateOfTheWorld) -> DesireVerdict:
    """
    Rationality test for the person alone.

    1. The number of potential (informed) desires must not shrink. Buying
       the shiny sport car while the family ends up in a trailer without
       medical care removes more desires than it satisfies.
    2. No basic need may decrease. Any single regression rejects the
       whole desire; there is no partial credit.
    """
    deficit = len(current.potential_desires) - len(wished.potential_desires)
    if deficit > 0:
        return _reject(
            Gate.RATIONALITY,
            f"potential desires shrink from {len(current.potential_desires)} "
            f"to {len(wished.potential_desires)}",
            desire_deficit=deficit,
        )

    need = find_need_regression(current.needs, wished.needs)
    if need is not None:
        return _reject(
            Gate.RATIONALITY,
            f"basic need '{need}' regresses from {current.needs[need]} to {wished.needs[need]}",
            offending_need=need,
        )

    return ADMITTED


def is_reasonable_desire(
    current_others: Sequence[StateOfTheWorld],
    result_others: Sequence[StateOfTheWorld],
) -> DesireVerdict:
    """
    Reasonableness test: is any affected third party worse off?

    States before and after are compared pairwise by index with the same
    per-need rule as the rationality test. No third parties, no objection.

    Raises:
        InvalidStateError: if the two sequences don't pair up
    """
    if len(current_others) != len(result_others):
        raise InvalidStateError(
            f"{len(current_others)} current third-party states "
            f"but {len(result_others)} result states"
        )

    for i, (before, after) in enumerate(zip(current_others, result_others)):
        need = find_need_regression(before.needs, after.needs)
        if need is not None:
            return _reject(
                Gate.REASONABLENESS,
                f"third party {i} is worse off: '{need}' regresses "
                f"from {before.needs[need]} to {after.needs[need]}",
                third_party_index=i,
                offending_need=need,
            )

    return ADMITTED


_PIPELINE: Tuple[Tuple[Gate, Callable[[Any, Any], DesireVerdict]], ...] = (
    (Gate.EXISTENCE, is_valid_desire),
    (Gate.RATIONALITY, is_rational_desire),
    (Gate.REASONABLENESS, lambda current, wished: is_reasonable_desire(
        wished.affected_others_current, wished.affected_others_result
    )),
)


def evaluate_desire(current: Any, wished: Any) -> DesireVerdict:
    """
    Run a desire through the existence, rationality and reasonableness
    gates, stopping at the first failure.

    Args:
        current: State of the world before the desire is satisfied
        wished: State of the world the person aims at

    Returns:
        DesireVerdict; admitted, or rejected with the first failing
        gate's reason
    """
    for gate, check in _PIPELINE:
        verdict = check(current, wished)
        if not verdict.admitted:
            logger.debug(f"Desire rejected at {gate.value} gate: {verdict.detail}")
            return verdict

    logger.debug("Desire admitted")
    return ADMITTED


@dataclass(frozen=True)
class Desire:
    """A proposed transition from a current to a wished-for state."""
    current: StateOfTheWorld
    wished: StateOfTheWorld

    def evaluate(self) -> DesireVerdict:
        return evaluate_desire(self.current, self.wished)


def evaluate_desires(
    desires: Iterable[Union[Desire, Tuple[StateOfTheWorld, StateOfTheWorld]]],
) -> List[DesireVerdict]:
    """Evaluate candidate desires in order, one verdict each."""
    verdicts = []
    for desire in desires:
        if isinstance(desire, Desire):
            verdicts.append(desire.evaluate())
        else:
            current, wished = desire
            verdicts.append(evaluate_desire(current, wished))
    return verdicts
