"""
Well-Being Core - State of the World

A StateOfTheWorld is a snapshot centered on one person: their basic
needs, their potential desires, and the states of every other person
whose situation is causally modified by the realization of the
person's desire, before and after.

Transitions are modeled as pairs of distinct instances; a state is
never mutated in place.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from .errors import InvalidNeedsError, InvalidStateError
from .logging_utils import get_logger
from .needs import default_needs, has_basic_needs, validate_needs
from .runtime_config import get_effective_setting

logger = get_logger(__name__)

# Capability set of a state of the world
STATE_FIELDS: Tuple[str, ...] = (
    'potential_desires',
    'needs',
    'affected_others_current',
    'affected_others_result',
)


@dataclass(frozen=True)
class StateOfTheWorld:
    """
    Snapshot of a subject's situation.

    Attributes:
        potential_desires: Informed desires available to the subject; only
            their number matters to the model
        needs: Basic needs of the subject. Invalid or missing needs are
            replaced with default_needs() unless strict_needs is set
        affected_others_current: Third parties' states before the desire
            is satisfied
        affected_others_result: Same third parties, same order, after
    """
    potential_desires: Sequence[Any] = ()
    # Read-only mapping view, left out of the hash
    needs: Optional[Mapping[str, float]] = field(default=None, hash=False)
    affected_others_current: Sequence['StateOfTheWorld'] = ()
    affected_others_result: Sequence['StateOfTheWorld'] = ()

    def __post_init__(self):
        needs = self.needs
        if needs is None:
            needs = default_needs()
        else:
            try:
                validate_needs(needs)
            except InvalidNeedsError as e:
                if get_effective_setting("strict_needs"):
                    raise
                logger.warning(f"Invalid needs ({e}); falling back to default needs")
                needs = default_needs()

        current = tuple(self.affected_others_current)
        result = tuple(self.affected_others_result)
        if len(current) != len(result):
            raise InvalidStateError(
                f"affected_others_current has {len(current)} states but "
                f"affected_others_result has {len(result)}"
            )

        object.__setattr__(self, 'potential_desires', tuple(self.potential_desires))
        object.__setattr__(self, 'needs', MappingProxyType(dict(needs)))
        object.__setattr__(self, 'affected_others_current', current)
        object.__setattr__(self, 'affected_others_result', result)

    @property
    def affected_others(self) -> Tuple[Tuple['StateOfTheWorld', 'StateOfTheWorld'], ...]:
        """(before, after) pairs, one per affected third party."""
        return tuple(zip(self.affected_others_current, self.affected_others_result))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'potential_desires': list(self.potential_desires),
            'needs': dict(self.needs),
            'affected_others_current': [s.to_dict() for s in self.affected_others_current],
            'affected_others_result': [s.to_dict() for s in self.affected_others_result],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'StateOfTheWorld':
        return cls(
            potential_desires=data.get('potential_desires', ()),
            needs=data.get('needs'),
            affected_others_current=[
                cls.from_dict(s) for s in data.get('affected_others_current', ())
            ],
            affected_others_result=[
                cls.from_dict(s) for s in data.get('affected_others_result', ())
            ],
        )


def is_state_of_the_world(value: Any) -> bool:
    """
    Capability check: does the value look like a state of the world?

    Requires every field of STATE_FIELDS, basic needs on the needs field,
    and the two affected-others sequences to be sized and of equal length.
    """
    return missing_state_field(value) is None


def missing_state_field(value: Any) -> Optional[str]:
    """Name of the first capability the value lacks, or None."""
    for name in STATE_FIELDS:
        if not hasattr(value, name):
            return name
    if not has_basic_needs(value.needs):
        return 'needs'
    for name in ('potential_desires', 'affected_others_current', 'affected_others_result'):
        if not hasattr(getattr(value, name), '__len__'):
            return name
    if len(value.affected_others_current) != len(value.affected_others_result):
        return 'affected_others_result'
    return None
