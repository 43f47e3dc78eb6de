"""
Well-Being Core - Experience Evaluator

An experience is defined by pain and pleasure. Following J.S. Mill,
the quality of pleasure is taken into account, not only its quantity.

Scoring:
    pleasure.quantity > pain.quantity  ->  W = pleasure.quality
    otherwise                          ->  W = pleasure.quantity - pain.quantity

Interpretation:
    - W > 0: the balance favours pleasure, and the quality of that
      pleasure decides how much well-being is gained
    - W <= 0: avoiding pain takes priority over gaining higher quality
      pleasures, so no quality bonus is applied
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping

from .errors import InvalidExperienceError, InvalidInputError
from .parameters import NEUTRAL_WELL_BEING
from .utils import clamp_magnitude, is_finite_number


@dataclass(frozen=True)
class Pain:
    quantity: float = 0.0


@dataclass(frozen=True)
class Pleasure:
    quantity: float = 0.0
    quality: float = 0.0


@dataclass(frozen=True)
class Experience:
    """
    One subject's momentary hedonic state.

    Build through make_experience() so every field lies in
    [0, EXPERIENCE_LIMIT].
    """
    pain: Pain
    pleasure: Pleasure

    @property
    def well_being(self) -> float:
        return compute_well_being(self)

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {
            'pain': {'quantity': self.pain.quantity},
            'pleasure': {
                'quantity': self.pleasure.quantity,
                'quality': self.pleasure.quality,
            },
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Experience':
        """Rebuild an experience; values are clamped again."""
        pain = data.get('pain') or {}
        pleasure = data.get('pleasure') or {}
        return make_experience(
            pain.get('quantity', 0.0),
            pleasure.get('quantity', 0.0),
            pleasure.get('quality', 0.0),
        )


class WellBeingVerdict(Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


def make_experience(pain: float, pleasure_quantity: float, pleasure_quality: float) -> Experience:
    """
    Create an experience from raw reported values.

    Args:
        pain: Pain quantity
        pleasure_quantity: Pleasure quantity
        pleasure_quality: Pleasure quality (higher vs. lower pleasures)

    Returns:
        Experience with every value clamped to [0, 10]

    Raises:
        InvalidInputError: if an argument is not a finite number
    """
    raw = {
        'pain': pain,
        'pleasure_quantity': pleasure_quantity,
        'pleasure_quality': pleasure_quality,
    }
    for name, value in raw.items():
        if not is_finite_number(value):
            raise InvalidInputError(
                f"{name} must be a finite number, got {value!r}",
                argument=name,
                value=value,
            )

    return Experience(
        pain=Pain(quantity=clamp_magnitude(pain)),
        pleasure=Pleasure(
            quantity=clamp_magnitude(pleasure_quantity),
            quality=clamp_magnitude(pleasure_quality),
        ),
    )


def _read(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        if name not in obj:
            raise InvalidExperienceError(f"This experience doesn't enter our model: missing '{name}'")
        return obj[name]
    if not hasattr(obj, name):
        raise InvalidExperienceError(f"This experience doesn't enter our model: missing '{name}'")
    return getattr(obj, name)


def _read_quantity(obj: Any, path: str) -> float:
    value = obj
    for part in path.split('.'):
        value = _read(value, part)
    if not is_finite_number(value):
        raise InvalidExperienceError(f"This experience doesn't enter our model: '{path}' is {value!r}")
    return value


def compute_well_being(experience: Any) -> float:
    """
    Compute the well-being score of one experience.

    Any value shaped like an Experience is accepted: an object exposing
    pain.quantity, pleasure.quantity and pleasure.quality, or a nested
    mapping with the same keys. Values are scored as given.

    Args:
        experience: Experience (or anything with the same shape)

    Returns:
        Well-being score; pleasure.quality when pleasure dominates,
        otherwise pleasure.quantity - pain.quantity (<= 0)

    Raises:
        InvalidExperienceError: if the shape is not an experience
    """
    pain_quantity = _read_quantity(experience, 'pain.quantity')
    pleasure_quantity = _read_quantity(experience, 'pleasure.quantity')
    pleasure_quality = _read_quantity(experience, 'pleasure.quality')

    if pleasure_quantity > pain_quantity:
        return pleasure_quality

    # A tie is neutral: an experience that increases neither side doesn't
    # affect well-being.
    return pleasure_quantity - pain_quantity


def classify_well_being(score: float) -> WellBeingVerdict:
    """
    Convert a well-being score to a verdict category.

    Thresholds:
        W > 0  -> POSITIVE
        W == 0 -> NEUTRAL
        W < 0  -> NEGATIVE
    """
    if score > NEUTRAL_WELL_BEING:
        return WellBeingVerdict.POSITIVE
    elif score == NEUTRAL_WELL_BEING:
        return WellBeingVerdict.NEUTRAL
    else:
        return WellBeingVerdict.NEGATIVE
