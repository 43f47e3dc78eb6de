"""
Well-Being Core - Normative Calculations

Scores a subject's momentary well-being from pain and pleasure
(qualitative hedonism) and validates desires, i.e. transitions between
two states of the world, through the existence, rationality and
reasonableness tests.

Both evaluators are pure functions over immutable value objects.
"""

from .parameters import (
    EXPERIENCE_LIMIT,
    NEUTRAL_WELL_BEING,
    BASIC_NEEDS,
    BASIC_NEEDS_DEFAULT,
    NEED_MIN,
    NEED_MAX,
    NEED_DEFAULT,
    NeedRange,
)

from .utils import (
    clip,
    clamp_magnitude,
)

from .errors import (
    WellBeingError,
    InvalidInputError,
    InvalidExperienceError,
    InvalidNeedsError,
    InvalidStateError,
)

from .experience import (
    Pain,
    Pleasure,
    Experience,
    WellBeingVerdict,
    make_experience,
    compute_well_being,
    classify_well_being,
)

from .needs import (
    default_needs,
    validate_needs,
    has_basic_needs,
    find_need_regression,
)

from .world import (
    StateOfTheWorld,
    is_state_of_the_world,
)

from .desire import (
    Gate,
    RejectionReason,
    DesireVerdict,
    Desire,
    is_valid_desire,
    is_rational_desire,
    is_reasonable_desire,
    evaluate_desire,
    evaluate_desires,
)

__all__ = [
    # Parameters
    'EXPERIENCE_LIMIT',
    'NEUTRAL_WELL_BEING',
    'BASIC_NEEDS',
    'BASIC_NEEDS_DEFAULT',
    'NEED_MIN',
    'NEED_MAX',
    'NEED_DEFAULT',
    'NeedRange',

    # Utilities
    'clip',
    'clamp_magnitude',

    # Errors
    'WellBeingError',
    'InvalidInputError',
    'InvalidExperienceError',
    'InvalidNeedsError',
    'InvalidStateError',

    # Experience evaluator
    'Pain',
    'Pleasure',
    'Experience',
    'WellBeingVerdict',
    'make_experience',
    'compute_well_being',
    'classify_well_being',

    # Needs model
    'default_needs',
    'validate_needs',
    'has_basic_needs',
    'find_need_regression',

    # States of the world
    'StateOfTheWorld',
    'is_state_of_the_world',

    # Desire validator
    'Gate',
    'RejectionReason',
    'DesireVerdict',
    'Desire',
    'is_valid_desire',
    'is_rational_desire',
    'is_reasonable_desire',
    'evaluate_desire',
    'evaluate_desires',
]

__version__ = '1.0.0'
