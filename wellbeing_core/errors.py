"""
Well-Being Core - Exceptions

Structural errors raised by the evaluators. Rejected desires are not
errors: they come back as a DesireVerdict.
"""

from typing import Any, Optional, Sequence


class WellBeingError(Exception):
    """Base exception for well-being core errors."""
    pass


class InvalidInputError(WellBeingError, TypeError):
    """A raw experience value is not a finite number."""
    def __init__(self, message: str, argument: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.argument = argument
        self.value = value


class InvalidExperienceError(WellBeingError, TypeError):
    """The value handed to compute_well_being() doesn't enter our model."""
    pass


class InvalidNeedsError(WellBeingError, ValueError):
    """A needs mapping lacks a basic need or holds an out-of-range value."""
    def __init__(
        self,
        message: str,
        missing: Sequence[str] = (),
        key: Optional[str] = None,
    ):
        super().__init__(message)
        self.missing = tuple(missing)
        self.key = key


class InvalidStateError(WellBeingError, ValueError):
    """Affected third-party sequences of a state of the world don't pair up."""
    pass
