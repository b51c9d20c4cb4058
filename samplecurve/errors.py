"""
Errors raised while building an interpolant.

Every error is raised at construction time; a successfully built interpolant
never fails for a finite parameter.
"""

from typing import Any, Optional


class InterpolationError(ValueError):
    """Base class for interpolant construction errors."""


class InvalidConfiguration(InterpolationError):
    """An option has an unrecognized name or an unusable value."""

    def __init__(self, option: str, value: Any, reason: Optional[str] = None):
        self.option = option
        self.value = value
        message = f"Invalid value for option {option!r}: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InsufficientSamples(InterpolationError):
    """Fewer than two samples were provided."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"At least 2 samples are required, got {count}")


class UnsupportedElementType(InterpolationError):
    """A sample is neither a real number nor a numeric vector."""

    def __init__(self, element: Any, reason: Optional[str] = None):
        self.element = element
        message = f"Unsupported sample element {element!r} of type {type(element).__name__}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
