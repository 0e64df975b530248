"""
Errors raised by the calculation helpers.

Only the randomized floating helpers raise; the combat formulas return
boundary values instead.
"""

__all__ = [
    "CalculationError",
    "InvalidArgumentError",
    "NullReferenceError",
]


class CalculationError(Exception):
    """Base class for all calculation errors."""


class InvalidArgumentError(CalculationError, ValueError):
    """A range, percentage, bound or direction is out of range."""

    def __init__(self, message: str, value=None):
        super().__init__(message)
        self.value = value


class NullReferenceError(CalculationError, TypeError):
    """A required argument was None."""
