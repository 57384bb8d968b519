"""
Error types shared by every package.

Construction problems and contract violations are programming errors and are
raised loudly. Degenerate statistics (too few samples, zero spread) are NOT
errors: they come back as NaN or infinity.
"""

from __future__ import annotations


class StatError(Exception):
    """Base class for all toolkit errors."""


class InvalidParameterError(StatError, ValueError):
    """A distribution, table or config was constructed with unusable parameters."""


class LengthMismatchError(StatError, ValueError):
    """Two series passed to a binary operation do not have the same length."""

    def __init__(self, left: int, right: int):
        super().__init__(f"series lengths must be the same (got {left} and {right})")
        self.left = left
        self.right = right


class EmptySeriesError(StatError, ValueError):
    """An operation that needs at least one element received an empty series."""


class UnsatisfiableFilterError(StatError, RuntimeError):
    """A capped pass filter ran out of attempts without accepting a draw."""

    def __init__(self, attempts: int, description: str):
        super().__init__(
            f"{description}: no acceptable draw after {attempts} attempts"
        )
        self.attempts = attempts
