"""
Rounding adapters — turn a continuous distribution into a discrete one.

  floored(d)  truncation toward zero: -7.5 -> -7
  ceiled(d)   x when x is already integral, otherwise the next integer up
  rounded(d)  round half up: floor(x + 0.5)
"""

from __future__ import annotations

import enum
import math

from core.errors import InvalidParameterError

from .base import Distribution


class RoundingMode(enum.Enum):
    FLOOR = "floor"
    CEIL = "ceil"
    ROUND = "round"


def _convert(mode: RoundingMode, x: float) -> int:
    if mode is RoundingMode.FLOOR:
        return math.trunc(x)
    if mode is RoundingMode.CEIL:
        return math.ceil(x)
    return math.floor(x + 0.5)


class Rounded(Distribution):
    """Stateless transform of each draw of the inner distribution to an int."""

    def __init__(self, inner: Distribution, mode: RoundingMode):
        if not isinstance(inner, Distribution):
            raise InvalidParameterError(f"cannot round {type(inner).__name__}, need a Distribution")
        self._source = inner.source
        self.inner = inner
        self.mode = RoundingMode(mode)

    def __str__(self) -> str:
        return f"{self.mode.value} of {self.inner}"

    def sample(self) -> int:
        return _convert(self.mode, self.inner.sample())


def floored(inner: Distribution) -> Rounded:
    return Rounded(inner, RoundingMode.FLOOR)


def ceiled(inner: Distribution) -> Rounded:
    return Rounded(inner, RoundingMode.CEIL)


def rounded(inner: Distribution) -> Rounded:
    return Rounded(inner, RoundingMode.ROUND)
