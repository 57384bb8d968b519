"""
Pass filters — rejection sampling over any continuous distribution.

A filter redraws from the wrapped distribution until the draw satisfies its
bound(s):

  lowpass(d, high)       accepts x <= high
  highpass(d, low)       accepts x >= low
  midpass(d, low, high)  accepts low <= x <= high

WARNING: by default there is no cap on the number of redraws. If the accepted
range carries (almost) no probability under the wrapped distribution, sample()
may never return. Pass max_attempts to turn that into an
UnsatisfiableFilterError instead.
"""

from __future__ import annotations

import enum
import logging
import math
from typing import Optional

from core.errors import InvalidParameterError, UnsatisfiableFilterError

from .base import Distribution

logger = logging.getLogger(__name__)


class PassKind(enum.Enum):
    LOW = "lowpass"
    HIGH = "highpass"
    BAND = "midpass"


class PassFilter(Distribution):
    """Wrapper that rejects draws of the inner distribution outside [low, high]."""

    def __init__(
        self,
        inner: Distribution,
        kind: PassKind,
        *,
        low: float = -math.inf,
        high: float = math.inf,
        max_attempts: Optional[int] = None,
    ):
        if not isinstance(inner, Distribution):
            raise InvalidParameterError(f"cannot filter {type(inner).__name__}, need a Distribution")
        if math.isnan(low) or math.isnan(high):
            raise InvalidParameterError("filter bounds cannot be NaN")
        if low > high:
            raise InvalidParameterError(f"empty pass band: low={low} > high={high}")
        if max_attempts is not None and max_attempts <= 0:
            raise InvalidParameterError(f"max_attempts must be positive or None, got {max_attempts}")

        self._source = inner.source
        self.inner = inner
        self.kind = kind
        self.low = float(low)
        self.high = float(high)
        self.max_attempts = max_attempts

    def __str__(self) -> str:
        return f"{self.kind.value} [{self.low} {self.high}] of {self.inner}"

    def accepts(self, x: float) -> bool:
        return self.low <= x <= self.high

    def sample(self) -> float:
        x = self.inner.sample()
        attempts = 1
        while not self.accepts(x):
            if self.max_attempts is not None and attempts >= self.max_attempts:
                logger.warning("%s gave up after %d attempts", self, attempts)
                raise UnsatisfiableFilterError(attempts, str(self))
            x = self.inner.sample()
            attempts += 1
        return x


def lowpass(inner: Distribution, high: float, *, max_attempts: Optional[int] = None) -> PassFilter:
    return PassFilter(inner, PassKind.LOW, high=high, max_attempts=max_attempts)


def highpass(inner: Distribution, low: float, *, max_attempts: Optional[int] = None) -> PassFilter:
    return PassFilter(inner, PassKind.HIGH, low=low, max_attempts=max_attempts)


def midpass(
    inner: Distribution, low: float, high: float, *, max_attempts: Optional[int] = None
) -> PassFilter:
    return PassFilter(inner, PassKind.BAND, low=low, high=high, max_attempts=max_attempts)
