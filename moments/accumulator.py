"""
Single-pass moment accumulator — running mean, variance, min and max.

Uses Welford's recurrence so that long streams with large offsets do not lose
precision the way a naive sum / sum-of-squares would:

    new_mean = mean + (x - mean) / n
    m2      += (x - mean) * (x - new_mean)

The factor ordering (old mean first, new mean second) matters; do not fold it
into (x - mean)**2.

Accumulators are mergeable (Chan et al.), which is also how add_n() imports a
pre-aggregated block of identical observations.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable

import pandas as pd

from core.errors import InvalidParameterError

logger = logging.getLogger(__name__)


class MomentAccumulator:
    """
    Running mean / variance / min / max over a stream of floats.

    Policy for small counts:
      count == 0  -> mean, pvar, svar are NaN; max = -inf, min = +inf
      count == 1  -> pvar and svar are NaN (a single point says nothing about spread)

    Usage:
        acc = MomentAccumulator()
        for x in stream:
            acc.add(x)
        acc.mean(), acc.svar(), acc.max()
    """

    __slots__ = ("_n", "_m", "_s", "_max", "_min")

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self._n = 0
        self._m = 0.0
        self._s = 0.0
        self._max = -math.inf
        self._min = math.inf

    def __repr__(self) -> str:
        return (
            f"MomentAccumulator(n={self._n}, mean={self.mean():.6g}, "
            f"svar={self.svar():.6g}, min={self._min:.6g}, max={self._max:.6g})"
        )

    @property
    def count(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n

    @property
    def m2(self) -> float:
        """Sum of squared deviations from the mean (Welford's M2)."""
        return self._s

    def add(self, x: float) -> None:
        x = float(x)
        self._n += 1
        if self._n == 1:
            self._m = x
            self._max = x
            self._min = x
            return
        if self._max < x:
            self._max = x
        if self._min > x:
            self._min = x

        m = self._m + (x - self._m) / self._n
        self._s += (x - self._m) * (x - m)
        self._m = m

    def extend(self, xs: Iterable[float]) -> None:
        for x in xs:
            self.add(x)

    def add_n(self, n: int, x: float) -> None:
        """
        Import a block of identical observations ending at absolute count n.

        The block holds i = n - count copies of x. This is Chan's merge with a
        zero-spread block B (n_b = i, mean_b = x, m2_b = 0):

            delta  = x - mean
            mean' = mean + i * delta / n
            m2'   = m2 + delta**2 * count * i / n
                  = m2 + i * (x - mean) * (x - mean')

        so the incremental form below is exact, not an approximation.
        """
        n = int(n)
        x = float(x)
        if self._n == 0:
            if n <= 0:
                raise InvalidParameterError(f"add_n needs a positive count, got {n}")
            self._n = n
            self._m = x
            self._s = 0.0
            self._max = x
            self._min = x
            return
        if n <= self._n:
            raise InvalidParameterError(
                f"add_n count must exceed the current count {self._n}, got {n}"
            )
        if self._max < x:
            self._max = x
        if self._min > x:
            self._min = x

        i = float(n - self._n)
        m = self._m + (i * x - i * self._m) / n
        self._s += i * (x - self._m) * (x - m)
        self._m = m
        self._n = n
        logger.debug("merged block of %d observations at %r", int(i), x)

    def merge(self, other: "MomentAccumulator") -> None:
        """Fold another accumulator into this one (Chan et al. parallel update)."""
        if other._n == 0:
            return
        if self._n == 0:
            self._n, self._m, self._s = other._n, other._m, other._s
            self._max, self._min = other._max, other._min
            return

        n = self._n + other._n
        delta = other._m - self._m
        self._s += other._s + delta * delta * self._n * other._n / n
        self._m += delta * other._n / n
        self._n = n
        self._max = max(self._max, other._max)
        self._min = min(self._min, other._min)

    def copy(self) -> "MomentAccumulator":
        acc = MomentAccumulator()
        acc._n, acc._m, acc._s = self._n, self._m, self._s
        acc._max, acc._min = self._max, self._min
        return acc

    def max(self) -> float:
        return self._max

    def min(self) -> float:
        return self._min

    def mean(self) -> float:
        if self._n == 0:
            return math.nan
        return self._m

    def pvar(self) -> float:
        """Population variance s/n. NaN for fewer than two observations."""
        if self._n <= 1:
            return math.nan
        return self._s / self._n

    def svar(self) -> float:
        """Sample variance s/(n-1). NaN for fewer than two observations."""
        if self._n <= 1:
            return math.nan
        return self._s / (self._n - 1)

    def pstd(self) -> float:
        return math.sqrt(self.pvar())

    def sstd(self) -> float:
        return math.sqrt(self.svar())

    def summary(self) -> pd.Series:
        """Return the current statistics as a labeled pandas Series."""
        return pd.Series({
            "count": self._n,
            "mean": self.mean(),
            "min": self._min,
            "max": self._max,
            "pvar": self.pvar(),
            "svar": self.svar(),
            "pstd": self.pstd(),
            "sstd": self.sstd(),
        })
