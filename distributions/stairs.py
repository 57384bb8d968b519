"""
Staircase — discrete distribution over indices 0..k-1 given cumulative thresholds.

Given the thresholds

    [0.0, 0.3, 0.6, 0.6, 0.9]

picture the step function (indices 0..4):

                     .
           .____.____|
      .____|
 .____|
 0   0.3  0.6  0.6  0.9
 0    1    2    3    4

Thresholds are divided by the last one, so [0, 3, 6, 6, 9] describes the same
distribution. The mass at index i is the rise of step i: indices 0 and 3 have
no mass, indices 1, 2 and 4 each have 1/3.

Thresholds must be non-decreasing and the last one positive.
"""

from __future__ import annotations

import bisect
import math
from typing import List, Sequence

from core.errors import InvalidParameterError
from core.random_source import RandomSource

from .base import InvertibleDistribution


class Staircase(InvertibleDistribution):
    """
    Draw index i with probability normalized[i] - normalized[i-1].

    Usage:
        stairs = Staircase(source, [1, 3, 6])
        stairs.sample()    # 0 w.p. 1/6, 1 w.p. 2/6, 2 w.p. 3/6
    """

    def __init__(self, source: RandomSource, thresholds: Sequence[float]):
        super().__init__(source)
        p = [float(x) for x in thresholds]
        if not p:
            raise InvalidParameterError("list of thresholds cannot be empty")

        prev = 0.0
        for x in p:
            if math.isnan(x) or x < prev:
                raise InvalidParameterError(
                    f"thresholds must be non-negative and monotonically non-decreasing: {p}"
                )
            prev = x
        denom = p[-1]
        if not denom > 0 or math.isinf(denom):
            raise InvalidParameterError(f"last threshold must be positive and finite, got {denom}")

        self._p: List[float] = [x / denom for x in p]
        self._z = len(p) - 1

    def __str__(self) -> str:
        return f"discrete stairs {self._p}"

    def __len__(self) -> int:
        return len(self._p)

    @property
    def thresholds(self) -> List[float]:
        """Normalized thresholds; the last one is exactly 1.0."""
        return list(self._p)

    def _index_above(self, u: float) -> int:
        # smallest i with p[i] > u, clamped to the last index
        return min(bisect.bisect_right(self._p, u), self._z)

    def sample(self) -> int:
        return self._index_above(self._source.uniform_float())

    def pmf(self, x: int) -> float:
        """
        Probability MASS at index x (not cumulative).

        0 outside [0, k-1]; p[0] at index 0; p[x] - p[x-1] otherwise.
        """
        if x < 0 or x > self._z:
            return 0.0
        if x == 0:
            return self._p[0]
        return self._p[x] - self._p[x - 1]

    def cdf(self, x: int) -> float:
        """Cumulative probability of drawing an index <= x."""
        if x < 0:
            return 0.0
        if x >= self._z:
            return 1.0
        return self._p[x]

    def quantile(self, p: float) -> int:
        """Smallest index whose normalized threshold exceeds p."""
        if p < 0.0:
            return 0
        if p >= 1.0:
            return self._z
        return self._index_above(p)

    def weights(self) -> List[float]:
        """Probability mass of every index, in order."""
        return [self.pmf(i) for i in range(len(self._p))]

    def mean(self) -> float:
        mean = 0.0
        for i in range(1, len(self._p)):
            mean += i * (self._p[i] - self._p[i - 1])
        return mean
