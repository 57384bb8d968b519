"""
Poisson distribution.

Models the number of arrivals in a fixed interval when inter-arrival times are
exponential with the same rate.
"""

from __future__ import annotations

import math

from core.random_source import RandomSource
from core.utils import require_positive

from .base import Distribution


class Poisson(Distribution):
    """
    Poisson counts with mean lambda, drawn with the multiplicative method.

    Multiplies uniform draws until the product falls to e^-lambda or below;
    the count is the number of factors minus one. The product is tracked in
    log space (sum of -log u against lambda) so large rates do not underflow.
    Expected cost grows linearly with lambda.
    """

    def __init__(self, source: RandomSource, rate: float):
        super().__init__(source)
        self.rate = require_positive("rate", rate)

    def __str__(self) -> str:
        return f"poisson [{self.rate}]"

    def sample(self) -> int:
        s = 0.0
        k = -1
        while s < self.rate:
            u = self._source.uniform_float()
            k += 1
            if u <= 0.0:
                break
            s -= math.log(u)
        return k

    def mean(self) -> float:
        return self.rate

    def var(self) -> float:
        return self.rate

    def std(self) -> float:
        return math.sqrt(self.rate)
