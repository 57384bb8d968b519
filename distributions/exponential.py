"""Exponential and hyper-exponential (mixture of exponentials) distributions."""

from __future__ import annotations

import math
from typing import List, Sequence

from core.errors import InvalidParameterError
from core.random_source import RandomSource
from core.utils import require_positive

from .base import Distribution, InvertibleDistribution
from .stairs import Staircase
from .variates import standard_exponential


class Exponential(InvertibleDistribution):
    """Exponential distribution with arrival rate lambda (mean 1/lambda)."""

    def __init__(self, source: RandomSource, rate: float):
        super().__init__(source)
        self.rate = require_positive("rate", rate)

    def __str__(self) -> str:
        return f"exponential [{self.rate}]"

    def sample(self) -> float:
        return standard_exponential(self._source) / self.rate

    def cdf(self, x: float) -> float:
        if x < 0:
            return 0.0
        return -math.expm1(-self.rate * x)

    def quantile(self, p: float) -> float:
        if p < 0:
            return 0.0
        if p >= 1:
            return math.inf
        return -math.log1p(-p) / self.rate

    def mean(self) -> float:
        return 1.0 / self.rate

    def var(self) -> float:
        return 1.0 / (self.rate * self.rate)

    def std(self) -> float:
        return 1.0 / self.rate


class HyperExponential(Distribution):
    """
    Mixture of k exponentials.

    A branch i is chosen through a Staircase over probs, then an exponential
    variate with rate rates[i] is drawn. probs follow Staircase rules: they are
    cumulative, non-decreasing thresholds, normalized by the last one.

    Usage:
        # 30% fast arrivals (rate 10), 70% slow (rate 1)
        h = HyperExponential(source, probs=[0.3, 1.0], rates=[10.0, 1.0])
    """

    def __init__(self, source: RandomSource, probs: Sequence[float], rates: Sequence[float]):
        super().__init__(source)
        if len(probs) != len(rates):
            raise InvalidParameterError(
                f"probs and rates must have the same length ({len(probs)} != {len(rates)})"
            )
        self.rates: List[float] = [require_positive("rate", r) for r in rates]
        # the staircase draws from the same source as the exponential
        self.stairs = Staircase(self._source, probs)

    def __str__(self) -> str:
        return f"hyper-exponential {self.rates}"

    def sample(self) -> float:
        branch = self.stairs.sample()
        return standard_exponential(self._source) / self.rates[branch]

    def weights(self) -> List[float]:
        return self.stairs.weights()

    def mean(self) -> float:
        return sum(w / r for w, r in zip(self.weights(), self.rates))

    def second_moment(self) -> float:
        return sum(2.0 * w / (r * r) for w, r in zip(self.weights(), self.rates))

    def var(self) -> float:
        m = self.mean()
        return self.second_moment() - m * m

    def std(self) -> float:
        return math.sqrt(self.var())
