"""
Normal and log-normal distributions.

The CDF and inverse CDF come from scipy.special (ndtr / ndtri).
"""

from __future__ import annotations

import math

from scipy.special import ndtr, ndtri

from core.errors import InvalidParameterError
from core.random_source import RandomSource
from core.utils import require_positive

from .base import InvertibleDistribution
from .variates import standard_normal


class Normal(InvertibleDistribution):
    """Normal distribution with mean and standard deviation."""

    def __init__(self, source: RandomSource, mean: float, std: float):
        super().__init__(source)
        mean = float(mean)
        if not math.isfinite(mean):
            raise InvalidParameterError(f"mean must be finite, got {mean}")
        self._mean = mean
        self._std = require_positive("std", std)

    def __str__(self) -> str:
        return f"normal [μ={self._mean:f} σ={self._std:f}]"

    def sample(self) -> float:
        return standard_normal(self._source) * self._std + self._mean

    def cdf(self, x: float) -> float:
        return float(ndtr(self.z(x)))

    def quantile(self, p: float) -> float:
        if p <= 0:
            return -math.inf
        if p >= 1:
            return math.inf
        return self._mean + self._std * float(ndtri(p))

    def mean(self) -> float:
        return self._mean

    def var(self) -> float:
        return self._std * self._std

    def std(self) -> float:
        return self._std

    def z(self, x: float) -> float:
        """Standard score (x - mean) / std."""
        return (x - self._mean) / self._std


class LogNormal(InvertibleDistribution):
    """
    Log-normal distribution parameterized by the mean and std of the variable ITSELF.

    The underlying normal's parameters are solved from the target mean m and
    std s:

        mu    = ln(m**2 / sqrt(m**2 + s**2))
        sigma = sqrt(ln((m**2 + s**2) / m**2))

    and a draw is exp(N(0,1) * sigma + mu).

    See:
      http://stackoverflow.com/questions/23699738
      http://blogs.sas.com/content/iml/2014/06/04/simulate-lognormal-data-with-specified-mean-and-variance.html
    """

    def __init__(self, source: RandomSource, mean: float, std: float):
        super().__init__(source)
        m = require_positive("mean", mean)
        s = require_positive("std", std)
        self._target_mean = m
        self._target_std = s

        m2, s2 = m * m, s * s
        self.mu = math.log(m2 / math.sqrt(m2 + s2))
        self.sigma = math.sqrt(math.log((m2 + s2) / m2))

    def __str__(self) -> str:
        return f"lognormal [μ={self.mu:f} σ={self.sigma:f}]"

    def sample(self) -> float:
        return math.exp(standard_normal(self._source) * self.sigma + self.mu)

    def cdf(self, x: float) -> float:
        if x <= 0:
            return 0.0
        return float(ndtr(self.z(x)))

    def quantile(self, p: float) -> float:
        if p <= 0:
            return 0.0
        if p >= 1:
            return math.inf
        return math.exp(self.mu + self.sigma * float(ndtri(p)))

    def mean(self) -> float:
        return self._target_mean

    def var(self) -> float:
        return self._target_std * self._target_std

    def std(self) -> float:
        return self._target_std

    def z(self, x: float) -> float:
        """Standard score on the log scale, (ln x - mu) / sigma."""
        return (math.log(x) - self.mu) / self.sigma
