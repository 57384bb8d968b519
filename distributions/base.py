"""
Base classes for distributions.

Every distribution is bound to exactly one random source at construction and
its parameters never change afterwards. Sampling mutates the source, so an
instance is single-threaded unless its source is synchronized.

Two capabilities:
  Distribution            — sample(), samples(n)
  InvertibleDistribution  — adds cdf(x) = P(X <= x) and quantile(p), the inverse CDF
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Union

from core.errors import InvalidParameterError
from core.random_source import RandomSource, require_source
from series import Series

Number = Union[int, float]


class Distribution(ABC):
    """Interface for anything that produces random variates."""

    def __init__(self, source: RandomSource):
        self._source = require_source(source)

    @property
    def source(self) -> RandomSource:
        return self._source

    @abstractmethod
    def sample(self) -> Number:
        raise NotImplementedError

    def samples(self, n: int) -> Series:
        """Draw n variates in order into a new Series."""
        if n < 0:
            raise InvalidParameterError(f"sample count must be non-negative, got {n}")
        return Series(self.sample() for _ in range(n))

    def __str__(self) -> str:
        return type(self).__name__.lower()


class InvertibleDistribution(Distribution):
    """Distribution with closed-form CDF and inverse CDF."""

    @abstractmethod
    def cdf(self, x: float) -> float:
        raise NotImplementedError

    @abstractmethod
    def quantile(self, p: float) -> float:
        raise NotImplementedError


def probability_between(dist: InvertibleDistribution, a: float, b: float) -> float:
    """Probability that a draw lands in (a, b], i.e. cdf(b) - cdf(a). Requires a <= b."""
    if b < a:
        raise InvalidParameterError(f"interval is reversed: a={a} > b={b}")
    return dist.cdf(b) - dist.cdf(a)
