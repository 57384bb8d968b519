"""Continuous and discrete uniform distributions."""

from __future__ import annotations

import math

from core.errors import InvalidParameterError
from core.random_source import RandomSource

from .base import InvertibleDistribution


class Uniform(InvertibleDistribution):
    """Uniform on [a, b]. Bounds given in reverse order are swapped."""

    def __init__(self, source: RandomSource, a: float, b: float):
        super().__init__(source)
        a, b = float(a), float(b)
        if a == b or not (math.isfinite(a) and math.isfinite(b)):
            raise InvalidParameterError(f"uniform needs distinct finite bounds, got [{a}, {b}]")
        if b < a:
            a, b = b, a
        self.a = a
        self.b = b

    def __str__(self) -> str:
        return f"uniform [{self.a} {self.b}]"

    def sample(self) -> float:
        # inversion
        return self.quantile(self._source.uniform_float())

    def cdf(self, x: float) -> float:
        if x < self.a:
            return 0.0
        if x > self.b:
            return 1.0
        return (x - self.a) / (self.b - self.a)

    def quantile(self, p: float) -> float:
        if p < 0:
            return self.a
        if p >= 1:
            return self.b
        return p * (self.b - self.a) + self.a

    def mean(self) -> float:
        return self.quantile(0.5)

    def var(self) -> float:
        return (self.b - self.a) ** 2 / 12.0

    def std(self) -> float:
        return math.sqrt(self.var())


class UniformDiscrete(InvertibleDistribution):
    """
    Integers uniform on [a, b). Drawn with the source's integer primitive, not inversion.

    cdf(x) is the probability of drawing a value strictly below x, which for
    integer x in [a, b] is (x - a) / (b - a).
    """

    def __init__(self, source: RandomSource, a: int, b: int):
        super().__init__(source)
        a, b = int(a), int(b)
        if a == b:
            raise InvalidParameterError(f"discrete uniform needs a != b, got [{a}, {b})")
        if b < a:
            a, b = b, a
        self.a = a
        self.b = b

    def __str__(self) -> str:
        return f"discrete uniform [{self.a} {self.b}]"

    def sample(self) -> int:
        return self._source.uniform_int(self.b - self.a) + self.a

    def cdf(self, x: float) -> float:
        if x < self.a:
            return 0.0
        if x > self.b:
            return 1.0
        return (x - self.a) / (self.b - self.a)

    def quantile(self, p: float) -> int:
        if p < 0:
            return self.a
        if p > 1:
            return self.b
        return math.floor(p * (self.b - self.a) + self.a)

    def mean(self) -> float:
        # mean of a, a+1, ..., b-1
        return (self.a + self.b - 1) / 2.0

    def var(self) -> float:
        k = self.b - self.a
        return (k * k - 1) / 12.0
