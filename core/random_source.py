"""
Random sources — the only place randomness enters the toolkit.

A distribution never builds its own generator: it is handed a source at
construction and keeps it for its lifetime. Two distributions built on two
sources seeded identically therefore produce identical draws.

Mandatory primitives:
    uniform_float() -> float in [0, 1)
    uniform_int(n)  -> int in [0, n)

Optional accelerated primitives (used when present, inversion otherwise):
    normal_float()      -> float ~ N(0, 1)
    exponential_float() -> float ~ Exp(1)

Sources are not thread-safe; share one across threads only behind a lock.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

import numpy as np

from .errors import InvalidParameterError


@runtime_checkable
class RandomSource(Protocol):
    def uniform_float(self) -> float:
        ...

    def uniform_int(self, n: int) -> int:
        ...


class NumpyRandomSource:
    """
    RandomSource backed by a numpy Generator (PCG64 by default).

    Usage:
        source = NumpyRandomSource(seed=42)
        exp = Exponential(source, rate=2.0)
    """

    def __init__(self, seed: Optional[int] = None, generator: Optional[np.random.Generator] = None):
        if generator is not None and seed is not None:
            raise InvalidParameterError("Provide seed OR generator, not both.")
        self.seed = seed
        self.rng = generator if generator is not None else np.random.default_rng(seed)

    def __repr__(self) -> str:
        return f"NumpyRandomSource(seed={self.seed!r})"

    def uniform_float(self) -> float:
        return float(self.rng.random())

    def uniform_int(self, n: int) -> int:
        if n <= 0:
            raise InvalidParameterError(f"uniform_int needs a positive bound, got {n}")
        return int(self.rng.integers(0, n))

    def normal_float(self) -> float:
        return float(self.rng.standard_normal())

    def exponential_float(self) -> float:
        return float(self.rng.standard_exponential())


class UniformOnlySource:
    """Restrict another source to the two mandatory primitives."""

    def __init__(self, source: RandomSource):
        self._source = require_source(source)

    def __repr__(self) -> str:
        return f"UniformOnlySource({self._source!r})"

    def uniform_float(self) -> float:
        return self._source.uniform_float()

    def uniform_int(self, n: int) -> int:
        return self._source.uniform_int(n)


def require_source(source: Any) -> RandomSource:
    if source is None:
        raise InvalidParameterError("random source cannot be None")
    if not isinstance(source, RandomSource):
        raise InvalidParameterError(
            f"{type(source).__name__} does not provide uniform_float() and uniform_int(n)"
        )
    return source


def has_normal(source: RandomSource) -> bool:
    return callable(getattr(source, "normal_float", None))


def has_exponential(source: RandomSource) -> bool:
    return callable(getattr(source, "exponential_float", None))
