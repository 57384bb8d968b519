from __future__ import annotations

from typing import Iterable, List

import pytest

from core.random_source import NumpyRandomSource


class ScriptedSource:
    """Replays a fixed list of uniform draws (cycling), for exact sampling tests."""

    def __init__(self, uniforms: Iterable[float], ints: Iterable[int] = (0,)):
        self.uniforms: List[float] = list(uniforms)
        self.ints: List[int] = list(ints)
        self._u = 0
        self._i = 0

    def uniform_float(self) -> float:
        u = self.uniforms[self._u % len(self.uniforms)]
        self._u += 1
        return u

    def uniform_int(self, n: int) -> int:
        v = self.ints[self._i % len(self.ints)] % n
        self._i += 1
        return v


@pytest.fixture
def source() -> NumpyRandomSource:
    return NumpyRandomSource(seed=7)


@pytest.fixture
def scripted():
    return ScriptedSource
