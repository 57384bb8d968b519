from __future__ import annotations

from typing import Optional

from core.random_source import RandomSource

from .base import Distribution


class Null(Distribution):
    """Degenerate distribution: every query returns 0. Needs no random source."""

    def __init__(self, source: Optional[RandomSource] = None):
        self._source = source

    def __str__(self) -> str:
        return "null"

    def sample(self) -> float:
        return 0.0

    def mean(self) -> float:
        return 0.0

    def var(self) -> float:
        return 0.0

    def std(self) -> float:
        return 0.0
