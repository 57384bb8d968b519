"""
MomentTracker — records how the running mean and variance evolve over time.

Each add(t, x) feeds an internal MomentAccumulator and snapshots
(t, count, mean, m2). Variance histories divide each snapshot by the count it
was taken at, so early entries reflect the data seen so far rather than the
final count.
"""

from __future__ import annotations

import math
from typing import List

import pandas as pd

from series import Series

from .accumulator import MomentAccumulator


class MomentTracker:
    def __init__(self) -> None:
        self._acc = MomentAccumulator()
        self._times: List[int] = []
        self._counts: List[int] = []
        self._means: List[float] = []
        self._m2s: List[float] = []

    def __len__(self) -> int:
        return len(self._times)

    @property
    def accumulator(self) -> MomentAccumulator:
        """Copy of the current accumulator state."""
        return self._acc.copy()

    def add(self, t: int, x: float) -> None:
        self._acc.add(x)
        self._times.append(int(t))
        self._counts.append(self._acc.count)
        self._means.append(self._acc.mean())
        self._m2s.append(self._acc.m2)

    def times(self) -> List[int]:
        return list(self._times)

    def means(self) -> Series:
        return Series(self._means)

    def _scaled(self, offset: int, root: bool) -> Series:
        out = Series()
        for n, m2 in zip(self._counts, self._m2s):
            v = m2 / (n - offset) if n > 1 else math.nan
            out.append(math.sqrt(v) if root else v)
        return out

    def pvars(self) -> Series:
        return self._scaled(0, root=False)

    def svars(self) -> Series:
        return self._scaled(1, root=False)

    def pstds(self) -> Series:
        return self._scaled(0, root=True)

    def sstds(self) -> Series:
        return self._scaled(1, root=True)

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame({
            "t": self._times,
            "count": self._counts,
            "mean": self._means,
            "pvar": self.pvars(),
            "svar": self.svars(),
        })
