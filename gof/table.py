"""
Approximate lookup tables for distributions not worth implementing exactly
(e.g. chi-squared critical values).
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np
import pandas as pd

from core.errors import InvalidParameterError


class ApproxTable:
    """
    Rectangular grid of values indexed by two sorted axes.

    value(r, c) looks up the nearest row key and the nearest column key
    independently; on a tie the earlier key wins.
    """

    def __init__(self, rows: Sequence[float], cols: Sequence[float], table: Sequence[Sequence[float]]):
        n, m = len(rows), len(cols)
        if n == 0 or m == 0:
            raise InvalidParameterError("table needs at least one row key and one column key")
        if len(table) != n:
            raise InvalidParameterError(f"table does not have {n} rows (got {len(table)})")
        for i, xs in enumerate(table):
            if len(xs) != m:
                raise InvalidParameterError(
                    f"table row {i} does not have {m} columns (got {len(xs)})"
                )

        self._rows = np.asarray(rows, dtype=float)
        self._cols = np.asarray(cols, dtype=float)
        self._table = np.asarray(table, dtype=float)
        self._table.setflags(write=False)

    @property
    def shape(self) -> tuple:
        return self._table.shape

    @property
    def rows(self) -> List[float]:
        return self._rows.tolist()

    @property
    def cols(self) -> List[float]:
        return self._cols.tolist()

    @staticmethod
    def _closest(keys: np.ndarray, y: float) -> int:
        # argmin returns the first index among equal distances
        return int(np.argmin(np.abs(keys - y)))

    def value(self, r: float, c: float) -> float:
        return float(self._table[self._closest(self._rows, r), self._closest(self._cols, c)])

    @classmethod
    def from_frame(cls, frame: pd.DataFrame) -> "ApproxTable":
        """Build from a DataFrame whose index holds row keys and columns hold column keys."""
        return cls(
            [float(r) for r in frame.index],
            [float(c) for c in frame.columns],
            frame.to_numpy(dtype=float).tolist(),
        )

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self._table, index=self._rows, columns=self._cols)
