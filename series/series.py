"""
Series: an ordered, mutable sequence of floats, and batch statistics over it.

Every statistic is recomputed from scratch on each call; nothing is cached on
the series. Means and variances use the running (Welford) recurrence rather
than sum / len so that wide dynamic ranges keep their precision.

Edge policy, applied uniformly:
  - too few points for a statistic (variance, covariance, median) -> NaN
  - zero spread in a correlation -> IEEE-754 result (NaN or ±inf), no clamping
  - mismatched lengths, out-of-range head/tail, resizing an empty series
    -> exception (these are programming errors)
"""

from __future__ import annotations

import functools
import math
import numbers
from pathlib import Path
from typing import Callable, Iterable, Optional, TypeVar, Union

import numpy as np
import pandas as pd

from core.errors import EmptySeriesError, InvalidParameterError, LengthMismatchError
from core.utils import format_float, ieee_div, ieee_sqrt

from .io import write_file

T = TypeVar("T")


class Series(list):
    """
    Mutable ordered floats. Insertion order matters (lags, online recomputation).

    A Series behaves like a list of floats; slicing and copy() return new,
    independent Series. The statistics are available both as methods and as
    module-level functions:

        s = Series([1, 2, 3, 4, 5, 6])
        s.median()        # 3.5
        svar(s)           # same as s.svar()
    """

    def __init__(self, values: Iterable[float] = ()):
        super().__init__(float(x) for x in values)

    def __repr__(self) -> str:
        return f"Series({list.__repr__(self)})"

    def __str__(self) -> str:
        return "[" + " ".join(format_float(x) for x in self) + "]"

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Series(list.__getitem__(self, index))
        return list.__getitem__(self, index)

    def append(self, x: float) -> None:
        super().append(float(x))

    def extend(self, xs: Iterable[float]) -> None:
        super().extend(float(x) for x in xs)

    def reset(self) -> None:
        self.clear()

    def copy(self) -> "Series":
        return Series(self)

    # operators are elementwise, never list concatenation or repetition
    def _arith(self, other, binary, scalar) -> "Series":
        if isinstance(other, numbers.Real):
            return scalar(self, other)
        return binary(self, other)

    def __add__(self, other) -> "Series":
        return self._arith(other, add, add1)

    __radd__ = __add__
    __iadd__ = __add__

    def __sub__(self, other) -> "Series":
        return self._arith(other, sub, sub1)

    def __rsub__(self, other) -> "Series":
        if isinstance(other, numbers.Real):
            return add1(mul1(self, -1.0), other)
        return sub(other, self)

    def __mul__(self, other) -> "Series":
        return self._arith(other, mul, mul1)

    __rmul__ = __mul__
    __imul__ = __mul__

    def __truediv__(self, other) -> "Series":
        return self._arith(other, div, div1)

    def __rtruediv__(self, other) -> "Series":
        if isinstance(other, numbers.Real):
            return Series(ieee_div(other, x) for x in self)
        return div(other, self)

    def to_numpy(self) -> np.ndarray:
        return np.asarray(self, dtype=float)

    def to_pandas(self, name: Optional[str] = None) -> pd.Series:
        return pd.Series(list(self), dtype=float, name=name)

    def describe(self) -> pd.Series:
        """Summary statistics as a labeled pandas Series."""
        return pd.Series({
            "count": len(self),
            "mean": mean(self),
            "median": median(self),
            "min": minimum(self),
            "max": maximum(self),
            "svar": svar(self),
            "sstd": sstd(self),
            "pvar": pvar(self),
            "pstd": pstd(self),
        })

    def write_file(self, path: Union[str, Path]) -> Path:
        return write_file(self, path)

    def max(self) -> float:
        return maximum(self)

    def min(self) -> float:
        return minimum(self)

    def mean(self) -> float:
        return mean(self)

    def median(self) -> float:
        return median(self)

    def svar(self) -> float:
        return svar(self)

    def pvar(self) -> float:
        return pvar(self)

    def sstd(self) -> float:
        return sstd(self)

    def pstd(self) -> float:
        return pstd(self)

    def sskew(self) -> float:
        return sskew(self)

    def pskew(self) -> float:
        return pskew(self)

    def autocov(self, lag: int) -> float:
        return autocov(self, lag)

    def autocorr(self, lag: int) -> float:
        return autocorr(self, lag)

    def scovar(self, t: Iterable[float]) -> float:
        return scovar(self, t)

    def pcovar(self, t: Iterable[float]) -> float:
        return pcovar(self, t)

    def scorr(self, t: Iterable[float]) -> float:
        return scorr(self, t)

    def pcorr(self, t: Iterable[float]) -> float:
        return pcorr(self, t)

    def apply(self, f: Callable[[float], float]) -> "Series":
        return map_series(self, f)

    def add(self, t: Iterable[float]) -> "Series":
        return add(self, t)

    def sub(self, t: Iterable[float]) -> "Series":
        return sub(self, t)

    def mul(self, t: Iterable[float]) -> "Series":
        return mul(self, t)

    def div(self, t: Iterable[float]) -> "Series":
        return div(self, t)

    def add1(self, f: float) -> "Series":
        return add1(self, f)

    def sub1(self, f: float) -> "Series":
        return sub1(self, f)

    def mul1(self, f: float) -> "Series":
        return mul1(self, f)

    def div1(self, f: float) -> "Series":
        return div1(self, f)

    def resize(self, n: int) -> "Series":
        return resize(self, n)

    def fold(self, initial: T, f: Callable[[T, float], T]) -> T:
        return fold(self, initial, f)

    def head(self, n: int) -> "Series":
        return head(self, n)

    def tail(self, n: int) -> "Series":
        return tail(self, n)


def _require_same_length(s, t) -> int:
    if len(s) != len(t):
        raise LengthMismatchError(len(s), len(t))
    return len(s)


# ---------------------------------------------------------------------------
# Location
# ---------------------------------------------------------------------------

def maximum(s: Iterable[float]) -> float:
    """Largest value; -inf for an empty series so that it folds cleanly."""
    m = -math.inf
    for x in s:
        if m < x:
            m = x
    return m


def minimum(s: Iterable[float]) -> float:
    """Smallest value; +inf for an empty series."""
    m = math.inf
    for x in s:
        if m > x:
            m = x
    return m


def mean(s: Iterable[float]) -> float:
    """
    Running mean m += (x - m) / (i + 1).

    Slower than sum / len but does not overflow or lose small terms when the
    series mixes very large and very small magnitudes. NaN when empty.
    """
    m = 0.0
    n = 0
    for x in s:
        n += 1
        m += (x - m) / n
    if n == 0:
        return math.nan
    return m


def median(s: Iterable[float]) -> float:
    """
    Middle value of a sorted copy; the input is left untouched.

    Even lengths average the two true middle elements (0-based n/2 - 1 and n/2).
    NaN for fewer than two values.
    """
    ns = np.sort(np.asarray(list(s), dtype=float))
    n = len(ns)
    if n <= 1:
        return math.nan
    if n % 2 == 0:
        return float((ns[n // 2 - 1] + ns[n // 2]) / 2)
    return float(ns[n // 2])


# ---------------------------------------------------------------------------
# Dispersion
# ---------------------------------------------------------------------------

def _welford(xs: Iterable[float]):
    n = 0
    m = 0.0
    s = 0.0
    for x in xs:
        n += 1
        mn = m + (x - m) / n
        s += (x - m) * (x - mn)
        m = mn
    return n, m, s


def svar(s: Iterable[float]) -> float:
    """Sample variance (divide by n-1). NaN for fewer than two values."""
    n, _, m2 = _welford(s)
    if n <= 1:
        return math.nan
    return m2 / (n - 1)


def pvar(s: Iterable[float]) -> float:
    """Population variance (divide by n). NaN for fewer than two values."""
    n, _, m2 = _welford(s)
    if n <= 1:
        return math.nan
    return m2 / n


def sstd(s: Iterable[float]) -> float:
    return ieee_sqrt(svar(s))


def pstd(s: Iterable[float]) -> float:
    return ieee_sqrt(pvar(s))


def pskew(s: Iterable[float]) -> float:
    """
    Population skewness g1 = m3 / m2**1.5 (central moments divided by n).

    NaN for fewer than two values; zero spread gives NaN (0/0).
    """
    xs = list(s)
    n, m, m2 = _welford(xs)
    if n <= 1:
        return math.nan
    m3 = 0.0
    for i, x in enumerate(xs):
        d = x - m
        m3 += (d * d * d - m3) / (i + 1)
    return ieee_div(m3, (m2 / n) ** 1.5)


def sskew(s: Iterable[float]) -> float:
    """
    Sample skewness, adjusted Fisher-Pearson G1 = g1 * sqrt(n(n-1)) / (n-2).

    NaN for fewer than three values.
    """
    xs = list(s)
    n = len(xs)
    if n <= 2:
        return math.nan
    return pskew(xs) * math.sqrt(n * (n - 1)) / (n - 2)


# ---------------------------------------------------------------------------
# Co-movement
# ---------------------------------------------------------------------------

def scovar(s: Iterable[float], t: Iterable[float]) -> float:
    """Sample covariance mean((s - mean(s)) * (t - mean(t))) * n/(n-1)."""
    s, t = list(s), list(t)
    n = _require_same_length(s, t)
    if n <= 1:
        return math.nan
    u = mul(sub1(s, mean(s)), sub1(t, mean(t)))
    return mean(u) * n / (n - 1)


def pcovar(s: Iterable[float], t: Iterable[float]) -> float:
    """Population covariance mean(s*t) - mean(s)*mean(t)."""
    s, t = list(s), list(t)
    n = _require_same_length(s, t)
    if n <= 1:
        return math.nan
    return mean(mul(s, t)) - mean(s) * mean(t)


def _correlation(s: Iterable[float], t: Iterable[float]) -> float:
    s, t = list(s), list(t)
    n = _require_same_length(s, t)
    if n <= 1:
        return math.nan
    ms, mt = mean(s), mean(t)
    sxy = sxx = syy = 0.0
    for a, b in zip(s, t):
        da, db = a - ms, b - mt
        sxy += da * db
        sxx += da * da
        syy += db * db
    # sqrt(x * x) == x, so a series against itself gives exactly 1
    return ieee_div(sxy, ieee_sqrt(sxx * syy))


def scorr(s: Iterable[float], t: Iterable[float]) -> float:
    """Sample correlation. The n/(n-1) factors cancel, so this equals pcorr."""
    return _correlation(s, t)


def pcorr(s: Iterable[float], t: Iterable[float]) -> float:
    return _correlation(s, t)


def _lagged(s: Iterable[float], lag: int):
    xs = list(s)
    if lag < 0:
        raise InvalidParameterError(f"lag must be non-negative, got {lag}")
    n = len(xs)
    # fewer than two overlapping points
    if lag > n - 2:
        return None
    return xs[: n - lag], xs[lag:]


def autocov(s: Iterable[float], lag: int) -> float:
    """Sample covariance of s[0:n-lag] against s[lag:n]; NaN when lag > n-2."""
    pair = _lagged(s, lag)
    if pair is None:
        return math.nan
    return scovar(*pair)


def autocorr(s: Iterable[float], lag: int) -> float:
    """Sample correlation of s[0:n-lag] against s[lag:n]; NaN when lag > n-2."""
    pair = _lagged(s, lag)
    if pair is None:
        return math.nan
    return scorr(*pair)


# ---------------------------------------------------------------------------
# Elementwise algebra
# ---------------------------------------------------------------------------

def map_series(s: Iterable[float], f: Callable[[float], float]) -> Series:
    return Series(f(x) for x in s)


def map2(s: Iterable[float], t: Iterable[float], f: Callable[[float, float], float]) -> Series:
    s, t = list(s), list(t)
    _require_same_length(s, t)
    return Series(f(a, b) for a, b in zip(s, t))


def _binary(s, t, op) -> Series:
    s, t = list(s), list(t)
    _require_same_length(s, t)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        out = op(np.asarray(s, dtype=float), np.asarray(t, dtype=float))
    return Series(out.tolist())


def _scalar(s, f, op) -> Series:
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        out = op(np.asarray(list(s), dtype=float), np.float64(f))
    return Series(out.tolist())


def add(s: Iterable[float], t: Iterable[float]) -> Series:
    return _binary(s, t, np.add)


def sub(s: Iterable[float], t: Iterable[float]) -> Series:
    return _binary(s, t, np.subtract)


def mul(s: Iterable[float], t: Iterable[float]) -> Series:
    return _binary(s, t, np.multiply)


def div(s: Iterable[float], t: Iterable[float]) -> Series:
    return _binary(s, t, np.divide)


def add1(s: Iterable[float], f: float) -> Series:
    return _scalar(s, f, np.add)


def sub1(s: Iterable[float], f: float) -> Series:
    return _scalar(s, f, np.subtract)


def mul1(s: Iterable[float], f: float) -> Series:
    return _scalar(s, f, np.multiply)


def div1(s: Iterable[float], f: float) -> Series:
    return _scalar(s, f, np.divide)


# ---------------------------------------------------------------------------
# Shape
# ---------------------------------------------------------------------------

def resize(s: Iterable[float], n: int) -> Series:
    """
    First n values when n <= len(s); otherwise s repeated cyclically up to n.

        resize([1, 2, 3], 5) -> [1, 2, 3, 1, 2]
    """
    xs = list(s)
    if not xs:
        raise EmptySeriesError("cannot resize an empty series")
    if n < 0:
        raise InvalidParameterError(f"resize length must be non-negative, got {n}")
    if n <= len(xs):
        return Series(xs[:n])
    return Series(xs[i % len(xs)] for i in range(n))


def fold(s: Iterable[float], initial: T, f: Callable[[T, float], T]) -> T:
    """Left-to-right reduction f(...f(f(initial, s0), s1)..., sn)."""
    return functools.reduce(f, s, initial)


def head(s: Iterable[float], n: int) -> Series:
    xs = list(s)
    if n < 0 or n > len(xs):
        raise IndexError(f"head({n}) out of range for series of length {len(xs)}")
    return Series(xs[:n])


def tail(s: Iterable[float], n: int) -> Series:
    xs = list(s)
    if n < 0 or n > len(xs):
        raise IndexError(f"tail({n}) out of range for series of length {len(xs)}")
    return Series(xs[len(xs) - n:])
