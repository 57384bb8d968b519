from __future__ import annotations

import math

import pandas as pd
import pytest

from core.errors import InvalidParameterError
from moments import MomentAccumulator
from series import Series, mean, pvar, svar

SERIES = [
    [1, 2, 3, 4, 5],
    [0.38809179, 0.94113008, 0.15350705, 0.03311646, 0.68168087, 0.21719990],
    [0.32123922, 0.57085251, 0.53576882, 0.38965630, 0.27487263, 0.90783122],
    [0, 0, 0, 0, 0],
    [-1, -2, -3],
]


def _same(a: float, b: float) -> bool:
    if math.isnan(a) and math.isnan(b):
        return True
    return a == pytest.approx(b, rel=1e-9, abs=1e-12)


def _fed(xs) -> MomentAccumulator:
    acc = MomentAccumulator()
    for x in xs:
        acc.add(x)
    return acc


@pytest.mark.parametrize("xs", SERIES)
def test_streaming_matches_batch(xs) -> None:
    acc = _fed(xs)
    s = Series(xs)
    assert acc.count == len(xs)
    assert acc.min() == s.min()
    assert acc.max() == s.max()
    assert _same(acc.mean(), mean(s))
    assert _same(acc.svar(), svar(s))
    assert _same(acc.pvar(), pvar(s))
    assert _same(acc.sstd(), s.sstd())
    assert _same(acc.pstd(), s.pstd())


def test_empty_accumulator() -> None:
    acc = MomentAccumulator()
    assert acc.count == 0
    assert math.isnan(acc.mean())
    assert math.isnan(acc.svar())
    assert math.isnan(acc.pvar())
    assert acc.max() == -math.inf
    assert acc.min() == math.inf


def test_single_observation_has_no_variance() -> None:
    acc = _fed([4.5])
    assert acc.mean() == 4.5
    assert acc.max() == acc.min() == 4.5
    assert math.isnan(acc.svar())
    assert math.isnan(acc.pvar())
    assert math.isnan(acc.pstd())


def test_reset_returns_to_empty_state() -> None:
    acc = _fed([1, 2, 3])
    acc.reset()
    assert acc.count == 0
    assert acc.m2 == 0.0
    assert acc.max() == -math.inf
    assert acc.min() == math.inf
    acc.add(10)
    assert acc.mean() == 10


def test_large_offset_stays_accurate() -> None:
    offset = 1e9
    acc = _fed([offset + x for x in (4, 7, 13, 16)])
    assert acc.mean() == pytest.approx(offset + 10, rel=1e-15)
    assert acc.svar() == pytest.approx(30.0, rel=1e-9)
    assert acc.pvar() == pytest.approx(22.5, rel=1e-9)


def test_add_n_on_empty_sets_block() -> None:
    acc = MomentAccumulator()
    acc.add_n(4, 2.5)
    assert acc.count == 4
    assert acc.mean() == 2.5
    assert acc.svar() == 0.0
    assert acc.max() == acc.min() == 2.5


@pytest.mark.parametrize(
    "prefix, n, x",
    [
        ([1.0, 5.0], 6, 3.0),
        ([2.0, 2.0, 2.0], 5, 4.0),
        ([-1.0, 0.5, 8.0, 3.25], 5, 100.0),
        ([10.0], 11, -4.0),
    ],
)
def test_add_n_matches_batch_of_repeated_values(prefix, n, x) -> None:
    acc = _fed(prefix)
    acc.add_n(n, x)

    expanded = prefix + [x] * (n - len(prefix))
    assert acc.count == n
    assert acc.mean() == pytest.approx(mean(expanded), rel=1e-12)
    assert acc.svar() == pytest.approx(svar(expanded), rel=1e-9)
    assert acc.pvar() == pytest.approx(pvar(expanded), rel=1e-9)
    assert acc.max() == max(expanded)
    assert acc.min() == min(expanded)


def test_add_n_chained_blocks() -> None:
    acc = MomentAccumulator()
    acc.add_n(3, 2.0)
    acc.add_n(5, 4.0)
    assert acc.svar() == pytest.approx(svar([2, 2, 2, 4, 4]), rel=1e-12)


def test_add_n_rejects_count_not_ahead() -> None:
    acc = _fed([1, 2, 3])
    with pytest.raises(InvalidParameterError):
        acc.add_n(3, 1.0)
    with pytest.raises(InvalidParameterError):
        MomentAccumulator().add_n(0, 1.0)


def test_merge_matches_concatenation() -> None:
    left = [0.38809179, 0.94113008, 0.15350705, 0.03311646]
    right = [0.68168087, 0.21719990, 12.5, -3.0, 0.0]
    a, b = _fed(left), _fed(right)
    a.merge(b)
    full = left + right
    assert a.count == len(full)
    assert a.mean() == pytest.approx(mean(full), rel=1e-12)
    assert a.svar() == pytest.approx(svar(full), rel=1e-9)
    assert a.max() == 12.5
    assert a.min() == -3.0


def test_merge_with_empty_sides() -> None:
    a = _fed([1, 2, 3])
    a.merge(MomentAccumulator())
    assert a.count == 3

    empty = MomentAccumulator()
    empty.merge(a)
    assert empty.count == 3
    assert empty.svar() == a.svar()


def test_copy_is_independent() -> None:
    a = _fed([1, 2])
    b = a.copy()
    b.add(100)
    assert a.count == 2
    assert b.count == 3


def test_summary_is_a_pandas_series() -> None:
    summary = _fed([1, 2, 3, 4]).summary()
    assert isinstance(summary, pd.Series)
    assert summary["count"] == 4
    assert summary["mean"] == 2.5
    assert summary["svar"] == pytest.approx(5 / 3)
