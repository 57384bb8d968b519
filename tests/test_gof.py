from __future__ import annotations

import logging

import pandas as pd
import pytest

from core.config import StatsConfig
from core.errors import InvalidParameterError
from distributions import Exponential, Uniform
from gof import CHI_SQUARED, ApproxTable, bins, chi_squared_test

EVEN = [(i + 0.5) / 1000 for i in range(1000)]


def test_table_exact_lookup() -> None:
    assert CHI_SQUARED.value(4, 0.05) == 9.488
    assert CHI_SQUARED.value(1, 0.995) == 0.0
    assert CHI_SQUARED.shape == (37, 10)


def test_table_nearest_neighbour() -> None:
    # 33 is closer to 30 than to 40; 0.06 is closer to 0.05 than 0.10
    assert CHI_SQUARED.value(33, 0.06) == 43.773
    assert CHI_SQUARED.value(1000, 0.0) == 140.169


def test_table_tie_keeps_first_key() -> None:
    t = ApproxTable([1, 3], [0, 1], [[10, 11], [30, 31]])
    assert t.value(2, 0.5) == 10


@pytest.mark.parametrize(
    "rows, cols, table",
    [
        ([], [1], []),
        ([1, 2], [1], [[1]]),
        ([1], [1, 2], [[1]]),
    ],
)
def test_table_shape_validation(rows, cols, table) -> None:
    with pytest.raises(InvalidParameterError):
        ApproxTable(rows, cols, table)


def test_table_frame_round_trip() -> None:
    frame = CHI_SQUARED.to_frame()
    assert isinstance(frame, pd.DataFrame)
    again = ApproxTable.from_frame(frame)
    assert again.value(10, 0.01) == CHI_SQUARED.value(10, 0.01)
    assert again.rows == CHI_SQUARED.rows


def test_bins_counts_half_open_intervals() -> None:
    assert bins([0, 1, 2, 3], [0.5, 1.5, 1.7, 3.0, -1, 2.0]) == [1, 2, 1]
    with pytest.raises(InvalidParameterError):
        bins([1.0], [1.0])


def test_even_sample_fits_uniform(source) -> None:
    result = chi_squared_test(EVEN, Uniform(source, 0, 1), 10, 0.05)
    assert result.passed
    assert result.statistic == pytest.approx(0.0)
    assert result.counts == [100] * 10
    assert result.critical == 16.919
    assert result.degrees_of_freedom == 9


def test_clustered_sample_rejects_exponential(source) -> None:
    values = [0.001 * i for i in range(100)]
    result = chi_squared_test(values, Exponential(source, 1.0), 10, 0.05)
    assert not result.passed
    assert result.statistic == pytest.approx(900.0)


def test_exact_critical_value(source) -> None:
    result = chi_squared_test(EVEN, Uniform(source, 0, 1), 10, 0.05, exact=True)
    assert result.critical == pytest.approx(16.919, abs=1e-3)


def test_defaults_come_from_config(source) -> None:
    result = chi_squared_test(EVEN, Uniform(source, 0, 1), config=StatsConfig(chi_squared_bins=5))
    assert result.degrees_of_freedom == 4
    assert result.alpha == 0.05
    assert len(result.summary()) == 5


def test_values_outside_bins_are_logged(source, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="gof.chi_squared"):
        result = chi_squared_test(EVEN + [1.5], Uniform(source, 0, 1), 10, 0.05)
    assert sum(result.counts) == 1000
    assert "expected 1001 values inside the bins" in caplog.text


def test_invalid_arguments(source) -> None:
    with pytest.raises(InvalidParameterError):
        chi_squared_test([], Uniform(source, 0, 1))
    with pytest.raises(InvalidParameterError):
        chi_squared_test(EVEN, Uniform(source, 0, 1), k=1)
    with pytest.raises(InvalidParameterError):
        chi_squared_test(EVEN, None)
