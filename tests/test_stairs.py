from __future__ import annotations

from collections import Counter

import pytest

from core.errors import InvalidParameterError
from distributions import Staircase

STEPS = [0.0, 0.3, 0.6, 0.6, 0.9]


def test_mean_of_reference_steps(source) -> None:
    s = Staircase(source, STEPS)
    assert s.mean() == pytest.approx(0.3 / 0.9 * 1 + 0.3 / 0.9 * 2 + 0.3 / 0.9 * 4)


def test_thresholds_are_normalized(source) -> None:
    s = Staircase(source, [0, 3, 6, 6, 9])
    assert s.thresholds[-1] == 1.0
    assert s.thresholds == pytest.approx(Staircase(source, STEPS).thresholds)


@pytest.mark.parametrize("bad", [[], [0.5, 0.2], [-1.0, 1.0], [0.0, 0.0], [1.0, float("nan")]])
def test_invalid_thresholds_rejected(source, bad) -> None:
    with pytest.raises(InvalidParameterError):
        Staircase(source, bad)


def test_none_source_rejected() -> None:
    with pytest.raises(InvalidParameterError):
        Staircase(None, STEPS)


@pytest.mark.parametrize(
    "u, index",
    [(0.0, 1), (0.2, 1), (0.5, 2), (0.7, 4), (0.99, 4)],
)
def test_sample_picks_first_threshold_above_draw(scripted, u, index) -> None:
    s = Staircase(scripted([u]), STEPS)
    assert s.sample() == index


def test_zero_mass_indices_never_drawn(source) -> None:
    s = Staircase(source, STEPS)
    counts = Counter(s.samples(6000))
    assert counts[0] == 0
    assert counts[3] == 0
    for i in (1, 2, 4):
        assert counts[i] / 6000 == pytest.approx(1 / 3, abs=0.03)


def test_pmf_is_probability_mass(source) -> None:
    s = Staircase(source, STEPS)
    assert s.pmf(0) == 0.0
    assert s.pmf(1) == pytest.approx(1 / 3)
    assert s.pmf(3) == 0.0
    assert s.pmf(4) == pytest.approx(1 / 3)
    assert s.pmf(-1) == 0.0
    assert s.pmf(5) == 0.0
    assert sum(s.weights()) == pytest.approx(1.0)


def test_pmf_at_index_zero_uses_first_threshold(source) -> None:
    s = Staircase(source, [1, 2, 4])
    assert s.pmf(0) == 0.25
    assert s.pmf(1) == 0.25
    assert s.pmf(2) == 0.5


def test_cdf_is_cumulative(source) -> None:
    s = Staircase(source, [1, 2, 4])
    assert s.cdf(-1) == 0.0
    assert s.cdf(0) == 0.25
    assert s.cdf(1) == 0.5
    assert s.cdf(2) == 1.0
    assert s.cdf(10) == 1.0


def test_quantile(source) -> None:
    s = Staircase(source, STEPS)
    assert s.quantile(-0.1) == 0
    assert s.quantile(1.0) == 4
    assert s.quantile(0.0) == 1
    assert s.quantile(0.5) == 2
    assert s.quantile(0.8) == 4


def test_single_step_always_zero(source) -> None:
    s = Staircase(source, [5.0])
    assert set(s.samples(20)) == {0}
    assert s.mean() == 0.0
