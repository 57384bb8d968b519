from __future__ import annotations

import pytest

from core.config import StatsConfig
from core.errors import InvalidParameterError, UnsatisfiableFilterError
from distributions import (
    Exponential,
    Null,
    PassKind,
    Rounded,
    RoundingMode,
    Uniform,
    ceiled,
    floored,
    highpass,
    lowpass,
    midpass,
    rounded,
)


def test_lowpass_rejects_values_above_bound(source) -> None:
    f = lowpass(Uniform(source, 0, 10), 3.0)
    assert f.kind is PassKind.LOW
    assert all(x <= 3.0 for x in f.samples(500))


def test_highpass_rejects_values_below_bound(source) -> None:
    f = highpass(Uniform(source, 0, 10), 7.0)
    assert all(x >= 7.0 for x in f.samples(500))


def test_midpass_keeps_band(source) -> None:
    f = midpass(Exponential(source, 1.0), 0.5, 1.5)
    xs = f.samples(500)
    assert all(0.5 <= x <= 1.5 for x in xs)


def test_filter_redraws_until_accepted(scripted) -> None:
    src = scripted([0.9, 0.95, 0.2, 0.1])
    f = lowpass(Uniform(src, 0, 1), 0.5)
    assert f.sample() == pytest.approx(0.2)
    # the two rejected draws were consumed from the source
    assert src.uniform_float() == 0.1


def test_filter_bounds_are_inclusive(scripted) -> None:
    f = midpass(Uniform(scripted([0.25, 0.75]), 0, 4), 1.0, 3.0)
    assert f.sample() == 1.0
    assert f.sample() == 3.0


def test_capped_filter_gives_up(source) -> None:
    f = midpass(Uniform(source, 0, 1), 2.0, 3.0, max_attempts=25)
    with pytest.raises(UnsatisfiableFilterError) as exc:
        f.sample()
    assert exc.value.attempts == 25


def test_cap_from_config(source) -> None:
    cfg = StatsConfig(max_rejections=5)
    f = highpass(Uniform(source, 0, 1), 10.0, max_attempts=cfg.max_rejections)
    with pytest.raises(UnsatisfiableFilterError):
        f.sample()


def test_filter_validation(source) -> None:
    with pytest.raises(InvalidParameterError):
        midpass(Uniform(source, 0, 1), 0.8, 0.2)
    with pytest.raises(InvalidParameterError):
        lowpass(object(), 1.0)
    with pytest.raises(InvalidParameterError):
        lowpass(Uniform(source, 0, 1), 0.5, max_attempts=0)


@pytest.mark.parametrize(
    "u, floor_, ceil_, round_",
    [
        (0.25, 2, 3, 3),   # 2.5
        (0.24, 2, 3, 2),   # 2.4
        (0.5, 5, 5, 5),    # 5.0 exactly
        (0.0, 0, 0, 0),
    ],
)
def test_rounding_adapters(scripted, u, floor_, ceil_, round_) -> None:
    def uniform():
        return Uniform(scripted([u]), 0, 10)

    assert floored(uniform()).sample() == floor_
    assert ceiled(uniform()).sample() == ceil_
    assert rounded(uniform()).sample() == round_


def test_rounding_negative_values(scripted) -> None:
    def uniform():
        return Uniform(scripted([0.25]), -10, 0)  # -7.5

    assert floored(uniform()).sample() == -7
    assert ceiled(uniform()).sample() == -7
    assert rounded(uniform()).sample() == -7


def test_rounded_draws_are_ints(source) -> None:
    r = Rounded(Exponential(source, 0.1), RoundingMode.ROUND)
    draws = [r.sample() for _ in range(100)]
    assert all(isinstance(x, int) for x in draws)
    assert all(x >= 0 for x in draws)


def test_rounding_wraps_null() -> None:
    assert floored(Null()).sample() == 0


def test_rounding_validation() -> None:
    with pytest.raises(InvalidParameterError):
        Rounded("not a distribution", RoundingMode.FLOOR)
    with pytest.raises(ValueError):
        Rounded(Null(), "truncate")


@pytest.mark.parametrize("u, want", [(0.25, -7), (0.99, 0), (0.0, -10), (0.51, -4)])
def test_floored_truncates_toward_zero(scripted, u, want) -> None:
    # Uniform(-10, 0): -7.5, -0.1, -10.0, -4.9
    assert floored(Uniform(scripted([u]), -10, 0)).sample() == want
