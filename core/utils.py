from __future__ import annotations

import math

import numpy as np

from .errors import InvalidParameterError


def ieee_div(a: float, b: float) -> float:
    """Divide with IEEE-754 semantics: x/0 -> ±inf, 0/0 -> NaN, never raises."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(a), np.float64(b)))


def ieee_sqrt(x: float) -> float:
    """Square root that maps NaN to NaN and negative input to NaN."""
    if math.isnan(x) or x < 0:
        return math.nan
    return math.sqrt(x)


def format_float(x: float) -> str:
    """Shortest positional representation: 1.0 -> '1', 0.25 -> '0.25'."""
    if math.isnan(x) or math.isinf(x):
        return str(x)
    return np.format_float_positional(x, trim="-")


def require_positive(name: str, value: float) -> float:
    value = float(value)
    if not value > 0 or math.isinf(value):
        raise InvalidParameterError(f"{name} must be positive and finite, got {value!r}")
    return value
