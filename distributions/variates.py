"""
Standard variates drawn from a RandomSource.

Uses the source's accelerated primitive when it has one and falls back to
inversion of a uniform draw otherwise, so every distribution works on a source
that only offers uniform_float() and uniform_int(n).
"""

from __future__ import annotations

import math

from scipy.special import ndtri

from core.random_source import RandomSource, has_exponential, has_normal


def standard_exponential(source: RandomSource) -> float:
    """Exp(1) variate."""
    if has_exponential(source):
        return float(source.exponential_float())
    return -math.log1p(-source.uniform_float())


def standard_normal(source: RandomSource) -> float:
    """N(0, 1) variate."""
    if has_normal(source):
        return float(source.normal_float())
    u = source.uniform_float()
    # ndtri(0) is -inf; nudge into the open interval
    while u <= 0.0:
        u = source.uniform_float()
    return float(ndtri(u))
