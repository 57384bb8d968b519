"""
Distributions package — random variates bound to an explicit random source.

  base.py         — Distribution / InvertibleDistribution interfaces
  stairs.py       — Staircase discrete distribution (cumulative thresholds)
  uniform.py      — Uniform, UniformDiscrete
  exponential.py  — Exponential, HyperExponential (staircase-selected mixture)
  normal.py       — Normal, LogNormal (target mean/std reparameterization)
  poisson.py      — Poisson (multiplicative method)
  null.py         — Null placeholder
  filters.py      — lowpass / highpass / midpass rejection wrappers
  rounding.py     — floored / ceiled / rounded discrete adapters
"""

from .base import Distribution, InvertibleDistribution, probability_between
from .exponential import Exponential, HyperExponential
from .filters import PassFilter, PassKind, highpass, lowpass, midpass
from .normal import LogNormal, Normal
from .null import Null
from .poisson import Poisson
from .rounding import Rounded, RoundingMode, ceiled, floored, rounded
from .stairs import Staircase
from .uniform import Uniform, UniformDiscrete

__all__ = [
    "Distribution",
    "InvertibleDistribution",
    "probability_between",
    "Staircase",
    "Uniform",
    "UniformDiscrete",
    "Exponential",
    "HyperExponential",
    "Normal",
    "LogNormal",
    "Poisson",
    "Null",
    "PassFilter",
    "PassKind",
    "lowpass",
    "highpass",
    "midpass",
    "Rounded",
    "RoundingMode",
    "floored",
    "ceiled",
    "rounded",
]
