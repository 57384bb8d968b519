"""
Core package — configuration, error types, random sources and float helpers.
No statistics live here.
"""

from .config import StatsConfig
from .errors import (
    EmptySeriesError,
    InvalidParameterError,
    LengthMismatchError,
    StatError,
    UnsatisfiableFilterError,
)
from .logging import setup_logging
from .random_source import (
    NumpyRandomSource,
    RandomSource,
    UniformOnlySource,
    has_exponential,
    has_normal,
    require_source,
)
from .utils import format_float, ieee_div, ieee_sqrt

__all__ = [
    "StatsConfig",
    "StatError",
    "InvalidParameterError",
    "LengthMismatchError",
    "EmptySeriesError",
    "UnsatisfiableFilterError",
    "setup_logging",
    "RandomSource",
    "NumpyRandomSource",
    "UniformOnlySource",
    "require_source",
    "has_normal",
    "has_exponential",
    "ieee_div",
    "ieee_sqrt",
    "format_float",
]
