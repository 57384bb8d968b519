"""
Goodness-of-fit package — approximate tables and the chi-squared test.

The table lookup is coarse (nearest neighbour on both axes); treat results as
an approximation.
"""

from .chi_squared import CHI_SQUARED, ChiSquaredResult, bins, chi_squared_test
from .table import ApproxTable

__all__ = [
    "ApproxTable",
    "CHI_SQUARED",
    "ChiSquaredResult",
    "bins",
    "chi_squared_test",
]
