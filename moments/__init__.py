"""
Moments package — online (single-pass, mergeable) mean/variance/min/max.
"""

from .accumulator import MomentAccumulator
from .tracker import MomentTracker

__all__ = ["MomentAccumulator", "MomentTracker"]
