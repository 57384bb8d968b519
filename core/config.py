"""
Toolkit configuration.
Distribution parameters live with each distribution; this only holds
cross-cutting defaults (seed, rejection cap, goodness-of-fit settings).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import InvalidParameterError
from .logging import setup_logging
from .random_source import NumpyRandomSource


@dataclass(frozen=True)
class StatsConfig:
    seed: int = 7

    # pass filters: None keeps rejection sampling unbounded
    max_rejections: Optional[int] = None

    # goodness-of-fit defaults
    chi_squared_bins: int = 10
    chi_squared_alpha: float = 0.05

    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.max_rejections is not None and self.max_rejections <= 0:
            raise InvalidParameterError(
                f"max_rejections must be positive or None, got {self.max_rejections}"
            )
        if self.chi_squared_bins < 2:
            raise InvalidParameterError(
                f"chi_squared_bins must be at least 2, got {self.chi_squared_bins}"
            )
        if not 0.0 < self.chi_squared_alpha < 1.0:
            raise InvalidParameterError(
                f"chi_squared_alpha must lie in (0, 1), got {self.chi_squared_alpha}"
            )

    def make_source(self) -> NumpyRandomSource:
        """Fresh source seeded from this config. Each call returns a new, independent stream."""
        return NumpyRandomSource(seed=self.seed)

    def configure_logging(self) -> None:
        setup_logging(self.log_level)
