# michell/config.py
"""
Library configuration and defaults.
"""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class MichellConfig:
    """Global configuration for generation and analysis."""

    # Default design: two-bar base case
    default_ne: int = 2
    default_h: float = 4.0
    default_L: float = 40.0

    # Vertical point load on the load node (+y)
    load: float = 80.0

    # Search over gama
    search_attempts: int = 300
    search_span: float = 89.0  # degrees covered by the linear search
    eps: float = 1e-6

    # Solver
    cond_limit: float = 1e12

    # Available options (slider values of the interactive explorer)
    complexity_levels: Tuple[int, ...] = field(default=(2, 8, 18, 32, 50, 72, 98))
    support_heights: Tuple[float, ...] = field(default=(4.0, 8.0, 16.0))

    @property
    def search_step(self) -> float:
        return self.search_span / self.search_attempts


# Global config instance
CONFIG = MichellConfig()
