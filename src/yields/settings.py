"""
Numerical settings for curve bootstrapping.

SolverSettings bundles the bracket, tolerances and iteration budget used by
the par bootstrap root-finder. Presets cover the common cases; pass an
instance to Par(...) to override the default.
"""

from dataclasses import dataclass

import numpy as np

from .errors import ConstructionError

# Smallest rtol scipy.optimize.brentq accepts
MIN_RTOL = 4 * np.finfo(float).eps


@dataclass(frozen=True)
class SolverSettings:
    """
    Root-finder configuration.

    Attributes:
        lower: Lower end of the rate bracket (must be > -1)
        upper: Upper end of the rate bracket
        xtol: Absolute tolerance on the solved rate
        rtol: Relative tolerance on the solved rate
        maxiter: Maximum number of root-finder iterations per maturity
    """
    lower: float = -0.99
    upper: float = 1.0
    xtol: float = 1e-12
    rtol: float = 8.9e-16
    maxiter: int = 100

    def __post_init__(self):
        if self.lower <= -1.0:
            raise ConstructionError(f"Bracket lower bound must be > -1, got {self.lower}")
        if self.lower >= self.upper:
            raise ConstructionError(
                f"Bracket lower bound {self.lower} must be below upper bound {self.upper}"
            )
        if self.xtol <= 0:
            raise ConstructionError("xtol must be positive")
        if self.rtol < MIN_RTOL:
            raise ConstructionError(f"rtol must be at least {MIN_RTOL:.6g}, got {self.rtol}")
        if self.maxiter < 1:
            raise ConstructionError("maxiter must be at least 1")

    @classmethod
    def default(cls) -> "SolverSettings":
        """Bracket (-0.99, 1.0), 1e-12 tolerance, 100 iterations."""
        return cls()

    @classmethod
    def precise(cls) -> "SolverSettings":
        """Tighter tolerance and a larger iteration budget."""
        return cls(xtol=1e-15, maxiter=500)

    @classmethod
    def fast(cls) -> "SolverSettings":
        """Looser tolerance for quick scenario rebuilds."""
        return cls(xtol=1e-8, maxiter=50)


DEFAULT_SETTINGS = SolverSettings.default()


__all__ = [
    "SolverSettings",
    "DEFAULT_SETTINGS",
]
