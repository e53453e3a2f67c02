"""
Interpolation of rates between curve breakpoints.

Provides:
- StepInterpolator: piecewise constant, value at a breakpoint applies up to
  and including that breakpoint
- LinearInterpolator: linear between breakpoints

Both extrapolate flat outside the fitted range. X-coordinates are horizons
in periods, y-coordinates are rates.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
import numpy as np

from ..errors import ConstructionError


class Interpolator(ABC):
    """Abstract base class for rate interpolation."""

    def __init__(self):
        self.times: Optional[np.ndarray] = None
        self.values: Optional[np.ndarray] = None

    def fit(self, times: Sequence[float], values: Sequence[float]) -> "Interpolator":
        """
        Fit the interpolator to breakpoints.

        Args:
            times: Breakpoint horizons (strictly increasing)
            values: Rate at each breakpoint

        Returns:
            self, for chaining
        """
        if self.times is not None:
            raise RuntimeError("Interpolator already fitted")

        times = np.array(times, dtype=np.float64)
        values = np.array(values, dtype=np.float64)

        if times.ndim != 1 or times.shape != values.shape:
            raise ConstructionError("Times and values must have same length")
        if len(times) == 0:
            raise ConstructionError("Need at least 1 point for interpolation")
        if np.any(np.diff(times) <= 0):
            raise ConstructionError("Times must be strictly increasing")

        times.setflags(write=False)
        values.setflags(write=False)
        self.times = times
        self.values = values
        return self

    @abstractmethod
    def interpolate(self, t: float) -> float:
        """
        Interpolate at a single point.

        Args:
            t: Horizon in periods

        Returns:
            Interpolated value
        """
        pass

    def __call__(self, t: float) -> float:
        """Convenience method to call interpolate."""
        return self.interpolate(t)

    def _ensure_fitted(self) -> None:
        if self.times is None:
            raise RuntimeError("Interpolator not fitted")


class StepInterpolator(Interpolator):
    """
    Piecewise constant interpolation.

    The value at breakpoint i applies on (times[i-1], times[i]]. Points at or
    before the first breakpoint take the first value, points past the last
    take the last value.
    """

    def index(self, t: float) -> int:
        """Index of the smallest breakpoint >= t, capped at the last one."""
        self._ensure_fitted()
        idx = int(np.searchsorted(self.times, t, side='left'))
        return min(idx, len(self.times) - 1)

    def interpolate(self, t: float) -> float:
        return float(self.values[self.index(t)])


class LinearInterpolator(Interpolator):
    """
    Linear interpolation.

    Simple linear interpolation between knot points.
    Extrapolates flat beyond boundaries.
    """

    def interpolate(self, t: float) -> float:
        """Linear interpolation with flat extrapolation."""
        self._ensure_fitted()

        if t <= self.times[0]:
            return float(self.values[0])
        if t >= self.times[-1]:
            return float(self.values[-1])

        return float(np.interp(t, self.times, self.values))


def create_interpolator(method: str) -> Interpolator:
    """
    Factory function to create an interpolator by name.

    Args:
        method: One of "step", "linear"

    Returns:
        Interpolator instance
    """
    method = method.lower().replace("-", "_").replace(" ", "_")

    if method in ("step", "piecewise_constant", "flat"):
        return StepInterpolator()
    elif method in ("linear", "lin"):
        return LinearInterpolator()
    else:
        raise ConstructionError(f"Unknown interpolation method: {method}")


__all__ = [
    "Interpolator",
    "StepInterpolator",
    "LinearInterpolator",
    "create_interpolator",
]
