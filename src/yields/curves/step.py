"""
Piecewise constant yield curve.
"""

from typing import Sequence, Tuple

from ..errors import ConstructionError
from .base import AbstractYield
from .interpolation import StepInterpolator


class Step(AbstractYield):
    """
    Yield curve where rates[i] is the effective rate applicable until times[i].

    The rate in force on (times[i-1], times[i]] is rates[i]; the first rate
    applies from 0 and the last rate continues past the final breakpoint.

    Example:
        >>> y = Step([0.02, 0.05], [1, 2])
        >>> y.rate(0.5), y.rate(1.5), y.rate(2.5)
        (0.02, 0.05, 0.05)

    Discounting compounds each sub-interval at its own rate, so
    discount(1.5) == 1.02 ** -1 * 1.05 ** -0.5 above.

    Attributes:
        rates: Rate for each period, as a tuple
        times: Period end points, strictly increasing and > 0
    """

    def __init__(self, rates: Sequence[float], times: Sequence[float]):
        rates = tuple(float(r) for r in rates)
        times = tuple(float(t) for t in times)

        if len(rates) != len(times):
            raise ConstructionError(
                f"rates and times must have same length, got {len(rates)} and {len(times)}"
            )
        if not rates:
            raise ConstructionError("Step curve needs at least one rate")
        if times[0] <= 0:
            raise ConstructionError(f"First breakpoint must be above 0, got {times[0]}")
        for prev, curr in zip(times, times[1:]):
            if curr <= prev:
                raise ConstructionError(
                    f"Breakpoints must be strictly increasing, got {prev} then {curr}"
                )
        for r in rates:
            if r <= -1.0:
                raise ConstructionError(f"Rates must be greater than -1, got {r}")

        self._init_field("rates", rates)
        self._init_field("times", times)
        self._init_field("_lookup", StepInterpolator().fit(times, rates))

    def _rate_at(self, t: float) -> float:
        return self._lookup(t)

    def _discount_at(self, t: float) -> float:
        v = 1.0
        start = 0.0
        for r, end in zip(self.rates, self.times):
            if t <= end:
                return v * (1.0 + r) ** -(t - start)
            v *= (1.0 + r) ** -(end - start)
            start = end
        # Past the last breakpoint the last rate continues
        return v * (1.0 + self.rates[-1]) ** -(t - start)

    def breakpoints(self) -> Tuple[Tuple[float, float], ...]:
        """(time, rate) pairs."""
        return tuple(zip(self.times, self.rates))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Step):
            return NotImplemented
        return self.rates == other.rates and self.times == other.times

    def __hash__(self) -> int:
        return hash((Step, self.rates, self.times))

    def __repr__(self) -> str:
        return f"Step(rates={list(self.rates)}, times={list(self.times)})"


__all__ = [
    "Step",
]
