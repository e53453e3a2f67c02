"""
Curve construction from one-period forward rates.

forward_rates[i] is the effective rate over period [i, i+1]. Discount
factors chain period by period:

    D[0] = 1
    D[i+1] = D[i] / (1 + f[i])

and the spot rate at k is the one that discounts to D[k] in a single step.
"""

import logging
from typing import Sequence, Tuple

from ..errors import ConstructionError
from ..ratemath import rate_from_discount
from .base import AbstractYield
from .step import Step

logger = logging.getLogger(__name__)


class ForwardCurve(AbstractYield):
    """
    Discount curve bootstrapped from one-period forward rates.

    Within a period the forward rate compounds for the elapsed fraction, so
    discount(k) matches the chained discount factor exactly at every
    integer k and the last forward rate continues past the final period.

    Attributes:
        forward_rates: Input forward rates, one per period
        discount_factors: D[1..n], the discount factor at the end of each period
    """

    def __init__(self, forward_rates: Sequence[float]):
        forward_rates = tuple(float(f) for f in forward_rates)
        if not forward_rates:
            raise ConstructionError("Forward curve needs at least one forward rate")
        for i, f in enumerate(forward_rates):
            if f <= -1.0:
                raise ConstructionError(
                    f"Forward rate for period {i} must be greater than -1, got {f}"
                )

        dfs = []
        df = 1.0
        for f in forward_rates:
            df /= 1.0 + f
            dfs.append(df)

        times = tuple(float(k) for k in range(1, len(forward_rates) + 1))

        self._init_field("forward_rates", forward_rates)
        self._init_field("discount_factors", tuple(dfs))
        self._init_field("times", times)
        self._init_field("_periods", Step(forward_rates, times))

        logger.debug(
            "Bootstrapped forward curve over %d periods, final DF %.10f",
            len(forward_rates), dfs[-1]
        )

    def _rate_at(self, t: float) -> float:
        if t == 0:
            return self.forward_rates[0]
        return rate_from_discount(self._discount_at(t), t)

    def _discount_at(self, t: float) -> float:
        return self._periods.discount(t)

    def spot_rates(self) -> Tuple[float, ...]:
        """Spot rate at each period end 1..n."""
        return tuple(
            rate_from_discount(df, t) for df, t in zip(self.discount_factors, self.times)
        )

    def __repr__(self) -> str:
        return f"ForwardCurve(periods={len(self.forward_rates)})"


def Forward(forward_rates: Sequence[float]) -> ForwardCurve:
    """
    Take a vector of one-period forward rates and construct a discount curve.

    Args:
        forward_rates: forward_rates[i] applies over period [i, i+1]

    Returns:
        ForwardCurve

    Raises:
        ConstructionError: on empty input or a rate <= -1
    """
    return ForwardCurve(forward_rates)


__all__ = [
    "ForwardCurve",
    "Forward",
]
