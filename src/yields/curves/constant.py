"""
Flat yield curve.
"""

from ..errors import ConstructionError
from ..ratemath import discount_from_rate
from .base import AbstractYield


class Constant(AbstractYield):
    """
    Yield curve with the same spot rate at every maturity.

    Example:
        >>> y = Constant(0.05)
        >>> y.discount(2)    # 1 / 1.05 ** 2
        0.9070294784580498

    Attributes:
        spot_rate: Effective rate per period
    """

    def __init__(self, spot_rate: float):
        if spot_rate <= -1.0:
            raise ConstructionError(f"Spot rate must be greater than -1, got {spot_rate}")
        self._init_field("spot_rate", float(spot_rate))

    def _rate_at(self, t: float) -> float:
        return self.spot_rate

    def _discount_at(self, t: float) -> float:
        return discount_from_rate(self.spot_rate, t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Constant):
            return NotImplemented
        return self.spot_rate == other.spot_rate

    def __hash__(self) -> int:
        return hash((Constant, self.spot_rate))

    def __repr__(self) -> str:
        return f"Constant({self.spot_rate})"


__all__ = [
    "Constant",
]
