"""
The yield curve contract.

Every curve answers three questions for a horizon t (in periods, t >= 0):
- rate(t): spot rate from 0 to t
- discount(t): present value at 0 of one unit paid at t
- accumulate(t): value at t of one unit invested at 0

Each also has a two-horizon form (from, to) giving the implied forward
rate, the forward discount factor and the forward accumulation factor.
Subclasses only supply the one-horizon spot rate and discount factor; the
interval forms are derived here from the discount ratio.

Curves support + and - which build a RateCombination. Plain numbers are
lifted into Constant curves, so ``curve + 0.01`` is a 100bp parallel shift.
"""

from abc import ABC, abstractmethod
from numbers import Real
from typing import Optional

from ..errors import DomainError
from ..ratemath import forward_from_discounts

# Interval used for the forward rate when from == to
_DEGENERATE_INTERVAL = 1e-8


class AbstractYield(ABC):
    """
    Abstract base class for all yield curves.

    Conventions:
        - Rates are effective per period
        - discount(0) == 1
        - Curves are immutable once built
    """

    @abstractmethod
    def _rate_at(self, t: float) -> float:
        """Spot rate at horizon t (t >= 0 already checked)."""
        pass

    @abstractmethod
    def _discount_at(self, t: float) -> float:
        """Discount factor from 0 to t (t >= 0 already checked)."""
        pass

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def _init_field(self, name: str, value) -> None:
        """Set an attribute during construction."""
        object.__setattr__(self, name, value)

    def rate(self, t: float, to: Optional[float] = None) -> float:
        """
        Spot rate at t, or the implied forward rate between t and to.

        Args:
            t: Horizon (or interval start) in periods
            to: Optional interval end

        Returns:
            Effective rate per period
        """
        if to is None:
            _check_horizon(t)
            return self._rate_at(t)

        _check_interval(t, to)
        if to == t:
            to = t + _DEGENERATE_INTERVAL
        return forward_from_discounts(
            self._discount_at(t), self._discount_at(to), t, to
        )

    def discount(self, t: float, to: Optional[float] = None) -> float:
        """Discount factor from 0 to t, or from t to `to`."""
        if to is None:
            _check_horizon(t)
            return self._discount_at(t)

        _check_interval(t, to)
        return self._discount_at(to) / self._discount_at(t)

    def accumulate(self, t: float, to: Optional[float] = None) -> float:
        """Accumulation factor from 0 to t, or from t to `to`."""
        if to is None:
            _check_horizon(t)
            return 1.0 / self._discount_at(t)

        _check_interval(t, to)
        return self._discount_at(t) / self._discount_at(to)

    def __add__(self, other):
        from .combination import RateCombination

        other = _as_curve(other)
        if other is None:
            return NotImplemented
        return RateCombination(self, other, "add")

    def __radd__(self, other):
        from .combination import RateCombination

        other = _as_curve(other)
        if other is None:
            return NotImplemented
        return RateCombination(other, self, "add")

    def __sub__(self, other):
        from .combination import RateCombination

        other = _as_curve(other)
        if other is None:
            return NotImplemented
        return RateCombination(self, other, "subtract")

    def __rsub__(self, other):
        from .combination import RateCombination

        other = _as_curve(other)
        if other is None:
            return NotImplemented
        return RateCombination(other, self, "subtract")


def _as_curve(value) -> Optional[AbstractYield]:
    """Lift a number into a Constant curve; None if not combinable."""
    if isinstance(value, AbstractYield):
        return value
    if isinstance(value, Real) and not isinstance(value, bool):
        from .constant import Constant
        return Constant(float(value))
    return None


def _check_horizon(t: float) -> None:
    if t < 0:
        raise DomainError(f"Time must be non-negative, got {t}")


def _check_interval(from_t: float, to_t: float) -> None:
    _check_horizon(from_t)
    if to_t < from_t:
        raise DomainError(f"Interval end {to_t} precedes start {from_t}")


def rate(curve: AbstractYield, t: float, to: Optional[float] = None) -> float:
    """Spot rate of `curve` at t, or its forward rate between t and to."""
    return curve.rate(t, to)


def discount(curve: AbstractYield, t: float, to: Optional[float] = None) -> float:
    """Discount factor of `curve` to t, or between t and to."""
    return curve.discount(t, to)


def accumulate(curve: AbstractYield, t: float, to: Optional[float] = None) -> float:
    """Accumulation factor of `curve` to t, or between t and to."""
    return curve.accumulate(t, to)


__all__ = [
    "AbstractYield",
    "rate",
    "discount",
    "accumulate",
]
