"""
Arithmetic combination of two yield curves.

The combined curve adds (or subtracts) the operands' spot rates at each
horizon. Discount and accumulation factors are always recomputed from the
combined spot rate: discounting is exponential in the rate, so multiplying
or adding the operands' discount factors gives a different (wrong) curve.
"""

from ..errors import ConstructionError
from ..ratemath import discount_from_rate
from .base import AbstractYield

_OPERATORS = {
    "add": lambda a, b: a + b,
    "subtract": lambda a, b: a - b,
}

_SYMBOLS = {"add": "+", "subtract": "-"}


class RateCombination(AbstractYield):
    """
    Curve whose spot rate is rate(left, t) +/- rate(right, t).

    Usually built with the operators: ``left + right`` or ``left - right``.
    Operands are referenced, not copied; nothing is cached.

    Attributes:
        left: First operand
        right: Second operand
        operator: "add" or "subtract"
    """

    def __init__(self, left: AbstractYield, right: AbstractYield, operator: str = "add"):
        if operator not in _OPERATORS:
            raise ConstructionError(
                f"Unknown operator: {operator!r} (expected 'add' or 'subtract')"
            )
        if not isinstance(left, AbstractYield) or not isinstance(right, AbstractYield):
            raise ConstructionError("Both operands must be yield curves")

        self._init_field("left", left)
        self._init_field("right", right)
        self._init_field("operator", operator)

    def _rate_at(self, t: float) -> float:
        combine = _OPERATORS[self.operator]
        return combine(self.left.rate(t), self.right.rate(t))

    def _discount_at(self, t: float) -> float:
        return discount_from_rate(self._rate_at(t), t)

    def __repr__(self) -> str:
        return f"({self.left!r} {_SYMBOLS[self.operator]} {self.right!r})"


__all__ = [
    "RateCombination",
]
