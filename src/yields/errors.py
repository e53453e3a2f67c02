"""
Exceptions raised by curve construction and evaluation.

All curve errors derive from YieldsError so callers can catch the whole
family; each also derives from the closest builtin so existing
``except ValueError`` handlers keep working.
"""

from typing import Optional, Tuple


class YieldsError(Exception):
    """Base exception for the yields library."""


class DomainError(YieldsError, ValueError):
    """Input outside the domain where a rate or discount factor is defined."""


class ConstructionError(YieldsError, ValueError):
    """Malformed curve inputs (lengths, ordering, empty sequences)."""


class ConvergenceError(YieldsError, RuntimeError):
    """Root-finder failed to bracket or converge within its budget."""

    def __init__(
        self,
        message: str,
        maturity: Optional[float] = None,
        bracket: Optional[Tuple[float, float]] = None
    ):
        self.maturity = maturity
        self.bracket = bracket
        if maturity is not None:
            message = f"[maturity={maturity}] {message}"
        super().__init__(message)


__all__ = [
    "YieldsError",
    "DomainError",
    "ConstructionError",
    "ConvergenceError",
]
