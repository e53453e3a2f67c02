"""
Yields: term-structure models for rates, discount and accumulation factors.

A small library for:
- Flat and stepwise yield curves
- Bootstrapping curves from one-period forward rates and par bond yields
- Combining curves arithmetically (spreads, parallel shifts)

Every curve answers rate(t), discount(t) and accumulate(t), plus the
(from, to) forms for forward quantities. Rates are effective per period.

Scope: numeric curve model only; no calendars, day counts or currencies.
"""

__version__ = "0.1.0"

# Core math and configuration
from .errors import YieldsError, DomainError, ConstructionError, ConvergenceError
from .ratemath import (
    discount_from_rate,
    rate_from_discount,
    forward_from_discounts,
)
from .settings import SolverSettings, DEFAULT_SETTINGS

# Curves
from .curves import (
    AbstractYield,
    rate,
    discount,
    accumulate,
    Constant,
    Step,
    RateCombination,
    ForwardCurve,
    Forward,
    ParCurve,
    Par,
    brentq_solver,
    bisection_solver,
)

# Analytics
from .analytics import forward_rates, par_yields, curve_table

__all__ = [
    # Version
    "__version__",
    # Errors
    "YieldsError",
    "DomainError",
    "ConstructionError",
    "ConvergenceError",
    # Rate math
    "discount_from_rate",
    "rate_from_discount",
    "forward_from_discounts",
    # Settings
    "SolverSettings",
    "DEFAULT_SETTINGS",
    # Curves
    "AbstractYield",
    "rate",
    "discount",
    "accumulate",
    "Constant",
    "Step",
    "RateCombination",
    "ForwardCurve",
    "Forward",
    "ParCurve",
    "Par",
    "brentq_solver",
    "bisection_solver",
    # Analytics
    "forward_rates",
    "par_yields",
    "curve_table",
]
