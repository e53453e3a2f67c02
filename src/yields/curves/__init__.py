"""
Curves package - yield curve variants and bootstrapping.

Provides:
- AbstractYield: the rate / discount / accumulate contract
- Constant, Step: curves defined directly by their rates
- RateCombination: sum or difference of two curves
- Forward: bootstrap from one-period forward rates
- Par: bootstrap from par bond yields
"""

from .base import AbstractYield, rate, discount, accumulate
from .constant import Constant
from .step import Step
from .combination import RateCombination
from .forward import ForwardCurve, Forward
from .par import ParCurve, Par, brentq_solver, bisection_solver
from .interpolation import (
    Interpolator,
    StepInterpolator,
    LinearInterpolator,
    create_interpolator,
)

__all__ = [
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
    "Interpolator",
    "StepInterpolator",
    "LinearInterpolator",
    "create_interpolator",
]
