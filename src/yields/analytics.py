"""
Curve analytics.

Provides:
- forward_rates: one-period forward rates implied by a curve
- par_yields: par coupon rates implied by a curve on a maturity grid
- curve_table: rate / discount / accumulation table as a DataFrame

forward_rates and par_yields invert the Forward and Par bootstraps, which
makes them the natural repricing check for a built curve.
"""

from typing import List, Sequence

import numpy as np
import pandas as pd

from .curves.base import AbstractYield
from .errors import DomainError


def _check_grid(times: Sequence[float]) -> np.ndarray:
    grid = np.asarray(times, dtype=np.float64)
    if grid.ndim != 1 or len(grid) == 0:
        raise DomainError("Need a non-empty 1-d grid of times")
    if grid[0] <= 0 or np.any(np.diff(grid) <= 0):
        raise DomainError("Times must be positive and strictly increasing")
    return grid


def forward_rates(curve: AbstractYield, times: Sequence[float]) -> List[float]:
    """
    Forward rate over each interval of the grid.

    Args:
        curve: Any yield curve
        times: Interval end points (strictly increasing, > 0); the first
            interval starts at 0

    Returns:
        [rate(curve, t_{k-1}, t_k) for each k], with t_0 = 0
    """
    grid = _check_grid(times)
    starts = np.concatenate(([0.0], grid[:-1]))
    return [curve.rate(float(a), float(b)) for a, b in zip(starts, grid)]


def par_yields(curve: AbstractYield, maturities: Sequence[float]) -> List[float]:
    """
    Par coupon rate for a bond maturing at each grid point.

    Coupons are paid on the grid, accruing over each interval:

        par(t_i) = (1 - D(t_i)) / sum_{j<=i} (t_j - t_{j-1}) * D(t_j)

    Args:
        curve: Any yield curve
        maturities: Maturity grid (strictly increasing, > 0)

    Returns:
        Par yield at each maturity
    """
    grid = _check_grid(maturities)
    result = []
    annuity = 0.0
    prev = 0.0

    for t in grid:
        df = curve.discount(float(t))
        annuity += (t - prev) * df
        prev = t
        result.append(float((1.0 - df) / annuity))

    return result


def curve_table(curve: AbstractYield, times: Sequence[float]) -> pd.DataFrame:
    """
    Tabulate a curve on a grid.

    Args:
        curve: Any yield curve
        times: Grid of horizons (strictly increasing, > 0)

    Returns:
        DataFrame indexed by time with columns rate, discount, accumulate
        and forward (rate from the previous grid point)
    """
    grid = _check_grid(times)
    rows = []

    for t, fwd in zip(grid, forward_rates(curve, grid)):
        t = float(t)
        rows.append({
            "time": t,
            "rate": curve.rate(t),
            "discount": curve.discount(t),
            "accumulate": curve.accumulate(t),
            "forward": fwd,
        })

    return pd.DataFrame(rows).set_index("time")


__all__ = [
    "forward_rates",
    "par_yields",
    "curve_table",
]
