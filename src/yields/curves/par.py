"""
Curve bootstrapping from par bond yields.

Each par yield p[i] is the coupon rate of a bond maturing at t[i] that
prices at 100, paying one coupon per period on the maturity grid. Solving
maturity by maturity:

    100 = sum_{j<i} c_i(j) * (1 + s[j]) ** -t[j]  +  (100 + c_i(i)) * (1 + s[i]) ** -t[i]

where c_i(j) = 100 * p[i] * (t[j] - t[j-1]) and s[1..i-1] are already
solved. Only s[i] is unknown, so each step is a one-dimensional root find.

The root-finder is pluggable: any callable (func, lower, upper, settings)
-> root that raises ConvergenceError on failure. brentq_solver (scipy) is
the default, bisection_solver is a dependency-free alternative.
"""

import logging
from typing import Callable, Dict, Optional, Sequence, Tuple

from scipy.optimize import brentq

from ..errors import ConstructionError, ConvergenceError
from ..ratemath import discount_from_rate, forward_from_discounts, rate_from_discount
from ..settings import DEFAULT_SETTINGS, SolverSettings
from .base import AbstractYield
from .interpolation import StepInterpolator, create_interpolator
from .step import Step

logger = logging.getLogger(__name__)

FACE = 100.0

Solver = Callable[[Callable[[float], float], float, float, SolverSettings], float]


def brentq_solver(
    func: Callable[[float], float],
    lower: float,
    upper: float,
    settings: SolverSettings = DEFAULT_SETTINGS
) -> float:
    """
    Brent's method via scipy.

    Raises:
        ConvergenceError: if func does not change sign over [lower, upper]
            or the iteration budget runs out
    """
    f_lower = func(lower)
    f_upper = func(upper)
    if f_lower * f_upper > 0:
        raise ConvergenceError(
            f"No sign change over bracket [{lower}, {upper}] "
            f"(f={f_lower:.6g}, {f_upper:.6g})"
        )

    root, info = brentq(
        func,
        lower,
        upper,
        xtol=settings.xtol,
        rtol=settings.rtol,
        maxiter=settings.maxiter,
        full_output=True,
        disp=False
    )
    if not info.converged:
        raise ConvergenceError(
            f"brentq did not converge in {info.iterations} iterations ({info.flag})"
        )
    return float(root)


def bisection_solver(
    func: Callable[[float], float],
    lower: float,
    upper: float,
    settings: SolverSettings = DEFAULT_SETTINGS
) -> float:
    """
    Plain bisection.

    Stops when the bracket is narrower than settings.xtol. Raises
    ConvergenceError without a sign change or after settings.maxiter halvings.
    """
    f_lower = func(lower)
    f_upper = func(upper)
    if f_lower == 0.0:
        return lower
    if f_upper == 0.0:
        return upper
    if f_lower * f_upper > 0:
        raise ConvergenceError(
            f"No sign change over bracket [{lower}, {upper}] "
            f"(f={f_lower:.6g}, {f_upper:.6g})"
        )

    for _ in range(settings.maxiter):
        mid = 0.5 * (lower + upper)
        f_mid = func(mid)
        if f_mid == 0.0 or 0.5 * (upper - lower) <= settings.xtol:
            return mid
        if f_lower * f_mid < 0:
            upper, f_upper = mid, f_mid
        else:
            lower, f_lower = mid, f_mid

    raise ConvergenceError(
        f"Bisection did not converge in {settings.maxiter} iterations "
        f"(bracket width {upper - lower:.3g})"
    )


def _validate_maturities(
    par_yields: Tuple[float, ...],
    maturities: Optional[Sequence[float]]
) -> Tuple[float, ...]:
    if maturities is None:
        return tuple(float(k) for k in range(1, len(par_yields) + 1))

    maturities = tuple(float(t) for t in maturities)
    if len(maturities) != len(par_yields):
        raise ConstructionError(
            f"par_yields and maturities must have same length, "
            f"got {len(par_yields)} and {len(maturities)}"
        )
    if maturities[0] <= 0:
        raise ConstructionError(f"First maturity must be above 0, got {maturities[0]}")
    for prev, curr in zip(maturities, maturities[1:]):
        if curr <= prev:
            raise ConstructionError(
                f"Maturities must be strictly increasing, got {prev} then {curr}"
            )
    return maturities


class ParCurve(AbstractYield):
    """
    Spot curve bootstrapped from par yields.

    Spot rates are solved at each maturity, so discount(t[i]) ==
    (1 + s[i]) ** -t[i] under either interpolation.

    "step" (default) holds the implied forward rate flat on each
    (t[i-1], t[i]] and continues the last forward past t[n], like a Step
    curve of forwards; discount factors are non-increasing whenever the
    forwards are non-negative. "linear" interpolates the spot rates and
    discounts at the interpolated spot rate.

    Attributes:
        par_yields: Input par yields
        maturities: Maturity grid (defaults to 1..n)
        spot_rates: Solved spot rate at each maturity
        interpolation: Name of the interpolation method
    """

    def __init__(
        self,
        par_yields: Sequence[float],
        maturities: Optional[Sequence[float]] = None,
        interpolation: str = "step",
        solver: Optional[Solver] = None,
        settings: Optional[SolverSettings] = None
    ):
        par_yields = tuple(float(p) for p in par_yields)
        if not par_yields:
            raise ConstructionError("Par curve needs at least one par yield")
        maturities = _validate_maturities(par_yields, maturities)

        interpolator = create_interpolator(interpolation)
        solver = solver or brentq_solver
        settings = settings or DEFAULT_SETTINGS

        spot_rates = _bootstrap(par_yields, maturities, solver, settings)

        self._init_field("par_yields", par_yields)
        self._init_field("maturities", maturities)
        self._init_field("spot_rates", spot_rates)
        self._init_field("interpolation", interpolation)

        if isinstance(interpolator, StepInterpolator):
            # Flat implied forward on each (t[i-1], t[i]]
            self._init_field("_periods", Step(_implied_forwards(spot_rates, maturities), maturities))
            self._init_field("_interpolator", None)
        else:
            self._init_field("_periods", None)
            self._init_field("_interpolator", interpolator.fit(maturities, spot_rates))

    def _rate_at(self, t: float) -> float:
        if self._periods is None:
            return self._interpolator(t)
        if t == 0:
            return self.spot_rates[0]
        return rate_from_discount(self._periods.discount(t), t)

    def _discount_at(self, t: float) -> float:
        if self._periods is None:
            return discount_from_rate(self._interpolator(t), t)
        return self._periods.discount(t)

    def forward_rates(self) -> Tuple[float, ...]:
        """Implied forward rate over each maturity interval."""
        return _implied_forwards(self.spot_rates, self.maturities)

    def repricing_errors(self) -> Dict[float, float]:
        """
        Reprice each input par bond off this curve.

        Returns:
            {maturity: model price - 100}
        """
        errors = {}
        for i, (p, t) in enumerate(zip(self.par_yields, self.maturities)):
            price = 0.0
            prev = 0.0
            for t_j in self.maturities[:i + 1]:
                price += FACE * p * (t_j - prev) * self.discount(t_j)
                prev = t_j
            price += FACE * self.discount(t)
            errors[t] = price - FACE
        return errors

    def __repr__(self) -> str:
        return (f"ParCurve(maturities={len(self.maturities)}, "
                f"interpolation={self.interpolation})")


def _implied_forwards(
    spot_rates: Tuple[float, ...],
    maturities: Tuple[float, ...]
) -> Tuple[float, ...]:
    """Forward rate between consecutive maturities, starting from 0."""
    forwards = []
    prev_t = 0.0
    prev_df = 1.0
    for s, t in zip(spot_rates, maturities):
        df = discount_from_rate(s, t)
        forwards.append(forward_from_discounts(prev_df, df, prev_t, t))
        prev_t, prev_df = t, df
    return tuple(forwards)


def _bootstrap(
    par_yields: Tuple[float, ...],
    maturities: Tuple[float, ...],
    solver: Solver,
    settings: SolverSettings
) -> Tuple[float, ...]:
    """Solve spot rates maturity by maturity."""
    spots = []
    dfs = []

    for i, (p, t) in enumerate(zip(par_yields, maturities)):
        # PV of coupons on already-solved dates
        known_pv = 0.0
        prev = 0.0
        for t_j, df_j in zip(maturities[:i], dfs):
            known_pv += FACE * p * (t_j - prev) * df_j
            prev = t_j
        final_cashflow = FACE + FACE * p * (t - prev)

        def residual(s: float) -> float:
            return known_pv + final_cashflow * discount_from_rate(s, t) - FACE

        try:
            s = solver(residual, settings.lower, settings.upper, settings)
        except ConvergenceError as exc:
            logger.error("Par bootstrap failed at maturity %s (par yield %s): %s", t, p, exc)
            raise ConvergenceError(
                str(exc), maturity=t, bracket=(settings.lower, settings.upper)
            ) from exc

        spots.append(s)
        dfs.append(discount_from_rate(s, t))
        logger.debug("Solved maturity %s: par %.6f -> spot %.10f", t, p, s)

    return tuple(spots)


def Par(
    par_yields: Sequence[float],
    maturities: Optional[Sequence[float]] = None,
    *,
    interpolation: str = "step",
    solver: Optional[Solver] = None,
    settings: Optional[SolverSettings] = None
) -> ParCurve:
    """
    Construct a curve given a set of bond yields priced at par with a
    single coupon per period.

    Args:
        par_yields: Par yield for each maturity, in increasing maturity order
        maturities: Maturity grid (defaults to 1, 2, ..., n)
        interpolation: "step" or "linear" between solved maturities
        solver: Root-finder (func, lower, upper, settings) -> root
        settings: Bracket, tolerance and iteration budget

    Returns:
        ParCurve

    Raises:
        ConstructionError: on empty or malformed inputs
        ConvergenceError: if a spot rate cannot be solved within the bracket
    """
    return ParCurve(
        par_yields,
        maturities,
        interpolation=interpolation,
        solver=solver,
        settings=settings
    )


__all__ = [
    "ParCurve",
    "Par",
    "brentq_solver",
    "bisection_solver",
]
