"""
Conversions between rates, discount factors and accumulation factors.

All rates are effective per period: one unit invested at rate r for t
periods grows to (1 + r) ** t. Functions here are pure and stateless; the
curve classes build on them.
"""

from .errors import DomainError


def _check_rate(rate: float) -> None:
    if 1.0 + rate <= 0.0:
        raise DomainError(f"Rate must be greater than -1, got {rate}")


def _check_time(t: float) -> None:
    if t < 0:
        raise DomainError(f"Time must be non-negative, got {t}")


def discount_from_rate(rate: float, t: float) -> float:
    """
    Discount factor for an effective rate over t periods.

    Args:
        rate: Effective rate per period (must be > -1)
        t: Horizon in periods (must be >= 0)

    Returns:
        (1 + rate) ** -t
    """
    _check_rate(rate)
    _check_time(t)
    return (1.0 + rate) ** -t


def rate_from_discount(df: float, t: float) -> float:
    """
    Effective rate implied by a discount factor at horizon t.

    Args:
        df: Discount factor (must be > 0)
        t: Horizon in periods (must be > 0)

    Returns:
        df ** (-1 / t) - 1

    Raises:
        DomainError: if t <= 0 (no rate is implied at t=0) or df <= 0
    """
    _check_time(t)
    if t == 0:
        if df != 1.0:
            raise DomainError(f"Discount factor at t=0 must be 1, got {df}")
        raise DomainError("Rate is undefined at t=0")
    if df <= 0:
        raise DomainError(f"Discount factor must be positive, got {df}")
    return df ** (-1.0 / t) - 1.0


def accumulate(rate: float, from_t: float, to_t: float) -> float:
    """
    Accumulation factor for a flat rate between two horizons.

    Requires to_t >= from_t >= 0.
    """
    _check_time(from_t)
    if to_t < from_t:
        raise DomainError(f"Interval end {to_t} precedes start {from_t}")
    return discount_from_rate(rate, from_t) / discount_from_rate(rate, to_t)


def forward_from_discounts(
    df_from: float,
    df_to: float,
    from_t: float,
    to_t: float
) -> float:
    """
    Effective per-period rate implied between two discount factors.

    (df_from / df_to) ** (1 / (to_t - from_t)) - 1
    """
    _check_time(from_t)
    if to_t <= from_t:
        raise DomainError(
            f"Forward interval must have positive length, got [{from_t}, {to_t}]"
        )
    if df_from <= 0 or df_to <= 0:
        raise DomainError("Discount factors must be positive")
    return (df_from / df_to) ** (1.0 / (to_t - from_t)) - 1.0


__all__ = [
    "discount_from_rate",
    "rate_from_discount",
    "accumulate",
    "forward_from_discounts",
]
