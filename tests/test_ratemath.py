"""
Unit tests for rate / discount / accumulation conversions.
"""

import pytest

from yields import DomainError, YieldsError
from yields.ratemath import (
    discount_from_rate,
    rate_from_discount,
    accumulate,
    forward_from_discounts,
)


class TestDiscountFromRate:
    """Tests for discount_from_rate."""

    def test_basic(self):
        assert discount_from_rate(0.05, 2) == pytest.approx(1 / 1.05 ** 2)

    def test_zero_time(self):
        assert discount_from_rate(0.05, 0) == 1.0

    def test_fractional_time(self):
        assert discount_from_rate(0.04, 0.5) == pytest.approx(1.04 ** -0.5)

    def test_negative_rate(self):
        """Negative rates above -1 are allowed and give DF > 1."""
        assert discount_from_rate(-0.01, 1) == pytest.approx(1 / 0.99)
        assert discount_from_rate(-0.01, 1) > 1.0

    @pytest.mark.parametrize("bad_rate", [-1.0, -1.5])
    def test_rate_at_or_below_minus_one(self, bad_rate):
        with pytest.raises(DomainError):
            discount_from_rate(bad_rate, 0.5)

    def test_negative_time(self):
        with pytest.raises(DomainError):
            discount_from_rate(0.05, -1)


class TestRateFromDiscount:
    """Tests for rate_from_discount."""

    def test_inverse(self):
        for r in [-0.005, 0.0, 0.01, 0.05, 0.2]:
            for t in [0.25, 1, 3.5, 30]:
                df = discount_from_rate(r, t)
                assert rate_from_discount(df, t) == pytest.approx(r, abs=1e-12)

    def test_zero_time_unit_discount(self):
        """No rate is implied at t=0 even for df=1."""
        with pytest.raises(DomainError):
            rate_from_discount(1.0, 0)

    def test_zero_time_non_unit_discount(self):
        with pytest.raises(DomainError):
            rate_from_discount(0.95, 0)

    def test_non_positive_discount(self):
        with pytest.raises(DomainError):
            rate_from_discount(0.0, 1)
        with pytest.raises(DomainError):
            rate_from_discount(-0.5, 1)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            rate_from_discount(0.95, 0)
        with pytest.raises(YieldsError):
            rate_from_discount(0.95, 0)


class TestAccumulate:
    """Tests for accumulate and forward_from_discounts."""

    def test_interval(self):
        assert accumulate(0.05, 1, 3) == pytest.approx(1.05 ** 2)

    def test_from_zero(self):
        assert accumulate(0.05, 0, 2) == pytest.approx(1.05 ** 2)

    def test_empty_interval(self):
        assert accumulate(0.05, 2, 2) == pytest.approx(1.0)

    def test_reversed_interval(self):
        with pytest.raises(DomainError):
            accumulate(0.05, 3, 1)

    def test_negative_start(self):
        with pytest.raises(DomainError):
            accumulate(0.05, -1, 1)

    def test_forward_from_discounts(self):
        df1 = discount_from_rate(0.03, 1)
        df3 = df1 / 1.05 ** 2
        assert forward_from_discounts(df1, df3, 1, 3) == pytest.approx(0.05)

    def test_forward_needs_positive_interval(self):
        with pytest.raises(DomainError):
            forward_from_discounts(0.9, 0.9, 1, 1)
