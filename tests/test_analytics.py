"""
Unit tests for curve analytics.
"""

import pandas as pd
import pytest

from yields import (
    Constant,
    Step,
    Forward,
    DomainError,
    forward_rates,
    par_yields,
    curve_table,
)


class TestForwardRates:
    """Tests for forward_rates."""

    def test_round_trip_forward_bootstrap(self):
        fwds = [0.01, 0.02, 0.015, 0.03, 0.04]
        y = Forward(fwds)
        assert forward_rates(y, [1, 2, 3, 4, 5]) == pytest.approx(fwds, abs=1e-12)

    def test_step_curve_forwards(self):
        y = Step([0.02, 0.05], [1, 2])
        assert forward_rates(y, [1, 2, 3]) == pytest.approx([0.02, 0.05, 0.05])

    def test_invalid_grid(self):
        with pytest.raises(DomainError):
            forward_rates(Constant(0.05), [])
        with pytest.raises(DomainError):
            forward_rates(Constant(0.05), [2, 1])
        with pytest.raises(DomainError):
            forward_rates(Constant(0.05), [0, 1])


class TestParYields:
    """Tests for par_yields."""

    def test_flat_curve(self):
        """On a flat curve the par yield equals the spot rate."""
        assert par_yields(Constant(0.04), [1, 2, 3, 4]) == pytest.approx(
            [0.04] * 4, abs=1e-12
        )

    def test_one_period(self):
        y = Step([0.03, 0.06], [1, 2])
        assert par_yields(y, [1])[0] == pytest.approx(0.03)


class TestCurveTable:
    """Tests for curve_table."""

    def test_columns(self):
        table = curve_table(Constant(0.05), [1, 2, 3])
        assert isinstance(table, pd.DataFrame)
        assert list(table.columns) == ["rate", "discount", "accumulate", "forward"]
        assert list(table.index) == [1.0, 2.0, 3.0]
        assert table.index.name == "time"

    def test_values(self):
        table = curve_table(Constant(0.05), [1, 2, 3])
        assert table.loc[2.0, "discount"] == pytest.approx(0.9070294784580498)
        assert table.loc[2.0, "accumulate"] == pytest.approx(1.05 ** 2)
        assert (table["rate"] == 0.05).all()
        assert table["forward"].tolist() == pytest.approx([0.05] * 3)

    def test_discount_accumulate_reciprocal(self):
        table = curve_table(Step([0.02, 0.05, 0.03], [1, 2, 4]), [0.5, 1, 1.5, 3, 6])
        product = table["discount"] * table["accumulate"]
        assert product.tolist() == pytest.approx([1.0] * 5)
