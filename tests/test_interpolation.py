"""
Unit tests for interpolation methods.
"""

import numpy as np
import pytest

from yields import ConstructionError
from yields.curves import (
    Step,
    StepInterpolator,
    LinearInterpolator,
    create_interpolator,
)


class TestInterpolators:
    """Tests for interpolation methods."""

    @pytest.fixture
    def sample_data(self):
        """Sample interpolation data."""
        x = np.array([1.0, 2.0, 5.0, 10.0])
        y = np.array([0.050, 0.052, 0.048, 0.045])
        return x, y

    def test_step_interpolator(self, sample_data):
        x, y = sample_data
        interp = StepInterpolator().fit(x, y)

        assert interp(0.0) == 0.050
        assert interp(1.0) == 0.050
        assert interp(1.5) == 0.052
        assert interp(5.0) == 0.048
        assert interp(7.0) == 0.045
        assert interp(40.0) == 0.045
        assert interp.index(2.0) == 1
        assert interp.index(40.0) == 3

    def test_linear_interpolator(self, sample_data):
        x, y = sample_data
        interp = LinearInterpolator().fit(x, y)

        # Exact points
        assert abs(interp(1.0) - 0.050) < 1e-15
        assert abs(interp(5.0) - 0.048) < 1e-15

        # Midpoint
        assert interp(1.5) == pytest.approx(0.051)

        # Flat extrapolation
        assert interp(0.5) == 0.050
        assert interp(20.0) == 0.045

    def test_single_point(self):
        interp = LinearInterpolator().fit([3.0], [0.04])
        assert interp(1.0) == 0.04
        assert interp(5.0) == 0.04

    def test_not_fitted(self):
        with pytest.raises(RuntimeError):
            StepInterpolator()(1.0)

    def test_fitted_arrays_read_only(self, sample_data):
        x, y = sample_data
        interp = LinearInterpolator().fit(x, y)
        with pytest.raises(ValueError):
            interp.values[0] = 0.10
        with pytest.raises(ValueError):
            interp.times[0] = 0.5

    def test_fit_copies_inputs(self, sample_data):
        x, y = sample_data
        interp = StepInterpolator().fit(x, y)
        y[0] = 0.10
        assert interp(1.0) == 0.050

    def test_refit_rejected(self, sample_data):
        x, y = sample_data
        interp = StepInterpolator().fit(x, y)
        with pytest.raises(RuntimeError):
            interp.fit(x, y * 2)
        assert interp(1.0) == 0.050

    def test_curve_lookup_cannot_be_refit(self):
        curve = Step([0.02, 0.05], [1, 2])
        with pytest.raises(RuntimeError):
            curve._lookup.fit([1, 2], [0.5, 0.5])
        assert curve.rate(0.5) == 0.02

    def test_fit_validation(self):
        with pytest.raises(ConstructionError):
            LinearInterpolator().fit([1.0, 2.0], [0.01])
        with pytest.raises(ConstructionError):
            LinearInterpolator().fit([2.0, 1.0], [0.01, 0.02])
        with pytest.raises(ConstructionError):
            StepInterpolator().fit([], [])

    def test_factory(self):
        assert isinstance(create_interpolator("step"), StepInterpolator)
        assert isinstance(create_interpolator("Linear"), LinearInterpolator)
        with pytest.raises(ConstructionError):
            create_interpolator("cubic_spline")
