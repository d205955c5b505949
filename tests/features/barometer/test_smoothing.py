"""
Tests for pressure smoothing.

Tests the noise filter deciding which readings move the baseline.
"""

import math

import pytest

from altisum.features.barometer import (
    AltitudeChange,
    compute_changes_with_smoothing,
    make_smoothing_function,
)
from altisum.shared.formulas import altitude_change


# =============================================================================
# Test Default Smoothing
# =============================================================================

class TestComputeChangesWithSmoothing:
    """Tests for compute_changes_with_smoothing function."""

    def test_small_change_is_noise(self):
        """0.1 hPa jitter (<1 m after smoothing) is rejected."""
        assert compute_changes_with_smoothing(1000.0, 1000.0, 1000.1) is None

    def test_no_change_is_noise(self):
        """Identical readings never produce a change."""
        assert compute_changes_with_smoothing(1000.0, 1000.0, 1000.0) is None

    def test_climb_produces_gain(self):
        """Falling pressure beyond the threshold is a gain."""
        change = compute_changes_with_smoothing(1000.0, 999.0, 998.0)

        assert change is not None
        assert change.gain_m > 3.0
        assert change.loss_m == 0.0

    def test_descent_produces_loss(self):
        """Rising pressure beyond the threshold is a loss."""
        change = compute_changes_with_smoothing(1000.0, 1001.0, 1002.0)

        assert change is not None
        assert change.gain_m == 0.0
        assert change.loss_m > 3.0

    def test_new_baseline_is_smoothed_value(self):
        """Baseline moves to 0.3 * current + 0.7 * last seen."""
        change = compute_changes_with_smoothing(1000.0, 999.0, 998.0)

        assert change.current_hpa == pytest.approx(998.7)

    def test_change_measured_from_accepted_baseline(self):
        """Altitude delta is between accepted baseline and smoothed value."""
        change = compute_changes_with_smoothing(1000.0, 999.0, 998.0)

        assert change.gain_m == pytest.approx(altitude_change(1000.0, 998.7))

    def test_single_spike_is_damped(self):
        """A one-sample spike of 0.8 hPa is below the threshold after smoothing."""
        # 0.3 * 0.8 hPa = 0.24 hPa = ~2 m
        assert compute_changes_with_smoothing(1000.0, 1000.0, 999.2) is None

    def test_pure_function(self):
        """Same inputs always give the same result."""
        first = compute_changes_with_smoothing(1000.0, 999.0, 998.0)
        second = compute_changes_with_smoothing(1000.0, 999.0, 998.0)
        assert first == second

    @pytest.mark.parametrize("current", [math.nan, math.inf, -math.inf])
    def test_non_finite_reading_is_rejected(self, current):
        """Non-finite readings never produce a change."""
        assert compute_changes_with_smoothing(1000.0, 1000.0, current) is None

    def test_non_positive_pressure_is_rejected(self):
        """Smoothed pressure <= 0 has no altitude and is rejected."""
        assert compute_changes_with_smoothing(1000.0, -1.0, -1.0) is None

    def test_nan_baseline_is_rejected(self):
        """A NaN accepted baseline never produces a change."""
        assert compute_changes_with_smoothing(math.nan, 1000.0, 990.0) is None


# =============================================================================
# Test Smoothing Factory
# =============================================================================

class TestMakeSmoothingFunction:
    """Tests for make_smoothing_function factory."""

    def test_defaults_match_module_function(self):
        """Factory defaults behave like compute_changes_with_smoothing."""
        smoothing = make_smoothing_function()
        assert smoothing(1000.0, 999.0, 998.0) == compute_changes_with_smoothing(1000.0, 999.0, 998.0)

    def test_factor_one_disables_smoothing(self):
        """With factor 1.0 the new baseline is the raw reading."""
        smoothing = make_smoothing_function(smoothing_factor=1.0)
        change = smoothing(1000.0, 1000.0, 998.0)

        assert change.current_hpa == pytest.approx(998.0)
        assert change.gain_m == pytest.approx(altitude_change(1000.0, 998.0))

    def test_zero_threshold_accepts_small_changes(self):
        """Threshold 0 accepts any non-zero change."""
        smoothing = make_smoothing_function(threshold_m=0.0)
        change = smoothing(1000.0, 1000.0, 1000.1)

        assert change is not None
        assert change.loss_m > 0
        assert change.gain_m == 0.0

    def test_higher_threshold_rejects_more(self):
        """A climb of ~11 m is noise with a 20 m threshold."""
        smoothing = make_smoothing_function(threshold_m=20.0)
        assert smoothing(1000.0, 999.0, 998.0) is None

    def test_result_type(self):
        """Accepted changes are AltitudeChange values."""
        smoothing = make_smoothing_function()
        assert isinstance(smoothing(1000.0, 999.0, 998.0), AltitudeChange)

    @pytest.mark.parametrize("kwargs", [
        {"smoothing_factor": 0.0},
        {"smoothing_factor": 1.5},
        {"smoothing_factor": -0.3},
        {"threshold_m": -1.0},
        {"reference_hpa": 0.0},
    ])
    def test_invalid_parameters(self, kwargs):
        """Out of range parameters raise ValueError."""
        with pytest.raises(ValueError):
            make_smoothing_function(**kwargs)
