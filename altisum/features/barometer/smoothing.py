"""
Pressure smoothing with hysteresis.

A smoothing function decides whether a new reading is a genuine altitude
change or sensor noise. Contract:

    (last_accepted_hpa, last_seen_hpa, current_hpa) -> Optional[AltitudeChange]

- pure: the result depends on the three arguments only
- gain_m and loss_m of a result are >= 0
- None means the change is noise and the baseline must not move
"""

import math
from typing import Callable, Optional

from altisum.shared.constants import (
    DEFAULT_ALTITUDE_CHANGE_THRESHOLD_M,
    DEFAULT_SMOOTHING_FACTOR,
    PRESSURE_STANDARD_ATMOSPHERE_HPA,
)
from altisum.shared.formulas import altitude_change

from .models import AltitudeChange


SmoothingFunction = Callable[[float, float, float], Optional[AltitudeChange]]


def compute_changes_with_smoothing(
    last_accepted_hpa: float,
    last_seen_hpa: float,
    current_hpa: float,
    smoothing_factor: float = DEFAULT_SMOOTHING_FACTOR,
    threshold_m: float = DEFAULT_ALTITUDE_CHANGE_THRESHOLD_M,
    reference_hpa: float = PRESSURE_STANDARD_ATMOSPHERE_HPA,
) -> Optional[AltitudeChange]:
    """
    Smooth the new reading and compare it against the accepted baseline.

    The reading is blended with the previous raw reading:
        smoothed = a * current + (1 - a) * last_seen

    The altitude difference between the accepted baseline and the smoothed
    value must reach threshold_m, otherwise it is treated as noise.

    Args:
        last_accepted_hpa: Baseline of the last accepted change
        last_seen_hpa: Previous raw reading
        current_hpa: New raw reading
        smoothing_factor: Weight a of the new reading (0 < a <= 1)
        threshold_m: Minimum altitude change that is not noise
        reference_hpa: Reference pressure for the barometric formula

    Returns:
        AltitudeChange with the smoothed value as new baseline, or None
    """
    smoothed_hpa = smoothing_factor * current_hpa + (1 - smoothing_factor) * last_seen_hpa

    # Also rejects NaN
    if not (smoothed_hpa > 0 and last_accepted_hpa > 0):
        return None

    change_m = altitude_change(last_accepted_hpa, smoothed_hpa, reference_hpa)
    if not math.isfinite(change_m) or abs(change_m) < threshold_m:
        return None

    if change_m > 0:
        return AltitudeChange(current_hpa=smoothed_hpa, gain_m=change_m, loss_m=0.0)
    return AltitudeChange(current_hpa=smoothed_hpa, gain_m=0.0, loss_m=-change_m)


def make_smoothing_function(
    smoothing_factor: float = DEFAULT_SMOOTHING_FACTOR,
    threshold_m: float = DEFAULT_ALTITUDE_CHANGE_THRESHOLD_M,
    reference_hpa: float = PRESSURE_STANDARD_ATMOSPHERE_HPA,
) -> SmoothingFunction:
    """
    Build a smoothing function with fixed parameters.

    Raises:
        ValueError: If a parameter is out of range
    """
    if not 0 < smoothing_factor <= 1:
        raise ValueError(f"smoothing_factor must be in (0, 1], got {smoothing_factor}")
    if threshold_m < 0:
        raise ValueError(f"threshold_m must not be negative, got {threshold_m}")
    if reference_hpa <= 0:
        raise ValueError(f"reference_hpa must be positive, got {reference_hpa}")

    def smoothing(
        last_accepted_hpa: float,
        last_seen_hpa: float,
        current_hpa: float
    ) -> Optional[AltitudeChange]:
        return compute_changes_with_smoothing(
            last_accepted_hpa,
            last_seen_hpa,
            current_hpa,
            smoothing_factor=smoothing_factor,
            threshold_m=threshold_m,
            reference_hpa=reference_hpa,
        )

    return smoothing
