"""
Shared utilities (NOT business logic).

Usage:
    from altisum.shared import pressure_to_altitude, altitude_change
    from altisum.shared.constants import SENSOR_SAMPLING_PERIOD_US
"""
from .formulas import (
    pressure_to_altitude,
    altitude_change,
)
from .constants import (
    PRESSURE_STANDARD_ATMOSPHERE_HPA,
    SENSOR_SAMPLING_PERIOD_SECONDS,
    SENSOR_SAMPLING_PERIOD_US,
    DEFAULT_SMOOTHING_FACTOR,
    DEFAULT_ALTITUDE_CHANGE_THRESHOLD_M,
)

__all__ = [
    # formulas
    "pressure_to_altitude",
    "altitude_change",
    # constants
    "PRESSURE_STANDARD_ATMOSPHERE_HPA",
    "SENSOR_SAMPLING_PERIOD_SECONDS",
    "SENSOR_SAMPLING_PERIOD_US",
    "DEFAULT_SMOOTHING_FACTOR",
    "DEFAULT_ALTITUDE_CHANGE_THRESHOLD_M",
]
