"""
Physical and sensor constants.

Single source of truth for the numbers used by the barometric formula
and the pressure sensor session.
"""

# Standard atmosphere at sea level (hPa)
PRESSURE_STANDARD_ATMOSPHERE_HPA = 1013.25

# International barometric formula: h = 44330 * (1 - (p / p0) ** (1 / 5.255))
BAROMETRIC_SCALE_M = 44330.0
BAROMETRIC_EXPONENT = 1.0 / 5.255

# Requested delivery period of the pressure sensor
SENSOR_SAMPLING_PERIOD_SECONDS = 5
SENSOR_SAMPLING_PERIOD_US = SENSOR_SAMPLING_PERIOD_SECONDS * 1_000_000

# Defaults of the hysteresis step
DEFAULT_SMOOTHING_FACTOR = 0.3
DEFAULT_ALTITUDE_CHANGE_THRESHOLD_M = 3.0
