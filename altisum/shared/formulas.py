"""
Barometric formulas.

Conversions between absolute pressure and altitude above the
reference pressure level.
"""

from .constants import (
    BAROMETRIC_EXPONENT,
    BAROMETRIC_SCALE_M,
    PRESSURE_STANDARD_ATMOSPHERE_HPA,
)


def pressure_to_altitude(
    pressure_hpa: float,
    reference_hpa: float = PRESSURE_STANDARD_ATMOSPHERE_HPA
) -> float:
    """
    Calculate altitude using the international barometric formula.

    Formula: h = 44330 * (1 - (p / p0) ^ (1 / 5.255))

    Args:
        pressure_hpa: Measured absolute pressure in hPa
        reference_hpa: Pressure at altitude 0 (sea level by default)

    Returns:
        Altitude in metres (negative above the reference pressure)

    Notes:
        - Assumes the standard atmosphere temperature profile
        - Absolute values drift with the weather; differences over a few
          minutes are reliable
    """
    return BAROMETRIC_SCALE_M * (1.0 - (pressure_hpa / reference_hpa) ** BAROMETRIC_EXPONENT)


def altitude_change(
    before_hpa: float,
    after_hpa: float,
    reference_hpa: float = PRESSURE_STANDARD_ATMOSPHERE_HPA
) -> float:
    """
    Altitude difference between two pressure readings.

    Args:
        before_hpa: Earlier pressure in hPa
        after_hpa: Later pressure in hPa
        reference_hpa: Reference pressure for the formula

    Returns:
        Metres climbed (positive) or descended (negative)
    """
    return (
        pressure_to_altitude(after_hpa, reference_hpa)
        - pressure_to_altitude(before_hpa, reference_hpa)
    )
