"""
Barometric altitude gain/loss module.

Usage:
    from altisum.features.barometer import AltitudeSumManager, TrackPoint
    from altisum.features.barometer import InMemorySensorProvider

Components:
- AltitudeSumManager: Session control, sensor callbacks, output
- AltitudeAccumulator / apply_reading: Reading-by-reading state machine
- compute_changes_with_smoothing: Default noise filter (hysteresis)
- SensorProvider: Interface to the host's pressure sensor
- TrackPoint: Pydantic record receiving gain/loss
"""

from .models import (
    SessionState,
    AltitudeChange,
    AltitudeTotals,
    Baselines,
    EmptyState,
    TrackingState,
    AccumulatorState,
    EMPTY,
)
from .smoothing import (
    SmoothingFunction,
    compute_changes_with_smoothing,
    make_smoothing_function,
)
from .accumulator import AltitudeAccumulator, apply_reading
from .provider import (
    SensorError,
    SensorHandle,
    PressureListener,
    SensorProvider,
    InMemorySensorProvider,
)
from .schemas import TrackPoint
from .service import AltitudeSumManager

__all__ = [
    # Models
    "SessionState",
    "AltitudeChange",
    "AltitudeTotals",
    "Baselines",
    "EmptyState",
    "TrackingState",
    "AccumulatorState",
    "EMPTY",
    # Smoothing
    "SmoothingFunction",
    "compute_changes_with_smoothing",
    "make_smoothing_function",
    # Accumulator
    "AltitudeAccumulator",
    "apply_reading",
    # Provider
    "SensorError",
    "SensorHandle",
    "PressureListener",
    "SensorProvider",
    "InMemorySensorProvider",
    # Schema
    "TrackPoint",
    # Service
    "AltitudeSumManager",
]
