"""
Altitude Sum Manager

Estimates altitude gain and loss using the pressure sensor (barometer):
- Session control: start/stop listening on a SensorProvider
- Ingestion: sensor callbacks, dropped while disarmed
- Output: gain/loss getters and filling of track points

start(), stop() and the sensor callbacks must run on one delivery
context. Getters may be called from any thread.
"""

import logging
from typing import Any, Optional

from altisum.config import settings

from .accumulator import AltitudeAccumulator
from .models import AccumulatorState, AltitudeTotals, SessionState
from .provider import SensorError, SensorHandle, SensorProvider
from .schemas import TrackPoint
from .smoothing import SmoothingFunction, make_smoothing_function

logger = logging.getLogger(__name__)


class AltitudeSumManager:
    """
    Accumulates altitude gain/loss of one recording session.

    Sensor problems never raise: a missing sensor or a rejected
    registration leaves the manager DISARMED and all getters return None.

    Example usage:
        manager = AltitudeSumManager()
        manager.start(provider)
        ...
        manager.fill(track_point)
        manager.stop(provider)
    """

    def __init__(
        self,
        smoothing: Optional[SmoothingFunction] = None,
        sampling_period_us: Optional[int] = None,
    ):
        """
        Args:
            smoothing: Smoothing function, built from settings if None
            sampling_period_us: Requested sensor period, from settings if None
        """
        if smoothing is None:
            smoothing = make_smoothing_function(
                smoothing_factor=settings.smoothing_factor,
                threshold_m=settings.altitude_change_threshold_m,
                reference_hpa=settings.reference_pressure_hpa,
            )
        if sampling_period_us is None:
            sampling_period_us = settings.sampling_period_us
        self.sampling_period_us = sampling_period_us

        self._session_state = SessionState.DISARMED
        self._accumulator = AltitudeAccumulator(smoothing)

    # === Session control ===

    @property
    def session_state(self) -> SessionState:
        return self._session_state

    @property
    def is_connected(self) -> bool:
        return self._session_state == SessionState.ARMED

    def start(self, provider: SensorProvider, delivery_context: Any = None) -> SessionState:
        """
        Start listening to the pressure sensor.

        Args:
            provider: Access to the host's sensors
            delivery_context: Passed through to provider.register()

        Returns:
            Resulting session state
        """
        # Reset before registering: deliveries may start immediately
        self._session_state = SessionState.DISARMED
        self.reset()

        sensor = provider.find_pressure_sensor()
        if sensor is None:
            logger.warning("No pressure sensor available.")
            return self._session_state

        if self._register(provider, sensor, delivery_context):
            self._session_state = SessionState.ARMED
            logger.info(f"Listening to pressure sensor {sensor.name}")
        return self._session_state

    def _register(
        self,
        provider: SensorProvider,
        sensor: SensorHandle,
        delivery_context: Any
    ) -> bool:
        try:
            registered = provider.register(
                self, sensor, self.sampling_period_us, delivery_context
            )
        except SensorError as e:
            logger.warning(f"Pressure sensor registration failed: {e}")
            return False

        if not registered:
            logger.warning(f"Pressure sensor {sensor.name} rejected registration.")
        return registered

    def stop(self, provider: SensorProvider):
        """Stop listening and drop all session data."""
        logger.debug("Stop")
        provider.unregister(self)

        self._session_state = SessionState.DISARMED
        self.reset()

    def reset(self):
        self._accumulator.reset()

    # === Sensor callbacks ===

    def on_accuracy_changed(self, sensor: SensorHandle, accuracy: int):
        logger.warning("Sensor accuracy changes are (currently) ignored.")

    def on_sensor_changed(self, value_hpa: float):
        if not self.is_connected:
            logger.warning("Not connected to sensor, cannot process data.")
            return
        self.on_sensor_value_changed(value_hpa)

    def on_sensor_value_changed(self, value_hpa: float) -> AccumulatorState:
        """Feed a reading to the accumulator without the connection check."""
        return self._accumulator.apply(value_hpa)

    # === Output ===

    @property
    def state(self) -> AccumulatorState:
        """Internal accumulator state, also while disarmed."""
        return self._accumulator.state

    def get_totals(self) -> Optional[AltitudeTotals]:
        """Consistent gain/loss snapshot, None while disarmed or without data."""
        if not self.is_connected:
            return None
        return self._accumulator.totals

    def get_altitude_gain(self) -> Optional[float]:
        totals = self.get_totals()
        return totals.gain_m if totals is not None else None

    def get_altitude_loss(self) -> Optional[float]:
        totals = self.get_totals()
        return totals.loss_m if totals is not None else None

    def fill(self, track_point: TrackPoint) -> TrackPoint:
        """
        Copy the current sums into a track point.

        Only altitude_gain and altitude_loss are written, both None
        while disarmed.
        """
        totals = self.get_totals()
        track_point.altitude_gain = totals.gain_m if totals is not None else None
        track_point.altitude_loss = totals.loss_m if totals is not None else None
        return track_point
