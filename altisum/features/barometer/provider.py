"""
Sensor provider interface.

The host platform (sensor framework, serial bridge, simulator) implements
SensorProvider. AltitudeSumManager only talks to the provider through
find/register/unregister, so it runs without hardware.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Optional, Protocol


class SensorError(Exception):
    """Raised by a provider that cannot talk to its sensor."""
    pass


@dataclass(frozen=True)
class SensorHandle:
    """Opaque reference to a pressure sensor."""
    name: str
    vendor: Optional[str] = None


class PressureListener(Protocol):
    """Receiver of sensor deliveries."""

    def on_sensor_changed(self, value_hpa: float) -> None:
        ...

    def on_accuracy_changed(self, sensor: SensorHandle, accuracy: int) -> None:
        ...


class SensorProvider(ABC):
    """
    Abstract access to the host's pressure sensor.

    Deliveries for one sensor arrive in sampling order on the
    delivery context passed to register().
    """

    @abstractmethod
    def find_pressure_sensor(self) -> Optional[SensorHandle]:
        """Return the default pressure sensor, or None if there is none."""
        pass

    @abstractmethod
    def register(
        self,
        listener: PressureListener,
        sensor: SensorHandle,
        sampling_period_us: int,
        delivery_context: Any = None
    ) -> bool:
        """
        Start periodic delivery to the listener.

        Returns:
            True if the sensor accepted the registration
        """
        pass

    @abstractmethod
    def unregister(self, listener: PressureListener) -> None:
        """Stop delivery. Must be safe for an unknown listener."""
        pass


class InMemorySensorProvider(SensorProvider):
    """
    Provider fed by hand, for replays and tests.

    Readings passed to emit() are delivered synchronously to every
    registered listener.

    Usage:
        provider = InMemorySensorProvider()
        manager.start(provider)
        provider.emit(1000.0)
    """

    DEFAULT_SENSOR = SensorHandle(name="In-memory pressure sensor")

    def __init__(
        self,
        sensor: Optional[SensorHandle] = DEFAULT_SENSOR,
        accept_registration: bool = True
    ):
        """
        Args:
            sensor: Sensor to report, None simulates missing hardware
            accept_registration: False simulates a rejected registration
        """
        self.sensor = sensor
        self.accept_registration = accept_registration
        self._listeners: List[PressureListener] = []
        self.sampling_period_us: Optional[int] = None

    @property
    def listeners(self) -> List[PressureListener]:
        return list(self._listeners)

    def find_pressure_sensor(self) -> Optional[SensorHandle]:
        return self.sensor

    def register(
        self,
        listener: PressureListener,
        sensor: SensorHandle,
        sampling_period_us: int,
        delivery_context: Any = None
    ) -> bool:
        if not self.accept_registration or sensor != self.sensor:
            return False

        if listener not in self._listeners:
            self._listeners.append(listener)
        self.sampling_period_us = sampling_period_us
        return True

    def unregister(self, listener: PressureListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, value_hpa: float) -> int:
        """
        Deliver one reading to all listeners.

        Returns:
            Number of listeners that received the reading
        """
        listeners = self.listeners
        for listener in listeners:
            listener.on_sensor_changed(value_hpa)
        return len(listeners)

    def emit_accuracy(self, accuracy: int) -> None:
        for listener in self.listeners:
            listener.on_accuracy_changed(self.sensor, accuracy)
