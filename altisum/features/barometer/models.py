"""
Barometer state types.

Only frozen dataclasses and enums, no logic beyond small helpers.
A state value is replaced as a whole, never mutated.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class SessionState(str, Enum):
    """Whether readings from the pressure sensor are processed."""
    DISARMED = "disarmed"   # Not listening or no sensor
    ARMED = "armed"         # Listening, readings processed


@dataclass(frozen=True)
class AltitudeChange:
    """
    Result of one accepted smoothing step.

    Gain and loss are both non-negative; at most one is non-zero.
    """
    current_hpa: float      # New accepted baseline
    gain_m: float = 0.0
    loss_m: float = 0.0


@dataclass(frozen=True)
class AltitudeTotals:
    """Cumulative altitude gain and loss of a session."""
    gain_m: float = 0.0
    loss_m: float = 0.0

    def add(self, change: AltitudeChange) -> "AltitudeTotals":
        """Return new totals with the change applied."""
        return AltitudeTotals(
            gain_m=self.gain_m + change.gain_m,
            loss_m=self.loss_m + change.loss_m,
        )


@dataclass(frozen=True)
class Baselines:
    """Pressure references for the next smoothing decision."""
    last_accepted_hpa: float    # Stable reference deltas are measured from
    last_seen_hpa: float        # Previous raw reading


@dataclass(frozen=True)
class EmptyState:
    """No reading seen since the last reset."""

    @property
    def totals(self) -> Optional[AltitudeTotals]:
        return None

    @property
    def baselines(self) -> Optional[Baselines]:
        return None


@dataclass(frozen=True)
class TrackingState:
    """Baseline established, totals defined."""
    baselines: Baselines
    totals: AltitudeTotals


AccumulatorState = Union[EmptyState, TrackingState]

EMPTY = EmptyState()
