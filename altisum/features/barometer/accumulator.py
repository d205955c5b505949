"""
Pressure reading accumulator.

apply_reading() is the whole state machine:

    EmptyState --first reading--> TrackingState --reading--> TrackingState

The only way back to EmptyState is a reset.
"""

import logging
from typing import Optional

from .models import (
    EMPTY,
    AccumulatorState,
    AltitudeTotals,
    Baselines,
    EmptyState,
    TrackingState,
)
from .smoothing import SmoothingFunction, compute_changes_with_smoothing

logger = logging.getLogger(__name__)


def apply_reading(
    state: AccumulatorState,
    value_hpa: float,
    smoothing: SmoothingFunction = compute_changes_with_smoothing
) -> AccumulatorState:
    """
    Apply one pressure reading and return the next state.

    Args:
        state: Current accumulator state
        value_hpa: Raw pressure reading (not validated)
        smoothing: Function deciding whether the reading moves the baseline

    Returns:
        New TrackingState (the input state is never modified)
    """
    if isinstance(state, EmptyState):
        # First sample only establishes the baseline
        return TrackingState(
            baselines=Baselines(last_accepted_hpa=value_hpa, last_seen_hpa=value_hpa),
            totals=AltitudeTotals(),
        )

    baselines = state.baselines
    totals = state.totals
    last_accepted_hpa = baselines.last_accepted_hpa

    change = smoothing(baselines.last_accepted_hpa, baselines.last_seen_hpa, value_hpa)
    if change is not None:
        totals = totals.add(change)
        last_accepted_hpa = change.current_hpa

    return TrackingState(
        baselines=Baselines(last_accepted_hpa=last_accepted_hpa, last_seen_hpa=value_hpa),
        totals=totals,
    )


class AltitudeAccumulator:
    """
    Holds the current accumulator state.

    The state is one immutable value swapped by a single assignment,
    so readers on another thread always see gain and loss together.
    Writers must be serialized by the caller.
    """

    def __init__(self, smoothing: SmoothingFunction = compute_changes_with_smoothing):
        self.smoothing = smoothing
        self._state: AccumulatorState = EMPTY

    @property
    def state(self) -> AccumulatorState:
        return self._state

    @property
    def totals(self) -> Optional[AltitudeTotals]:
        """Totals, or None before the first reading."""
        return self._state.totals

    @property
    def baselines(self) -> Optional[Baselines]:
        return self._state.baselines

    def apply(self, value_hpa: float) -> AccumulatorState:
        """Apply one reading and store the resulting state."""
        self._state = apply_reading(self._state, value_hpa, self.smoothing)

        totals = self._state.totals
        logger.debug(f"altitude gain: {totals.gain_m}, altitude loss: {totals.loss_m}")
        return self._state

    def reset(self):
        """Drop baselines and totals."""
        logger.debug("Reset")
        self._state = EMPTY
