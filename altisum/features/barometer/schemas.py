"""
Track point schema.

Pydantic model of the record that receives altitude gain and loss.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class TrackPoint(BaseModel):
    """Single recorded point of a track."""

    time: Optional[datetime] = None

    # Position
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    altitude_m: Optional[float] = None
    speed_mps: Optional[float] = None

    # Barometric altitude sums, None = not enough data
    altitude_gain: Optional[float] = Field(default=None, ge=0)
    altitude_loss: Optional[float] = Field(default=None, ge=0)
