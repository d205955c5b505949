"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
Every value can be overridden with an ALTISUM_* environment variable.
"""

import logging
import sys
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from altisum.shared.constants import (
    DEFAULT_ALTITUDE_CHANGE_THRESHOLD_M,
    DEFAULT_SMOOTHING_FACTOR,
    PRESSURE_STANDARD_ATMOSPHERE_HPA,
    SENSOR_SAMPLING_PERIOD_SECONDS,
)


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    log_level: str = Field(default="INFO", description="Logging level")

    # === Sensor ===
    sampling_period_seconds: float = Field(
        default=float(SENSOR_SAMPLING_PERIOD_SECONDS),
        description="Requested delivery period of the pressure sensor"
    )

    # === Smoothing ===
    smoothing_factor: float = Field(
        default=DEFAULT_SMOOTHING_FACTOR,
        description="Weight of the newest reading in exponential smoothing"
    )
    altitude_change_threshold_m: float = Field(
        default=DEFAULT_ALTITUDE_CHANGE_THRESHOLD_M,
        description="Altitude changes below this are treated as sensor noise"
    )
    reference_pressure_hpa: float = Field(
        default=PRESSURE_STANDARD_ATMOSPHERE_HPA,
        description="Sea level reference pressure for the barometric formula"
    )

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept 'debug', 'Info', etc."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator('sampling_period_seconds', 'reference_pressure_hpa')
    @classmethod
    def must_be_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("must be positive")
        return v

    @field_validator('smoothing_factor')
    @classmethod
    def check_smoothing_factor(cls, v: float) -> float:
        """Factor 1.0 disables smoothing, 0.0 would ignore every new reading."""
        if not 0 < v <= 1:
            raise ValueError("smoothing_factor must be in (0, 1]")
        return v

    @field_validator('altitude_change_threshold_m')
    @classmethod
    def check_threshold(cls, v: float) -> float:
        if v < 0:
            raise ValueError("altitude_change_threshold_m must not be negative")
        return v

    @property
    def sampling_period_us(self) -> int:
        """Sampling period in microseconds, as sensor providers expect it."""
        return int(self.sampling_period_seconds * 1_000_000)

    model_config = SettingsConfigDict(
        env_prefix="ALTISUM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging the same way for every entry point."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


# Global settings instance
settings = Settings()
