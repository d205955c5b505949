"""
Tests for application settings.

Tests defaults, environment overrides and validation.
"""

import pytest
from pydantic import ValidationError

from altisum.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Ignore ALTISUM_* variables of the developer machine."""
    for name in [
        "ALTISUM_LOG_LEVEL",
        "ALTISUM_SAMPLING_PERIOD_SECONDS",
        "ALTISUM_SMOOTHING_FACTOR",
        "ALTISUM_ALTITUDE_CHANGE_THRESHOLD_M",
        "ALTISUM_REFERENCE_PRESSURE_HPA",
    ]:
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.smoothing_factor == 0.3
        assert settings.altitude_change_threshold_m == 3.0
        assert settings.reference_pressure_hpa == 1013.25
        assert settings.sampling_period_us == 5_000_000

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("ALTISUM_ALTITUDE_CHANGE_THRESHOLD_M", "5")
        monkeypatch.setenv("ALTISUM_SAMPLING_PERIOD_SECONDS", "1.5")

        settings = Settings(_env_file=None)

        assert settings.altitude_change_threshold_m == 5.0
        assert settings.sampling_period_us == 1_500_000

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level=" debug ").log_level == "DEBUG"

    @pytest.mark.parametrize("kwargs", [
        {"log_level": "chatty"},
        {"smoothing_factor": 0.0},
        {"smoothing_factor": 1.1},
        {"altitude_change_threshold_m": -0.5},
        {"reference_pressure_hpa": 0.0},
        {"sampling_period_seconds": -5.0},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **kwargs)
