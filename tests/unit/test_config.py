"""Settings validation."""

from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from cohort_insights.core.config import Settings


def test_defaults() -> None:
    """Default thresholds and flags."""
    settings = Settings()
    assert settings.kpi_dropout_rate_threshold == 15
    assert settings.kpi_low_employment_threshold == 30
    assert settings.kpi_enrollment_stagnation_days == 14
    assert settings.kpi_alert_dedup_enabled is True
    assert settings.portfolio_role == "PORTFOLIO_MANAGER"
    assert settings.timezone == ZoneInfo("UTC")


def test_unknown_timezone_rejected() -> None:
    """An unknown scheduler timezone fails validation."""
    with pytest.raises(ValidationError):
        Settings(scheduler_timezone="Mars/Olympus_Mons")


@pytest.mark.parametrize(
    "overrides",
    [
        {"kpi_dropout_rate_threshold": 120},
        {"kpi_low_employment_threshold": -1},
        {"kpi_enrollment_stagnation_days": 0},
        {"kpi_previous_period_days": 0},
    ],
)
def test_threshold_ranges(overrides: dict) -> None:
    """Out-of-range thresholds fail validation."""
    with pytest.raises(ValidationError):
        Settings(**overrides)
