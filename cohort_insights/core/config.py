"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. KPI thresholds and scheduler options are validated
at load time.
"""

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Everything has a default so the analytics engine can run against an
    in-memory record store; the SQL record store needs DATABASE_URL.
    """

    # App
    app_name: str = "cohort-insights"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database (read snapshots + alert/audit writes). Empty = SQL store disabled.
    database_url: str = ""
    database_echo: bool = False
    db_pool_size: int | None = None
    db_max_overflow: int | None = None
    db_command_timeout: int | None = None

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_id_header: str = "X-Request-ID"

    # Scheduler: calendar rules are evaluated in this timezone.
    scheduler_enabled: bool = False
    scheduler_timezone: str = "UTC"

    # KPI anomaly thresholds (percentages and days)
    kpi_dropout_rate_threshold: float = 15.0
    kpi_dropout_increase_threshold: float = 5.0
    kpi_low_employment_threshold: float = 30.0
    kpi_enrollment_stagnation_days: int = 14
    kpi_previous_period_days: int = 30
    # One alert per (day, alert type) when True; re-runs duplicate alerts when False.
    kpi_alert_dedup_enabled: bool = True

    # Users with this role receive KPI alerts and own scheduled reports.
    portfolio_role: str = "PORTFOLIO_MANAGER"

    # Reporting
    report_output_dir: str = "/var/cohort-insights/reports"
    report_format: str = "JSON"

    # Dashboard
    recent_activity_limit: int = 20

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_scheduler_and_thresholds(self) -> "Settings":
        """Validate scheduler timezone and KPI threshold ranges."""
        try:
            ZoneInfo(self.scheduler_timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(
                f"SCHEDULER_TIMEZONE is not a known IANA timezone: {self.scheduler_timezone!r}"
            ) from e
        for name in (
            "kpi_dropout_rate_threshold",
            "kpi_dropout_increase_threshold",
            "kpi_low_employment_threshold",
        ):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ValueError(f"{name.upper()} must be between 0 and 100, got {value}")
        if self.kpi_enrollment_stagnation_days < 1:
            raise ValueError("KPI_ENROLLMENT_STAGNATION_DAYS must be >= 1")
        if self.kpi_previous_period_days < 1:
            raise ValueError("KPI_PREVIOUS_PERIOD_DAYS must be >= 1")
        if self.recent_activity_limit < 0:
            raise ValueError("RECENT_ACTIVITY_LIMIT must be >= 0")
        return self

    @property
    def timezone(self) -> ZoneInfo:
        """Scheduler timezone as a ZoneInfo."""
        return ZoneInfo(self.scheduler_timezone)


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
