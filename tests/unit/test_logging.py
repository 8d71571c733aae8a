"""Logging setup for the app and the scheduled jobs."""

import logging

import pytest

from cohort_insights.core.config import get_settings
from cohort_insights.shared.telemetry import get_logger, setup_logging


@pytest.fixture
def fresh_settings(monkeypatch):
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.mark.parametrize("name", ["sqlalchemy.engine", "asyncpg", "asyncio"])
def test_driver_loggers_are_quieted(fresh_settings, name: str) -> None:
    """Database driver and event loop loggers only report warnings."""
    fresh_settings.setenv("DATABASE_ECHO", "false")
    setup_logging()
    assert logging.getLogger(name).level == logging.WARNING


def test_database_echo_keeps_sqlalchemy_at_info(fresh_settings) -> None:
    """DATABASE_ECHO=true lets SQLAlchemy engine logging through at INFO."""
    fresh_settings.setenv("DATABASE_ECHO", "true")
    setup_logging()
    assert logging.getLogger("sqlalchemy.engine").level == logging.INFO
    assert logging.getLogger("asyncpg").level == logging.WARNING


def test_get_logger_uses_module_name() -> None:
    """get_logger returns the stdlib logger of that name."""
    assert get_logger("cohort_insights.jobs") is logging.getLogger("cohort_insights.jobs")
