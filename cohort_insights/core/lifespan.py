"""Application lifespan: startup and shutdown.

Wires infrastructure only: logging, the in-memory fallback store, the
periodic job scheduler and the SQL engine.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from cohort_insights.core.config import get_settings
from cohort_insights.infrastructure.jobs import build_scheduler, memory_repositories
from cohort_insights.infrastructure.persistence import database
from cohort_insights.infrastructure.persistence.memory_store import (
    InMemoryRecordStore,
)
from cohort_insights.shared.telemetry import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit stop the scheduler and dispose the engine."""
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    if getattr(app.state, "memory_store", None) is None:
        app.state.memory_store = InMemoryRecordStore()

    app.state.scheduler = None
    if settings.scheduler_enabled:
        repositories = (
            None
            if database.is_sql_configured()
            else memory_repositories(app.state.memory_store)
        )
        scheduler = build_scheduler(settings, repositories)
        scheduler.start()
        app.state.scheduler = scheduler
        logger.info(
            "Scheduler enabled (%s): %s",
            settings.scheduler_timezone,
            ", ".join(scheduler.job_names),
        )

    yield

    # ---- Shutdown ----
    if app.state.scheduler is not None:
        await app.state.scheduler.stop()
        app.state.scheduler = None

    if database.engine is not None:
        await database.dispose_engine()
        logger.info("Database engine disposed")
