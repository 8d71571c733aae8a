"""API dependencies.

Provides FastAPI Depends() for the record store and application use cases.
The record store is SQL-backed when DATABASE_URL is set; otherwise the
in-memory store created in the lifespan is used.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request

from cohort_insights.application.interfaces.repositories import IRecordStore
from cohort_insights.application.use_cases.analytics import (
    GetPortfolioAnalyticsUseCase,
)
from cohort_insights.application.use_cases.dashboard import (
    GetPortfolioDashboardUseCase,
    GetRecentActivityUseCase,
)
from cohort_insights.application.use_cases.scheduled_reports import (
    GeneratePortfolioReportUseCase,
)
from cohort_insights.core.config import Settings, get_settings
from cohort_insights.infrastructure.persistence.database import (
    get_db,
    is_sql_configured,
)
from cohort_insights.infrastructure.persistence.memory_store import (
    InMemoryRecordStore,
)
from cohort_insights.infrastructure.persistence.repositories import SqlRecordStore
from cohort_insights.infrastructure.services.report_exporter import (
    LocalJsonReportExporter,
)


async def get_record_store(request: Request) -> AsyncGenerator[IRecordStore, None]:
    """Yield a SQL record store (read session) or the app's in-memory store."""
    if is_sql_configured():
        async for session in get_db():
            yield SqlRecordStore(session)
    else:
        store = getattr(request.app.state, "memory_store", None)
        yield store if store is not None else InMemoryRecordStore()


RecordStoreDep = Annotated[IRecordStore, Depends(get_record_store)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_analytics_use_case(store: RecordStoreDep) -> GetPortfolioAnalyticsUseCase:
    return GetPortfolioAnalyticsUseCase(store)


def get_dashboard_use_case(
    store: RecordStoreDep, settings: SettingsDep
) -> GetPortfolioDashboardUseCase:
    return GetPortfolioDashboardUseCase(
        store,
        portfolio_role=settings.portfolio_role,
        recent_activity_limit=settings.recent_activity_limit,
    )


def get_recent_activity_use_case(store: RecordStoreDep) -> GetRecentActivityUseCase:
    return GetRecentActivityUseCase(store)


def get_report_use_case(
    store: RecordStoreDep, settings: SettingsDep
) -> GeneratePortfolioReportUseCase:
    return GeneratePortfolioReportUseCase(
        store,
        LocalJsonReportExporter(settings.report_output_dir, settings.report_format),
        timezone=settings.timezone,
    )
