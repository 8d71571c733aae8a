"""Periodic portfolio jobs: repository wiring and the calendar schedule.

Each run opens its own repositories through a JobRepositoryFactory, so the
SQL variant gets a fresh transactional session per run.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

from cohort_insights.application.dtos.alerts import AnomalyCheckResult
from cohort_insights.application.dtos.reports import ReportRunResult
from cohort_insights.application.use_cases.kpi_anomaly import (
    AlertScope,
    KpiThresholds,
    RunKpiAnomalyCheckUseCase,
)
from cohort_insights.application.use_cases.scheduled_reports import (
    GeneratePortfolioReportUseCase,
)
from cohort_insights.infrastructure.persistence.database import session_scope
from cohort_insights.infrastructure.persistence.memory_store import (
    InMemoryAuditLogRepository,
    InMemoryNotificationRepository,
    InMemoryRecordStore,
)
from cohort_insights.infrastructure.persistence.repositories import (
    AuditLogRepository,
    NotificationRepository,
    SqlRecordStore,
)
from cohort_insights.infrastructure.services.report_exporter import (
    LocalJsonReportExporter,
)
from cohort_insights.infrastructure.services.scheduler import (
    JobScheduler,
    ScheduledJob,
    ScheduleRule,
    daily,
    monthly,
    weekly,
    yearly_months,
)
from cohort_insights.shared.enums import ReportPeriodKind

if TYPE_CHECKING:
    from cohort_insights.application.interfaces.repositories import (
        IAuditLogRepository,
        INotificationRepository,
        IRecordStore,
    )
    from cohort_insights.core.config import Settings

MONDAY = 0

PORTFOLIO_SCHEDULE: dict[str, ScheduleRule] = {
    "weekly_portfolio_report": weekly(MONDAY, 8),
    "monthly_portfolio_report": monthly(1, 9),
    "quarterly_portfolio_report": yearly_months({1, 4, 7, 10}, 1, 10),
    "kpi_anomaly_check": daily(6),
}

_REPORT_JOBS = {
    "weekly_portfolio_report": ReportPeriodKind.WEEKLY,
    "monthly_portfolio_report": ReportPeriodKind.MONTHLY,
    "quarterly_portfolio_report": ReportPeriodKind.QUARTERLY,
}


@dataclass(frozen=True)
class JobRepositories:
    record_store: IRecordStore
    notifications: INotificationRepository
    audit_log: IAuditLogRepository
    alert_scope: AlertScope


JobRepositoryFactory = Callable[[], AbstractAsyncContextManager[JobRepositories]]


@asynccontextmanager
async def sql_repositories() -> AsyncIterator[JobRepositories]:
    """One transactional session per job run; commits when the run returns.

    Each alert's writes go through a savepoint, so a failed alert leaves nothing
    behind in the committed session.
    """
    async with session_scope() as session:
        yield JobRepositories(
            record_store=SqlRecordStore(session),
            notifications=NotificationRepository(session),
            audit_log=AuditLogRepository(session),
            alert_scope=session.begin_nested,
        )


def memory_repositories(store: InMemoryRecordStore) -> JobRepositoryFactory:
    @asynccontextmanager
    async def factory() -> AsyncIterator[JobRepositories]:
        yield JobRepositories(
            record_store=store,
            notifications=InMemoryNotificationRepository(store),
            audit_log=InMemoryAuditLogRepository(store),
            alert_scope=store.savepoint,
        )

    return factory


async def run_kpi_anomaly_job(
    settings: Settings, repositories: JobRepositoryFactory
) -> AnomalyCheckResult:
    async with repositories() as repos:
        use_case = RunKpiAnomalyCheckUseCase(
            repos.record_store,
            repos.notifications,
            repos.audit_log,
            portfolio_role=settings.portfolio_role,
            thresholds=KpiThresholds.from_settings(settings),
            dedup_enabled=settings.kpi_alert_dedup_enabled,
            timezone=settings.timezone,
            alert_scope=repos.alert_scope,
        )
        return await use_case.run()


async def run_portfolio_report_job(
    kind: ReportPeriodKind, settings: Settings, repositories: JobRepositoryFactory
) -> ReportRunResult:
    async with repositories() as repos:
        use_case = GeneratePortfolioReportUseCase(
            repos.record_store,
            LocalJsonReportExporter(settings.report_output_dir, settings.report_format),
            timezone=settings.timezone,
        )
        return await use_case.run(kind=kind)


def build_portfolio_jobs(
    settings: Settings, repositories: JobRepositoryFactory
) -> list[ScheduledJob]:
    """The four portfolio jobs bound to PORTFOLIO_SCHEDULE."""

    def report_job(kind: ReportPeriodKind) -> Callable[[], Awaitable[ReportRunResult]]:
        async def run() -> ReportRunResult:
            return await run_portfolio_report_job(kind, settings, repositories)

        return run

    async def kpi_job() -> AnomalyCheckResult:
        return await run_kpi_anomaly_job(settings, repositories)

    jobs = [
        ScheduledJob(name, PORTFOLIO_SCHEDULE[name], report_job(kind))
        for name, kind in _REPORT_JOBS.items()
    ]
    jobs.append(ScheduledJob("kpi_anomaly_check", PORTFOLIO_SCHEDULE["kpi_anomaly_check"], kpi_job))
    return jobs


def build_scheduler(
    settings: Settings, repositories: JobRepositoryFactory | None = None
) -> JobScheduler:
    return JobScheduler(
        build_portfolio_jobs(settings, repositories or sql_repositories),
        settings.timezone,
    )
