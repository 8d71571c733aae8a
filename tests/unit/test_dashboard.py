"""Portfolio dashboard and recent activity use cases."""

from datetime import UTC, datetime

import pytest

from cohort_insights.application.dtos.records import AuditLogRecord, NotificationRecord
from cohort_insights.application.use_cases.dashboard import (
    GetPortfolioDashboardUseCase,
    GetRecentActivityUseCase,
    alert_summary,
    recent_activities,
)
from cohort_insights.domain.exceptions import ValidationException
from cohort_insights.infrastructure.persistence.memory_store import InMemoryRecordStore
from cohort_insights.shared.enums import NotificationType, Priority


def _log(log_id: str, hour: int) -> AuditLogRecord:
    return AuditLogRecord(
        log_id, "KPI_ANOMALY_DETECTED", datetime(2025, 3, 2, hour, tzinfo=UTC),
        entity_type="LOW_EMPLOYMENT", description=f"entry {log_id}",
    )


async def test_dashboard_summary(portfolio_store) -> None:
    """Dashboard summary over the fixture portfolio."""
    use_case = GetPortfolioDashboardUseCase(portfolio_store, portfolio_role="PORTFOLIO_MANAGER")
    dashboard = await use_case.execute()

    summary = dashboard.summary
    assert summary.total_partners == 2
    assert summary.active_partners == 1
    assert summary.total_programs == 2
    assert summary.total_cohorts == 2
    assert summary.active_cohorts == 1
    assert summary.total_participants == 4
    assert summary.total_enrollments == 4
    assert summary.overall_completion_rate == 50.0
    assert summary.overall_dropout_rate == 25.0
    assert summary.overall_employment_rate == 50.0
    assert dashboard.completion.active_rate == 25.0
    assert dashboard.alert_summary.total_unresolved == 1
    assert dashboard.alert_summary.high_priority_unresolved == 1
    assert [a.activity_type for a in dashboard.recent_activities] == ["KPI_ANOMALY_DETECTED"]
    assert dashboard.quick_links.reports.startswith("/api/v1/portfolio/reports/")


async def test_dashboard_on_empty_store() -> None:
    """An empty store gives a zero dashboard."""
    dashboard = await GetPortfolioDashboardUseCase(
        InMemoryRecordStore(), portfolio_role="PORTFOLIO_MANAGER"
    ).execute()
    assert dashboard.summary.total_enrollments == 0
    assert dashboard.summary.overall_completion_rate == 0.0
    assert dashboard.recent_activities == []
    assert dashboard.alert_summary.total_unresolved == 0


def test_recent_activities_newest_first_and_limited() -> None:
    """Activities are newest first and cut to the limit."""
    logs = [_log("l1", 8), _log("l2", 12), _log("l3", 10)]
    activities = recent_activities(logs, 2)
    assert [a.description for a in activities] == ["entry l2", "entry l3"]


def test_alert_summary_counts_unread_alerts_for_recipients() -> None:
    """Only unread ALERT notifications count, grouped by priority."""
    created = datetime(2025, 3, 2, tzinfo=UTC)
    notifications = [
        NotificationRecord("n1", "u1", NotificationType.ALERT, "t", "m", Priority.URGENT, created),
        NotificationRecord("n2", "u1", NotificationType.ALERT, "t", "m", Priority.MEDIUM, created),
        NotificationRecord("n3", "u1", NotificationType.ALERT, "t", "m", Priority.HIGH, created, is_read=True),
        NotificationRecord("n4", "u1", NotificationType.INFO, "t", "m", Priority.HIGH, created),
        NotificationRecord("n5", "u9", NotificationType.ALERT, "t", "m", Priority.HIGH, created),
    ]
    summary = alert_summary(notifications, {"u1"})
    assert summary.total_unresolved == 2
    assert summary.high_priority_unresolved == 1
    assert summary.medium_priority_unresolved == 1


async def test_recent_activity_use_case(portfolio_store) -> None:
    """The activity use case reads audit logs from the store."""
    portfolio_store.audit_logs.extend([_log("l2", 9), _log("l3", 7)])
    activities = await GetRecentActivityUseCase(portfolio_store).execute(limit=2)
    assert [a.description for a in activities] == ["entry l2", "entry l3"]


async def test_recent_activity_rejects_non_positive_limit(portfolio_store) -> None:
    """A limit below 1 raises ValidationException."""
    with pytest.raises(ValidationException) as exc_info:
        await GetRecentActivityUseCase(portfolio_store).execute(limit=0)
    assert exc_info.value.details == {"field": "limit"}
