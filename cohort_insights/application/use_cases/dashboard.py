"""Portfolio dashboard use case: headline counts, rates, activity feed, alerts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cohort_insights.application.dtos.dashboard import (
    DashboardAlertSummary,
    DashboardSummary,
    PortfolioDashboard,
    RecentActivity,
)
from cohort_insights.application.services.analytics import (
    compute_completion_metrics,
    compute_employment_analytics,
)
from cohort_insights.domain.enums import CohortStatus
from cohort_insights.domain.exceptions import ValidationException
from cohort_insights.shared.enums import NotificationType, Priority
from cohort_insights.shared.telemetry import get_logger, traced
from cohort_insights.shared.utils.datetime import ensure_utc

if TYPE_CHECKING:
    from cohort_insights.application.dtos.records import (
        AuditLogRecord,
        NotificationRecord,
        UserRecord,
    )
    from cohort_insights.application.interfaces.repositories import IRecordStore

logger = get_logger(__name__)

DEFAULT_RECENT_ACTIVITY_LIMIT = 20
_HIGH_PRIORITIES = (Priority.HIGH, Priority.URGENT)


def recent_activities(
    audit_logs: list[AuditLogRecord], limit: int
) -> list[RecentActivity]:
    """Newest audit entries first, at most limit."""
    newest = sorted(audit_logs, key=lambda log: ensure_utc(log.created_at), reverse=True)
    return [
        RecentActivity(
            activity_type=log.action,
            description=log.description,
            timestamp=log.created_at,
            entity_type=log.entity_type,
            entity_id=log.entity_id,
        )
        for log in newest[:limit]
    ]


def alert_summary(
    notifications: list[NotificationRecord], recipient_ids: set[str]
) -> DashboardAlertSummary:
    """Count unread ALERT notifications addressed to the given users."""
    unread = [
        n
        for n in notifications
        if n.recipient_id in recipient_ids
        and n.notification_type == NotificationType.ALERT
        and not n.is_read
    ]
    return DashboardAlertSummary(
        total_unresolved=len(unread),
        high_priority_unresolved=sum(1 for n in unread if n.priority in _HIGH_PRIORITIES),
        medium_priority_unresolved=sum(1 for n in unread if n.priority == Priority.MEDIUM),
    )


def portfolio_user_ids(users: list[UserRecord], role: str) -> set[str]:
    return {u.id for u in users if u.role == role and u.is_active}


class GetPortfolioDashboardUseCase:
    """Assembles the single-screen portfolio view.

    Runs the completion and employment modules and adds plain counts over
    partners, programs, cohorts and participants. Activity comes from the
    audit log; alerts are unread ALERT notifications for portfolio users.
    """

    def __init__(
        self,
        record_store: IRecordStore,
        portfolio_role: str,
        recent_activity_limit: int = DEFAULT_RECENT_ACTIVITY_LIMIT,
    ) -> None:
        self._store = record_store
        self._portfolio_role = portfolio_role
        self._recent_activity_limit = recent_activity_limit

    @traced("dashboard.build")
    async def execute(self) -> PortfolioDashboard:
        store = self._store
        partners = await store.list_partners()
        programs = await store.list_programs()
        cohorts = await store.list_cohorts()
        participants = await store.list_participants()
        enrollments = await store.list_enrollments()

        completion = compute_completion_metrics(enrollments)
        employment = compute_employment_analytics(
            enrollments,
            await store.list_employment_outcomes(),
            await store.list_internships(),
            participants,
            partners,
            cohorts,
            programs,
        )
        summary = DashboardSummary(
            total_partners=len(partners),
            active_partners=sum(1 for p in partners if p.is_active),
            total_programs=len(programs),
            total_cohorts=len(cohorts),
            active_cohorts=sum(1 for c in cohorts if c.status == CohortStatus.ACTIVE),
            total_participants=len(participants),
            total_enrollments=len(enrollments),
            overall_completion_rate=completion.completion_rate,
            overall_employment_rate=employment.overall_employment_rate,
            overall_dropout_rate=completion.dropout_rate,
        )

        recipients = portfolio_user_ids(await store.list_users(), self._portfolio_role)
        alerts = alert_summary(await store.list_notifications(), recipients)
        activities = recent_activities(
            await store.list_audit_logs(), self._recent_activity_limit
        )
        logger.debug(
            "Dashboard built: %d enrollments, %d unread alerts",
            summary.total_enrollments,
            alerts.total_unresolved,
        )
        return PortfolioDashboard(
            summary=summary,
            completion=completion,
            employment=employment,
            recent_activities=activities,
            alert_summary=alerts,
        )


class GetRecentActivityUseCase:
    """Audit log feed, newest first."""

    def __init__(self, record_store: IRecordStore) -> None:
        self._store = record_store

    async def execute(self, limit: int = DEFAULT_RECENT_ACTIVITY_LIMIT) -> list[RecentActivity]:
        if limit < 1:
            raise ValidationException("limit must be at least 1", "limit")
        return recent_activities(await self._store.list_audit_logs(), limit)
