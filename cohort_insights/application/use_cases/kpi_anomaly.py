"""KPI anomaly check: compare portfolio metrics to thresholds and raise alerts.

Each breach becomes one ALERT notification per active, verified portfolio
user plus one audit row, written together inside one alert scope. Checks are
independent: a failing check is logged and the remaining checks still run.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from contextlib import AbstractAsyncContextManager, nullcontext
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from cohort_insights.application.dtos.alerts import (
    AnomalyCheckResult,
    AuditLogEntryCreate,
    KpiAlert,
    NotificationCreate,
)
from cohort_insights.application.services.analytics import (
    compute_completion_metrics,
    compute_employment_analytics,
)
from cohort_insights.shared.enums import (
    AuditAction,
    KpiAlertType,
    NotificationType,
    Priority,
)
from cohort_insights.shared.telemetry import add_span_attributes, get_logger, traced
from cohort_insights.shared.utils.datetime import today_in

if TYPE_CHECKING:
    from cohort_insights.application.dtos.records import EnrollmentRecord, UserRecord
    from cohort_insights.application.interfaces.repositories import (
        IAuditLogRepository,
        INotificationRepository,
        IRecordStore,
    )
    from cohort_insights.core.config import Settings

logger = get_logger(__name__)

# Opens an atomic unit for one alert's writes; rolls them back if the block raises.
AlertScope = Callable[[], AbstractAsyncContextManager[object]]


@dataclass(frozen=True)
class KpiThresholds:
    """Alert thresholds; rates in percent, windows in days."""

    dropout_rate: float = 15.0
    dropout_increase: float = 5.0
    low_employment: float = 30.0
    stagnation_days: int = 14
    previous_period_days: int = 30

    @classmethod
    def from_settings(cls, settings: Settings) -> KpiThresholds:
        return cls(
            dropout_rate=settings.kpi_dropout_rate_threshold,
            dropout_increase=settings.kpi_dropout_increase_threshold,
            low_employment=settings.kpi_low_employment_threshold,
            stagnation_days=settings.kpi_enrollment_stagnation_days,
            previous_period_days=settings.kpi_previous_period_days,
        )


def previous_period_enrollments(
    enrollments: list[EnrollmentRecord], today: date, period_days: int
) -> list[EnrollmentRecord]:
    """Enrollments dated in the period_days window ending period_days ago (inclusive)."""
    end = today - timedelta(days=period_days)
    start = end - timedelta(days=period_days)
    return [
        e
        for e in enrollments
        if e.enrollment_date is not None and start <= e.enrollment_date <= end
    ]


class RunKpiAnomalyCheckUseCase:
    """Runs the dropout, employment and stagnation checks once."""

    def __init__(
        self,
        record_store: IRecordStore,
        notification_repo: INotificationRepository,
        audit_log_repo: IAuditLogRepository,
        *,
        portfolio_role: str,
        thresholds: KpiThresholds | None = None,
        dedup_enabled: bool = True,
        timezone: ZoneInfo | None = None,
        alert_scope: AlertScope | None = None,
    ) -> None:
        self._store = record_store
        self._notification_repo = notification_repo
        self._audit_log_repo = audit_log_repo
        self._portfolio_role = portfolio_role
        self._thresholds = thresholds or KpiThresholds()
        self._dedup_enabled = dedup_enabled
        self._timezone = timezone
        self._alert_scope = alert_scope or nullcontext

    @traced("kpi_anomaly.run")
    async def run(self, *, today: date | None = None) -> AnomalyCheckResult:
        """Run every check; never raises.

        Args:
            today: Calendar day the check runs for (defaults to today in the
                configured timezone).

        Returns:
            AnomalyCheckResult listing raised, suppressed and failed checks.
        """
        today = today or today_in(self._timezone)
        try:
            recipients = await self._recipients()
            if not recipients:
                logger.warning(
                    "No active portfolio users with role %s; skipping KPI anomaly check",
                    self._portfolio_role,
                )
                return AnomalyCheckResult(skipped_reason="no portfolio recipients")
            enrollments = await self._store.list_enrollments()
        except Exception as e:
            logger.exception("KPI anomaly check could not load records")
            return AnomalyCheckResult(failed_checks=["load"], skipped_reason=str(e))

        checks: list[tuple[str, Callable[[], Awaitable[KpiAlert | None]]]] = [
            ("dropout", lambda: self.check_dropout(enrollments, today)),
            ("employment", lambda: self.check_employment(enrollments)),
            ("stagnation", lambda: self.check_stagnation(enrollments, today)),
        ]
        raised: list[KpiAlert] = []
        suppressed: list[KpiAlertType] = []
        failed: list[str] = []
        since = self._start_of_day(today)
        for name, check in checks:
            try:
                alert = await check()
                if alert is None:
                    continue
                if self._dedup_enabled and await self._audit_log_repo.exists_since(
                    AuditAction.KPI_ANOMALY_DETECTED.value, alert.alert_type.value, since
                ):
                    logger.info("Alert %s already raised today; suppressed", alert.alert_type.value)
                    suppressed.append(alert.alert_type)
                    continue
                async with self._alert_scope():
                    await self._raise(alert, recipients)
                raised.append(alert)
            except Exception:
                logger.exception("KPI check %s failed", name)
                failed.append(name)

        add_span_attributes(alerts_raised=len(raised), checks_failed=len(failed))
        logger.info(
            "KPI anomaly check done: %d raised, %d suppressed, %d failed",
            len(raised),
            len(suppressed),
            len(failed),
        )
        return AnomalyCheckResult(
            recipients=len(recipients),
            raised=raised,
            suppressed=suppressed,
            failed_checks=failed,
        )

    async def check_dropout(
        self, enrollments: list[EnrollmentRecord], today: date
    ) -> KpiAlert | None:
        """Alert when the dropout rate is high or jumped since the previous period."""
        t = self._thresholds
        current = compute_completion_metrics(enrollments).dropout_rate
        previous = compute_completion_metrics(
            previous_period_enrollments(enrollments, today, t.previous_period_days)
        ).dropout_rate
        spiked = previous > 0 and current - previous > t.dropout_increase
        if current <= t.dropout_rate and not spiked:
            return None
        return KpiAlert(
            alert_type=KpiAlertType.DROPOUT_SPIKE,
            title="Dropout Spike Alert",
            message=(
                f"Portfolio dropout rate is {current:.2f}% "
                f"(threshold {t.dropout_rate:.2f}%, previous period {previous:.2f}%)."
            ),
            priority=Priority.HIGH,
        )

    async def check_employment(
        self, enrollments: list[EnrollmentRecord]
    ) -> KpiAlert | None:
        """Alert when the employment rate of completed enrollments is low.

        With no completed enrollments the rate is the guarded 0%, which alerts.
        """
        store = self._store
        employment = compute_employment_analytics(
            enrollments,
            await store.list_employment_outcomes(),
            await store.list_internships(),
            await store.list_participants(),
            await store.list_partners(),
            await store.list_cohorts(),
            await store.list_programs(),
        )
        rate = employment.overall_employment_rate
        if rate >= self._thresholds.low_employment:
            return None
        return KpiAlert(
            alert_type=KpiAlertType.LOW_EMPLOYMENT,
            title="Low Employment Outcomes Alert",
            message=(
                f"Portfolio employment rate is {rate:.2f}% "
                f"(threshold {self._thresholds.low_employment:.2f}%) across "
                f"{employment.total_completed_enrollments} completed enrollments."
            ),
            priority=Priority.HIGH,
        )

    async def check_stagnation(
        self, enrollments: list[EnrollmentRecord], today: date
    ) -> KpiAlert | None:
        """Alert when the newest enrollment is at least stagnation_days old."""
        dates = [e.enrollment_date for e in enrollments if e.enrollment_date is not None]
        if not dates:
            return None
        latest = max(dates)
        idle_days = (today - latest).days
        if idle_days < self._thresholds.stagnation_days:
            return None
        return KpiAlert(
            alert_type=KpiAlertType.ENROLLMENT_STAGNATION,
            title="Enrollment Stagnation Alert",
            message=(
                f"No new enrollments for {idle_days} days "
                f"(last enrollment on {latest.isoformat()})."
            ),
            priority=Priority.MEDIUM,
        )

    async def _recipients(self) -> list[UserRecord]:
        users = await self._store.list_users()
        return [
            u
            for u in users
            if u.role == self._portfolio_role and u.is_active and u.is_verified
        ]

    async def _raise(self, alert: KpiAlert, recipients: list[UserRecord]) -> None:
        for user in recipients:
            await self._notification_repo.create(
                NotificationCreate(
                    recipient_id=user.id,
                    notification_type=NotificationType.ALERT,
                    title=alert.title,
                    message=alert.message,
                    priority=alert.priority,
                )
            )
        await self._audit_log_repo.create(
            AuditLogEntryCreate(
                actor_id=recipients[0].id,
                actor_role=self._portfolio_role,
                action=AuditAction.KPI_ANOMALY_DETECTED.value,
                entity_type=alert.alert_type.value,
                entity_id=None,
                description=f"{alert.title}: {alert.message}",
            )
        )
        logger.warning("KPI alert raised: %s", alert.title)

    def _start_of_day(self, today: date) -> datetime:
        return datetime.combine(today, time.min, tzinfo=self._timezone or UTC).astimezone(UTC)
