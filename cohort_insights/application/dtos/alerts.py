"""DTOs for KPI anomaly alerts and the rows written on their behalf."""

from dataclasses import dataclass, field

from cohort_insights.shared.enums import KpiAlertType, NotificationType, Priority


@dataclass(frozen=True)
class NotificationCreate:
    """Input for persisting one notification. Created unread."""

    recipient_id: str
    notification_type: NotificationType
    title: str
    message: str
    priority: Priority


@dataclass(frozen=True)
class AuditLogEntryCreate:
    """Input for appending one audit log record. Append-only; no update."""

    actor_id: str | None
    actor_role: str | None
    action: str
    entity_type: str | None
    entity_id: str | None
    description: str


@dataclass(frozen=True)
class KpiAlert:
    """A detected threshold breach, before fan-out to recipients."""

    alert_type: KpiAlertType
    title: str
    message: str
    priority: Priority


@dataclass(frozen=True)
class AnomalyCheckResult:
    """Outcome of one anomaly-check pass.

    raised: alerts written this pass; suppressed: breaches skipped because an
    alert of the same type was already recorded today; failed_checks: names
    of checks that raised and were logged.
    """

    recipients: int = 0
    raised: list[KpiAlert] = field(default_factory=list)
    suppressed: list[KpiAlertType] = field(default_factory=list)
    failed_checks: list[str] = field(default_factory=list)
    skipped_reason: str | None = None
