"""Shared enumerations for the engine's own writes (audit, notifications).

Enums describing the training-program records being read live in
cohort_insights.domain.enums.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class AuditAction(_ValuesMixin, str, Enum):
    """Audit actions written by the engine."""

    KPI_ANOMALY_DETECTED = "KPI_ANOMALY_DETECTED"


class NotificationType(_ValuesMixin, str, Enum):
    """Notification category shown in the recipient's inbox."""

    ALERT = "ALERT"
    INFO = "INFO"
    REMINDER = "REMINDER"
    SYSTEM = "SYSTEM"


class Priority(_ValuesMixin, str, Enum):
    """Notification priority."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"


class KpiAlertType(_ValuesMixin, str, Enum):
    """KPI anomaly categories; also used as the audit entity_type."""

    DROPOUT_SPIKE = "DROPOUT_SPIKE"
    LOW_EMPLOYMENT = "LOW_EMPLOYMENT"
    ENROLLMENT_STAGNATION = "ENROLLMENT_STAGNATION"


class ReportPeriodKind(_ValuesMixin, str, Enum):
    """Calendar period covered by a scheduled portfolio report."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
