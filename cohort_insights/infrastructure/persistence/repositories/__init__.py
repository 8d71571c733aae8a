"""Persistence repositories. Re-exports for dependency injection."""

from cohort_insights.infrastructure.persistence.repositories.audit_log_repo import (
    AuditLogRepository,
)
from cohort_insights.infrastructure.persistence.repositories.notification_repo import (
    NotificationRepository,
)
from cohort_insights.infrastructure.persistence.repositories.record_store import (
    SqlRecordStore,
)

__all__ = ["AuditLogRepository", "NotificationRepository", "SqlRecordStore"]
