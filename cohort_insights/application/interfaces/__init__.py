"""Application-layer ports (Protocols)."""

from cohort_insights.application.interfaces.repositories import (
    IAuditLogRepository,
    INotificationRepository,
    IRecordStore,
)
from cohort_insights.application.interfaces.services import IReportExporter

__all__ = [
    "IAuditLogRepository",
    "INotificationRepository",
    "IRecordStore",
    "IReportExporter",
]
