"""Infrastructure implementations of application service interfaces."""

from cohort_insights.infrastructure.services.report_exporter import (
    LocalJsonReportExporter,
)
from cohort_insights.infrastructure.services.scheduler import (
    JobScheduler,
    ScheduledJob,
    ScheduleRule,
)

__all__ = ["JobScheduler", "LocalJsonReportExporter", "ScheduleRule", "ScheduledJob"]
