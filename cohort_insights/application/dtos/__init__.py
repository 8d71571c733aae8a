"""Application DTOs (no ORM dependency)."""

from cohort_insights.application.dtos.alerts import (
    AnomalyCheckResult,
    AuditLogEntryCreate,
    KpiAlert,
    NotificationCreate,
)
from cohort_insights.application.dtos.analytics import (
    CompletionMetrics,
    DemographicAnalytics,
    EmploymentAnalytics,
    EnrollmentAnalytics,
    LongitudinalImpact,
    RegionalAnalytics,
    SurveyImpactSummary,
)
from cohort_insights.application.dtos.dashboard import PortfolioDashboard
from cohort_insights.application.dtos.reports import (
    ExportedReport,
    PortfolioReport,
    ReportPeriod,
    ReportRunResult,
)

__all__ = [
    "AnomalyCheckResult",
    "AuditLogEntryCreate",
    "CompletionMetrics",
    "DemographicAnalytics",
    "EmploymentAnalytics",
    "EnrollmentAnalytics",
    "ExportedReport",
    "KpiAlert",
    "LongitudinalImpact",
    "NotificationCreate",
    "PortfolioDashboard",
    "PortfolioReport",
    "RegionalAnalytics",
    "ReportPeriod",
    "ReportRunResult",
    "SurveyImpactSummary",
]
