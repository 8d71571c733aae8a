"""DTOs for the portfolio dashboard (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime

from cohort_insights.application.dtos.analytics import (
    CompletionMetrics,
    EmploymentAnalytics,
)


@dataclass(frozen=True)
class DashboardSummary:
    """Portfolio-wide counts and headline rates."""

    total_partners: int = 0
    active_partners: int = 0
    total_programs: int = 0
    total_cohorts: int = 0
    active_cohorts: int = 0
    total_participants: int = 0
    total_enrollments: int = 0
    overall_completion_rate: float = 0.0
    overall_employment_rate: float = 0.0
    overall_dropout_rate: float = 0.0


@dataclass(frozen=True)
class RecentActivity:
    """One audit log entry rendered for the activity feed."""

    activity_type: str
    description: str | None
    timestamp: datetime
    entity_type: str | None
    entity_id: str | None


@dataclass(frozen=True)
class DashboardAlertSummary:
    """Unread alert notifications addressed to portfolio users."""

    total_unresolved: int = 0
    high_priority_unresolved: int = 0
    medium_priority_unresolved: int = 0


@dataclass(frozen=True)
class QuickLinks:
    enrollment_analytics: str = "/api/v1/portfolio/analytics/enrollments"
    employment_analytics: str = "/api/v1/portfolio/analytics/employment"
    demographic_analytics: str = "/api/v1/portfolio/analytics/demographics"
    regional_analytics: str = "/api/v1/portfolio/analytics/regions"
    survey_analytics: str = "/api/v1/portfolio/analytics/surveys"
    audit_logs: str = "/api/v1/portfolio/activity"
    reports: str = "/api/v1/portfolio/reports/{period}/preview"


@dataclass(frozen=True)
class PortfolioDashboard:
    summary: DashboardSummary
    completion: CompletionMetrics
    employment: EmploymentAnalytics
    recent_activities: list[RecentActivity] = field(default_factory=list)
    alert_summary: DashboardAlertSummary = field(default_factory=DashboardAlertSummary)
    quick_links: QuickLinks = field(default_factory=QuickLinks)
