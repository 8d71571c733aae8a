"""DTOs for scheduled portfolio reports."""

from dataclasses import dataclass
from datetime import date, datetime

from cohort_insights.application.dtos.analytics import (
    CompletionMetrics,
    DemographicAnalytics,
    EmploymentAnalytics,
    EnrollmentAnalytics,
    LongitudinalImpact,
    RegionalAnalytics,
    SurveyImpactSummary,
)
from cohort_insights.shared.enums import ReportPeriodKind


@dataclass(frozen=True)
class ReportPeriod:
    """Inclusive calendar range a report is labelled with."""

    kind: ReportPeriodKind
    start_date: date
    end_date: date

    @property
    def report_type(self) -> str:
        return f"{self.kind.value.upper()}_PORTFOLIO_REPORT"


@dataclass(frozen=True)
class PortfolioReport:
    """Comprehensive report handed to the exporter.

    Sections are computed over the full record snapshot; the period is
    metadata only.
    """

    report_id: str
    period: ReportPeriod
    generated_at: datetime
    enrollment: EnrollmentAnalytics
    completion: CompletionMetrics
    employment: EmploymentAnalytics
    longitudinal: LongitudinalImpact
    demographics: DemographicAnalytics
    regional: RegionalAnalytics
    survey_impact: SurveyImpactSummary
    scope: str = "COMPREHENSIVE"


@dataclass(frozen=True)
class ExportedReport:
    """Where the exporter put the rendered report."""

    reference: str
    file_format: str
    size_bytes: int


@dataclass(frozen=True)
class ReportRunResult:
    period: ReportPeriod
    report_id: str | None = None
    exported: ExportedReport | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.exported is not None and self.error is None
