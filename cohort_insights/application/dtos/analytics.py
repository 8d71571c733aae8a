"""Result DTOs produced by the aggregation modules (no dependency on ORM).

Rates and percentages are floats already rounded to two decimals. Growth
percentages and survey rate changes are signed differences; every other rate
lies in [0, 100].
"""

from dataclasses import dataclass, field
from datetime import date


# Enrollment KPIs


@dataclass(frozen=True)
class EnrollmentGrowth:
    """Enrollment count for one YYYY-MM bucket and growth over the previous bucket."""

    period: str
    enrollments: int
    growth_percentage: float


@dataclass(frozen=True)
class EnrollmentByPartner:
    partner_id: str
    partner_name: str
    total_enrollments: int
    percentage: float


@dataclass(frozen=True)
class EnrollmentByProgram:
    program_id: str
    program_name: str
    partner_id: str | None
    partner_name: str | None
    total_enrollments: int
    percentage: float


@dataclass(frozen=True)
class EnrollmentAnalytics:
    total_enrollments: int = 0
    enrollment_growth: list[EnrollmentGrowth] = field(default_factory=list)
    enrollment_by_partner: list[EnrollmentByPartner] = field(default_factory=list)
    enrollment_by_program: list[EnrollmentByProgram] = field(default_factory=list)


# Completion / dropout


@dataclass(frozen=True)
class DropoutReasonGroup:
    """Dropout reason with count and share of all dropped-out enrollments."""

    reason: str
    count: int
    percentage: float


@dataclass(frozen=True)
class CompletionMetrics:
    completion_rate: float = 0.0
    dropout_rate: float = 0.0
    active_rate: float = 0.0
    total_completed: int = 0
    total_dropped_out: int = 0
    total_active: int = 0
    total_enrollments: int = 0
    dropout_reasons: list[DropoutReasonGroup] = field(default_factory=list)


# Employment outcomes


@dataclass(frozen=True)
class EmploymentByPartner:
    partner_id: str
    partner_name: str
    total_completed_enrollments: int
    total_employed: int
    employment_rate: float


@dataclass(frozen=True)
class EmploymentByCohort:
    cohort_id: str
    cohort_name: str
    program_id: str | None
    program_name: str | None
    partner_id: str | None
    partner_name: str | None
    cohort_start_date: date | None
    cohort_end_date: date | None
    total_completed_enrollments: int
    total_employed: int
    employment_rate: float


@dataclass(frozen=True)
class InternshipConversion:
    total_completed_internships: int = 0
    internships_converted_to_employment: int = 0
    conversion_rate: float = 0.0


@dataclass(frozen=True)
class EmploymentAnalytics:
    overall_employment_rate: float = 0.0
    total_completed_enrollments: int = 0
    total_employed: int = 0
    employment_by_partner: list[EmploymentByPartner] = field(default_factory=list)
    employment_by_cohort: list[EmploymentByCohort] = field(default_factory=list)
    internship_conversion: InternshipConversion = field(
        default_factory=InternshipConversion
    )


# Longitudinal survey impact


@dataclass(frozen=True)
class SurveyMetrics:
    """Response metrics for one survey or a pool of surveys of the same type."""

    total_surveys: int = 0
    total_responses: int = 0
    response_rate: float = 0.0
    average_response_time: float = 0.0


@dataclass(frozen=True)
class SurveyTimeSeriesEntry:
    survey_type: str
    survey_date: date
    total_surveys: int
    total_responses: int
    response_rate: float
    average_response_time: float


@dataclass(frozen=True)
class SurveyComparison:
    """Pooled metrics per survey type and the signed change in response rate."""

    baseline: SurveyMetrics = field(default_factory=SurveyMetrics)
    endline: SurveyMetrics = field(default_factory=SurveyMetrics)
    tracer: SurveyMetrics = field(default_factory=SurveyMetrics)
    baseline_to_endline_change: float = 0.0
    endline_to_tracer_change: float = 0.0


@dataclass(frozen=True)
class LongitudinalImpact:
    time_series: list[SurveyTimeSeriesEntry] = field(default_factory=list)
    comparison: SurveyComparison = field(default_factory=SurveyComparison)


# Demographics


@dataclass(frozen=True)
class CategoryBreakdown:
    """One categorical value with its share of all participants."""

    value: str
    count: int
    percentage: float


@dataclass(frozen=True)
class DemographicAnalytics:
    total_participants: int = 0
    gender_breakdown: list[CategoryBreakdown] = field(default_factory=list)
    disability_breakdown: list[CategoryBreakdown] = field(default_factory=list)
    education_breakdown: list[CategoryBreakdown] = field(default_factory=list)


# Regional rollups


@dataclass(frozen=True)
class CenterAnalytics:
    center_id: str
    center_name: str
    partner_id: str | None
    partner_name: str | None
    region: str | None
    country: str | None
    location: str | None
    total_participants: int
    total_enrollments: int
    total_active_cohorts: int


@dataclass(frozen=True)
class RegionAnalytics:
    region: str
    country: str
    total_participants: int
    total_enrollments: int
    total_active_cohorts: int
    total_centers: int
    total_partners: int


@dataclass(frozen=True)
class CountryAnalytics:
    country: str
    total_participants: int
    total_enrollments: int
    total_active_cohorts: int
    total_centers: int
    total_regions: int
    total_partners: int


@dataclass(frozen=True)
class RegionalAnalytics:
    center_breakdown: list[CenterAnalytics] = field(default_factory=list)
    region_breakdown: list[RegionAnalytics] = field(default_factory=list)
    country_breakdown: list[CountryAnalytics] = field(default_factory=list)


# Survey impact summaries


@dataclass(frozen=True)
class SurveySummary:
    survey_id: str
    survey_title: str
    survey_type: str
    partner_id: str
    partner_name: str | None
    cohort_id: str | None
    cohort_name: str | None
    start_date: date | None
    end_date: date | None
    status: str
    total_targeted: int
    total_submitted: int
    completion_rate: float
    average_sentiment: float
    positive_response_rate: float
    total_questions: int


@dataclass(frozen=True)
class SurveyImpactSummary:
    total_surveys: int = 0
    survey_summaries: list[SurveySummary] = field(default_factory=list)
    overall_completion_rate: float = 0.0
    overall_average_sentiment: float = 0.0
