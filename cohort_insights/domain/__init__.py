"""Domain layer: record enums and exceptions.

No dependencies on infrastructure or presentation.
"""

from cohort_insights.domain.enums import (
    CohortStatus,
    EmploymentStatus,
    EnrollmentStatus,
    InternshipStatus,
    QuestionType,
    SurveyStatus,
    SurveyType,
)
from cohort_insights.domain.exceptions import (
    InsightsException,
    ReportExportException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    UnknownReportPeriodException,
    ValidationException,
)

__all__ = [
    "CohortStatus",
    "EmploymentStatus",
    "EnrollmentStatus",
    "InsightsException",
    "InternshipStatus",
    "QuestionType",
    "ReportExportException",
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "SurveyStatus",
    "SurveyType",
    "UnknownReportPeriodException",
    "ValidationException",
]
