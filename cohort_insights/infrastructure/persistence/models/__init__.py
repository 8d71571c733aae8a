"""Persistence models: ORM entities and mixins."""

from cohort_insights.infrastructure.persistence.models.audit_log import AuditLog
from cohort_insights.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    CuidMixin,
)
from cohort_insights.infrastructure.persistence.models.notification import Notification
from cohort_insights.infrastructure.persistence.models.organization import (
    Center,
    Cohort,
    Partner,
    Program,
)
from cohort_insights.infrastructure.persistence.models.participant import (
    EmploymentOutcome,
    Enrollment,
    Internship,
    Participant,
)
from cohort_insights.infrastructure.persistence.models.survey import (
    Survey,
    SurveyAnswer,
    SurveyQuestion,
    SurveyResponse,
)
from cohort_insights.infrastructure.persistence.models.user import User

__all__ = [
    "AuditLog",
    "Center",
    "Cohort",
    "CreatedAtMixin",
    "CuidMixin",
    "EmploymentOutcome",
    "Enrollment",
    "Internship",
    "Notification",
    "Participant",
    "Partner",
    "Program",
    "Survey",
    "SurveyAnswer",
    "SurveyQuestion",
    "SurveyResponse",
    "User",
]
