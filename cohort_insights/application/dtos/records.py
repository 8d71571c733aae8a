"""Read-only input records (no dependency on ORM).

The record store returns whole collections of these. Status and type fields
accept either the enum member or its raw string value; raw strings are
normalized to members on construction.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from cohort_insights.domain.enums import (
    CohortStatus,
    EmploymentStatus,
    EnrollmentStatus,
    InternshipStatus,
    QuestionType,
    SurveyStatus,
    SurveyType,
)
from cohort_insights.shared.enums import NotificationType, Priority


def _coerce_enum(record: Any, field_name: str, enum_cls: type[Enum]) -> None:
    value = getattr(record, field_name)
    if value is not None and not isinstance(value, enum_cls):
        object.__setattr__(record, field_name, enum_cls(value))


@dataclass(frozen=True)
class PartnerRecord:
    """Tenant organization running training programs."""

    id: str
    name: str
    is_active: bool = True


@dataclass(frozen=True)
class CenterRecord:
    """Physical training location belonging to one partner."""

    id: str
    partner_id: str
    name: str
    location: str | None = None
    region: str | None = None
    country: str | None = None
    is_active: bool = True


@dataclass(frozen=True)
class ProgramRecord:
    id: str
    partner_id: str
    name: str
    duration_weeks: int | None = None


@dataclass(frozen=True)
class CohortRecord:
    """One run of a program at a center."""

    id: str
    center_id: str
    program_id: str
    name: str
    start_date: date | None = None
    end_date: date | None = None
    status: CohortStatus = CohortStatus.ACTIVE
    target_enrollment: int | None = None

    def __post_init__(self) -> None:
        _coerce_enum(self, "status", CohortStatus)


@dataclass(frozen=True)
class ParticipantRecord:
    id: str
    partner_id: str
    first_name: str = ""
    last_name: str = ""
    gender: str | None = None
    disability_status: str | None = None
    education_level: str | None = None


@dataclass(frozen=True)
class EnrollmentRecord:
    """A participant's membership in a cohort."""

    id: str
    participant_id: str
    cohort_id: str
    enrollment_date: date | None = None
    status: EnrollmentStatus = EnrollmentStatus.ENROLLED
    completion_date: date | None = None
    dropout_date: date | None = None
    dropout_reason: str | None = None

    def __post_init__(self) -> None:
        _coerce_enum(self, "status", EnrollmentStatus)


@dataclass(frozen=True)
class InternshipRecord:
    id: str
    enrollment_id: str
    organization: str | None = None
    status: InternshipStatus = InternshipStatus.PENDING

    def __post_init__(self) -> None:
        _coerce_enum(self, "status", InternshipStatus)


@dataclass(frozen=True)
class EmploymentOutcomeRecord:
    """Employment result recorded against an enrollment, optionally via an internship."""

    id: str
    enrollment_id: str
    employment_status: EmploymentStatus
    internship_id: str | None = None
    employer_name: str | None = None
    job_title: str | None = None
    monthly_amount: Decimal | None = None
    start_date: date | None = None

    def __post_init__(self) -> None:
        _coerce_enum(self, "employment_status", EmploymentStatus)

    @property
    def is_employed(self) -> bool:
        return self.employment_status.is_employed


@dataclass(frozen=True)
class SurveyRecord:
    id: str
    partner_id: str
    title: str
    survey_type: SurveyType
    cohort_id: str | None = None
    status: SurveyStatus = SurveyStatus.ACTIVE
    start_date: date | None = None
    end_date: date | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        _coerce_enum(self, "survey_type", SurveyType)
        _coerce_enum(self, "status", SurveyStatus)


@dataclass(frozen=True)
class SurveyQuestionRecord:
    id: str
    survey_id: str
    question_text: str
    question_type: QuestionType
    is_required: bool = False
    sequence_order: int = 0

    def __post_init__(self) -> None:
        _coerce_enum(self, "question_type", QuestionType)


@dataclass(frozen=True)
class SurveyResponseRecord:
    """A participant's response to a survey; submitted_at None means pending."""

    id: str
    survey_id: str
    participant_id: str
    submitted_at: datetime | None = None


@dataclass(frozen=True)
class SurveyAnswerRecord:
    id: str
    response_id: str
    question_id: str
    answer_value: str | None = None


@dataclass(frozen=True)
class AuditLogRecord:
    id: str
    action: str
    created_at: datetime
    actor_id: str | None = None
    actor_role: str | None = None
    entity_type: str | None = None
    entity_id: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class NotificationRecord:
    id: str
    recipient_id: str
    notification_type: NotificationType
    title: str
    message: str
    priority: Priority
    created_at: datetime
    is_read: bool = False

    def __post_init__(self) -> None:
        _coerce_enum(self, "notification_type", NotificationType)
        _coerce_enum(self, "priority", Priority)


@dataclass(frozen=True)
class UserRecord:
    id: str
    email: str
    role: str
    first_name: str = ""
    last_name: str = ""
    is_active: bool = True
    is_verified: bool = True
