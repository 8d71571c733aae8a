"""SQL record store: whole-table reads mapped to application records.

No filtering or pagination is pushed down; every call materializes the
full table.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cohort_insights.application.dtos.records import (
    AuditLogRecord,
    CenterRecord,
    CohortRecord,
    EmploymentOutcomeRecord,
    EnrollmentRecord,
    InternshipRecord,
    NotificationRecord,
    ParticipantRecord,
    PartnerRecord,
    ProgramRecord,
    SurveyAnswerRecord,
    SurveyQuestionRecord,
    SurveyRecord,
    SurveyResponseRecord,
    UserRecord,
)
from cohort_insights.infrastructure.persistence.models import (
    AuditLog,
    Center,
    Cohort,
    EmploymentOutcome,
    Enrollment,
    Internship,
    Notification,
    Participant,
    Partner,
    Program,
    Survey,
    SurveyAnswer,
    SurveyQuestion,
    SurveyResponse,
    User,
)
from cohort_insights.infrastructure.persistence.repositories.audit_log_repo import (
    audit_log_to_record,
)
from cohort_insights.infrastructure.persistence.repositories.notification_repo import (
    notification_to_record,
)
from cohort_insights.shared.utils.datetime import ensure_utc

R = TypeVar("R")


class SqlRecordStore:
    """IRecordStore over the platform's SQL schema."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _all(self, model: type[Any], to_record: Callable[[Any], R]) -> list[R]:
        result = await self.db.execute(select(model))
        return [to_record(row) for row in result.scalars().all()]

    async def list_partners(self) -> list[PartnerRecord]:
        return await self._all(
            Partner, lambda r: PartnerRecord(id=r.id, name=r.name, is_active=r.is_active)
        )

    async def list_centers(self) -> list[CenterRecord]:
        return await self._all(
            Center,
            lambda r: CenterRecord(
                id=r.id,
                partner_id=r.partner_id,
                name=r.name,
                location=r.location,
                region=r.region,
                country=r.country,
                is_active=r.is_active,
            ),
        )

    async def list_programs(self) -> list[ProgramRecord]:
        return await self._all(
            Program,
            lambda r: ProgramRecord(
                id=r.id,
                partner_id=r.partner_id,
                name=r.name,
                duration_weeks=r.duration_weeks,
            ),
        )

    async def list_cohorts(self) -> list[CohortRecord]:
        return await self._all(
            Cohort,
            lambda r: CohortRecord(
                id=r.id,
                center_id=r.center_id,
                program_id=r.program_id,
                name=r.name,
                start_date=r.start_date,
                end_date=r.end_date,
                status=r.status,
                target_enrollment=r.target_enrollment,
            ),
        )

    async def list_participants(self) -> list[ParticipantRecord]:
        return await self._all(
            Participant,
            lambda r: ParticipantRecord(
                id=r.id,
                partner_id=r.partner_id,
                first_name=r.first_name,
                last_name=r.last_name,
                gender=r.gender,
                disability_status=r.disability_status,
                education_level=r.education_level,
            ),
        )

    async def list_enrollments(self) -> list[EnrollmentRecord]:
        return await self._all(
            Enrollment,
            lambda r: EnrollmentRecord(
                id=r.id,
                participant_id=r.participant_id,
                cohort_id=r.cohort_id,
                enrollment_date=r.enrollment_date,
                status=r.status,
                completion_date=r.completion_date,
                dropout_date=r.dropout_date,
                dropout_reason=r.dropout_reason,
            ),
        )

    async def list_internships(self) -> list[InternshipRecord]:
        return await self._all(
            Internship,
            lambda r: InternshipRecord(
                id=r.id,
                enrollment_id=r.enrollment_id,
                organization=r.organization,
                status=r.status,
            ),
        )

    async def list_employment_outcomes(self) -> list[EmploymentOutcomeRecord]:
        return await self._all(
            EmploymentOutcome,
            lambda r: EmploymentOutcomeRecord(
                id=r.id,
                enrollment_id=r.enrollment_id,
                internship_id=r.internship_id,
                employment_status=r.employment_status,
                employer_name=r.employer_name,
                job_title=r.job_title,
                monthly_amount=r.monthly_amount,
                start_date=r.start_date,
            ),
        )

    async def list_surveys(self) -> list[SurveyRecord]:
        return await self._all(
            Survey,
            lambda r: SurveyRecord(
                id=r.id,
                partner_id=r.partner_id,
                cohort_id=r.cohort_id,
                title=r.title,
                survey_type=r.survey_type,
                status=r.status,
                start_date=r.start_date,
                end_date=r.end_date,
                created_at=ensure_utc(r.created_at),
            ),
        )

    async def list_survey_questions(self) -> list[SurveyQuestionRecord]:
        return await self._all(
            SurveyQuestion,
            lambda r: SurveyQuestionRecord(
                id=r.id,
                survey_id=r.survey_id,
                question_text=r.question_text,
                question_type=r.question_type,
                is_required=r.is_required,
                sequence_order=r.sequence_order,
            ),
        )

    async def list_survey_responses(self) -> list[SurveyResponseRecord]:
        return await self._all(
            SurveyResponse,
            lambda r: SurveyResponseRecord(
                id=r.id,
                survey_id=r.survey_id,
                participant_id=r.participant_id,
                submitted_at=ensure_utc(r.submitted_at),
            ),
        )

    async def list_survey_answers(self) -> list[SurveyAnswerRecord]:
        return await self._all(
            SurveyAnswer,
            lambda r: SurveyAnswerRecord(
                id=r.id,
                response_id=r.response_id,
                question_id=r.question_id,
                answer_value=r.answer_value,
            ),
        )

    async def list_audit_logs(self) -> list[AuditLogRecord]:
        return await self._all(AuditLog, audit_log_to_record)

    async def list_notifications(self) -> list[NotificationRecord]:
        return await self._all(Notification, notification_to_record)

    async def list_users(self) -> list[UserRecord]:
        return await self._all(
            User,
            lambda r: UserRecord(
                id=r.id,
                email=r.email,
                first_name=r.first_name,
                last_name=r.last_name,
                role=r.role,
                is_active=r.is_active,
                is_verified=r.is_verified,
            ),
        )
