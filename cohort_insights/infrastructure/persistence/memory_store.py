"""In-memory record store and write repositories.

Backs tests, scripts and the API when DATABASE_URL is unset. Alerts and
audit entries written through the repositories are appended to the same
store, so they show up in later dashboard reads.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from datetime import datetime

from cohort_insights.application.dtos.alerts import (
    AuditLogEntryCreate,
    NotificationCreate,
)
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
from cohort_insights.shared.utils import ensure_utc, generate_cuid, utc_now


@dataclass
class InMemoryRecordStore:
    """IRecordStore over plain lists. list_* return copies."""

    partners: list[PartnerRecord] = field(default_factory=list)
    centers: list[CenterRecord] = field(default_factory=list)
    programs: list[ProgramRecord] = field(default_factory=list)
    cohorts: list[CohortRecord] = field(default_factory=list)
    participants: list[ParticipantRecord] = field(default_factory=list)
    enrollments: list[EnrollmentRecord] = field(default_factory=list)
    internships: list[InternshipRecord] = field(default_factory=list)
    employment_outcomes: list[EmploymentOutcomeRecord] = field(default_factory=list)
    surveys: list[SurveyRecord] = field(default_factory=list)
    survey_questions: list[SurveyQuestionRecord] = field(default_factory=list)
    survey_responses: list[SurveyResponseRecord] = field(default_factory=list)
    survey_answers: list[SurveyAnswerRecord] = field(default_factory=list)
    audit_logs: list[AuditLogRecord] = field(default_factory=list)
    notifications: list[NotificationRecord] = field(default_factory=list)
    users: list[UserRecord] = field(default_factory=list)

    async def list_partners(self) -> list[PartnerRecord]:
        return list(self.partners)

    async def list_centers(self) -> list[CenterRecord]:
        return list(self.centers)

    async def list_programs(self) -> list[ProgramRecord]:
        return list(self.programs)

    async def list_cohorts(self) -> list[CohortRecord]:
        return list(self.cohorts)

    async def list_participants(self) -> list[ParticipantRecord]:
        return list(self.participants)

    async def list_enrollments(self) -> list[EnrollmentRecord]:
        return list(self.enrollments)

    async def list_internships(self) -> list[InternshipRecord]:
        return list(self.internships)

    async def list_employment_outcomes(self) -> list[EmploymentOutcomeRecord]:
        return list(self.employment_outcomes)

    async def list_surveys(self) -> list[SurveyRecord]:
        return list(self.surveys)

    async def list_survey_questions(self) -> list[SurveyQuestionRecord]:
        return list(self.survey_questions)

    async def list_survey_responses(self) -> list[SurveyResponseRecord]:
        return list(self.survey_responses)

    async def list_survey_answers(self) -> list[SurveyAnswerRecord]:
        return list(self.survey_answers)

    async def list_audit_logs(self) -> list[AuditLogRecord]:
        return list(self.audit_logs)

    async def list_notifications(self) -> list[NotificationRecord]:
        return list(self.notifications)

    async def list_users(self) -> list[UserRecord]:
        return list(self.users)

    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        """Drop notifications and audit entries appended in the block if it raises."""
        notification_mark = len(self.notifications)
        audit_mark = len(self.audit_logs)
        try:
            yield
        except Exception:
            del self.notifications[notification_mark:]
            del self.audit_logs[audit_mark:]
            raise


class InMemoryAuditLogRepository:
    """Append-only audit log over an InMemoryRecordStore."""

    def __init__(self, store: InMemoryRecordStore) -> None:
        self._store = store

    async def create(self, entry: AuditLogEntryCreate) -> AuditLogRecord:
        record = AuditLogRecord(
            id=generate_cuid(),
            actor_id=entry.actor_id,
            actor_role=entry.actor_role,
            action=entry.action,
            entity_type=entry.entity_type,
            entity_id=entry.entity_id,
            description=entry.description,
            created_at=utc_now(),
        )
        self._store.audit_logs.append(record)
        return record

    async def exists_since(
        self, action: str, entity_type: str, since: datetime
    ) -> bool:
        since_utc = ensure_utc(since)
        return any(
            log.action == action
            and log.entity_type == entity_type
            and ensure_utc(log.created_at) >= since_utc  # type: ignore[operator]
            for log in self._store.audit_logs
        )


class InMemoryNotificationRepository:
    def __init__(self, store: InMemoryRecordStore) -> None:
        self._store = store

    async def create(self, data: NotificationCreate) -> NotificationRecord:
        record = NotificationRecord(
            id=generate_cuid(),
            recipient_id=data.recipient_id,
            notification_type=data.notification_type,
            title=data.title,
            message=data.message,
            priority=data.priority,
            created_at=utc_now(),
        )
        self._store.notifications.append(record)
        return record
