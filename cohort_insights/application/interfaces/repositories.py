"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill.
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
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


# Record store interface
class IRecordStore(Protocol):
    """Whole-collection reads of every record type. No filtering pushed down."""

    async def list_partners(self) -> list[PartnerRecord]: ...

    async def list_centers(self) -> list[CenterRecord]: ...

    async def list_programs(self) -> list[ProgramRecord]: ...

    async def list_cohorts(self) -> list[CohortRecord]: ...

    async def list_participants(self) -> list[ParticipantRecord]: ...

    async def list_enrollments(self) -> list[EnrollmentRecord]: ...

    async def list_internships(self) -> list[InternshipRecord]: ...

    async def list_employment_outcomes(self) -> list[EmploymentOutcomeRecord]: ...

    async def list_surveys(self) -> list[SurveyRecord]: ...

    async def list_survey_questions(self) -> list[SurveyQuestionRecord]: ...

    async def list_survey_responses(self) -> list[SurveyResponseRecord]: ...

    async def list_survey_answers(self) -> list[SurveyAnswerRecord]: ...

    async def list_audit_logs(self) -> list[AuditLogRecord]: ...

    async def list_notifications(self) -> list[NotificationRecord]: ...

    async def list_users(self) -> list[UserRecord]: ...


# Audit log repository interface
class IAuditLogRepository(Protocol):
    """Append-only audit log writes."""

    async def create(self, entry: AuditLogEntryCreate) -> AuditLogRecord:
        """Append one audit entry and return the stored record."""
        ...

    async def exists_since(
        self, action: str, entity_type: str, since: datetime
    ) -> bool:
        """Return True if an entry with this action and entity_type was written at or after since."""
        ...


# Notification repository interface
class INotificationRepository(Protocol):
    async def create(self, data: NotificationCreate) -> NotificationRecord:
        """Persist one unread notification and return it."""
        ...
