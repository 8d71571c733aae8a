"""Pytest configuration and fixtures for cohort-insights.

HTTP tests build the app with create_app() and point the record store
dependency at an in-memory portfolio. Repository tests that need Postgres use
the db_session fixture and are marked requires_db.
"""

import os
from datetime import UTC, date, datetime

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

# Tests run against the in-memory store unless DATABASE_URL is given explicitly.
os.environ.setdefault("DATABASE_URL", "")

from cohort_insights.api.v1.dependencies import get_record_store  # noqa: E402
from cohort_insights.application.dtos.records import (  # noqa: E402
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
from cohort_insights.core.config import get_settings  # noqa: E402
from cohort_insights.domain.enums import (  # noqa: E402
    CohortStatus,
    EmploymentStatus,
    EnrollmentStatus,
    InternshipStatus,
    QuestionType,
    SurveyType,
)
from cohort_insights.infrastructure.persistence import database  # noqa: E402
from cohort_insights.infrastructure.persistence.memory_store import (  # noqa: E402
    InMemoryRecordStore,
)
from cohort_insights.main import create_app  # noqa: E402
from cohort_insights.shared.enums import NotificationType, Priority  # noqa: E402

PORTFOLIO_ROLE = "PORTFOLIO_MANAGER"


def build_portfolio_store() -> InMemoryRecordStore:
    """Two partners, one center each (both in a region named North), four enrollments.

    e1 COMPLETED (employed, via a completed internship), e2 DROPPED_OUT,
    e3 ACTIVE, e4 COMPLETED (no outcome). One BASELINE survey with one
    submitted and one pending response.
    """
    return InMemoryRecordStore(
        partners=[
            PartnerRecord("p1", "Acme Skills"),
            PartnerRecord("p2", "Bright Futures", is_active=False),
        ],
        centers=[
            CenterRecord("c1", "p1", "Nairobi Hub", location="Westlands", region="North", country="Kenya"),
            CenterRecord("c2", "p2", "Gulu Center", location="Gulu", region="North", country="Uganda"),
        ],
        programs=[
            ProgramRecord("prog1", "p1", "Welding", duration_weeks=16),
            ProgramRecord("prog2", "p2", "Tailoring", duration_weeks=12),
        ],
        cohorts=[
            CohortRecord(
                "co1", "c1", "prog1", "Welding 2025A",
                start_date=date(2025, 1, 6), end_date=date(2025, 4, 30),
                status=CohortStatus.COMPLETED,
            ),
            CohortRecord(
                "co2", "c2", "prog2", "Tailoring 2025A",
                start_date=date(2025, 2, 3), status=CohortStatus.ACTIVE,
            ),
        ],
        participants=[
            ParticipantRecord("pa1", "p1", "Amina", "Otieno", gender="FEMALE", education_level="Secondary"),
            ParticipantRecord("pa2", "p1", "Brian", "Kamau", gender="MALE", education_level="Primary"),
            ParticipantRecord("pa3", "p2", "Grace", "Akello", gender="FEMALE", disability_status="NONE"),
            ParticipantRecord("pa4", "p2", "Moses", "Okello", gender="MALE"),
        ],
        enrollments=[
            EnrollmentRecord("e1", "pa1", "co1", date(2025, 1, 6), EnrollmentStatus.COMPLETED, completion_date=date(2025, 4, 30)),
            EnrollmentRecord("e2", "pa2", "co1", date(2025, 1, 20), EnrollmentStatus.DROPPED_OUT, dropout_reason="Relocated"),
            EnrollmentRecord("e3", "pa3", "co2", date(2025, 2, 3), EnrollmentStatus.ACTIVE),
            EnrollmentRecord("e4", "pa4", "co2", date(2025, 2, 10), EnrollmentStatus.COMPLETED),
        ],
        internships=[InternshipRecord("i1", "e1", "Steelworks Ltd", InternshipStatus.COMPLETED)],
        employment_outcomes=[
            EmploymentOutcomeRecord("o1", "e1", EmploymentStatus.EMPLOYED, internship_id="i1", employer_name="Steelworks Ltd"),
        ],
        surveys=[
            SurveyRecord(
                "s1", "p1", "Welding baseline", SurveyType.BASELINE, cohort_id="co1",
                start_date=date(2025, 1, 10),
                created_at=datetime(2025, 1, 10, 9, 0, tzinfo=UTC),
            ),
        ],
        survey_questions=[SurveyQuestionRecord("q1", "s1", "How confident do you feel?", QuestionType.SCALE)],
        survey_responses=[
            SurveyResponseRecord("r1", "s1", "pa1", submitted_at=datetime(2025, 1, 12, 9, 0, tzinfo=UTC)),
            SurveyResponseRecord("r2", "s1", "pa2"),
        ],
        survey_answers=[SurveyAnswerRecord("a1", "r1", "q1", "4")],
        users=[
            UserRecord("u1", "pm@example.org", PORTFOLIO_ROLE),
            UserRecord("u2", "admin@example.org", "ADMIN"),
        ],
        notifications=[
            NotificationRecord(
                "n1", "u1", NotificationType.ALERT, "Dropout Spike Alert", "Dropout is 25.00%",
                Priority.HIGH, created_at=datetime(2025, 3, 1, 6, 0, tzinfo=UTC),
            ),
        ],
        audit_logs=[
            AuditLogRecord(
                "l1", "KPI_ANOMALY_DETECTED", datetime(2025, 3, 1, 6, 0, tzinfo=UTC),
                actor_id="u1", entity_type="DROPOUT_SPIKE", description="Dropout Spike Alert",
            ),
        ],
    )


@pytest.fixture
def portfolio_store() -> InMemoryRecordStore:
    return build_portfolio_store()


@pytest.fixture
async def client(portfolio_store: InMemoryRecordStore) -> AsyncClient:
    """Async HTTP client against a fresh app backed by portfolio_store."""
    get_settings.cache_clear()
    app = create_app()
    app.dependency_overrides[get_record_store] = lambda: portfolio_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def db_session() -> AsyncSession:
    """Database session for repository tests. Rolls back after the test.

    Requires DATABASE_URL pointing at Postgres. Skips when it is not set; run
    without a database via: pytest -m 'not requires_db'.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip("Postgres not configured: set DATABASE_URL")
    async with database.engine.begin() as conn:
        await conn.run_sync(database.Base.metadata.create_all)
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
    await database.dispose_engine()
