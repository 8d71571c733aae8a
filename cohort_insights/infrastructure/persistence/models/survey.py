"""Survey, question, response and answer tables."""

from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from cohort_insights.infrastructure.persistence.database import Base
from cohort_insights.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    CuidMixin,
)


class Survey(CuidMixin, CreatedAtMixin, Base):
    __tablename__ = "surveys"

    partner_id: Mapped[str] = mapped_column(
        String, ForeignKey("partners.id"), nullable=False, index=True
    )
    cohort_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("cohorts.id"), nullable=True, index=True
    )
    title: Mapped[str] = mapped_column(String, nullable=False)
    survey_type: Mapped[str] = mapped_column(String, nullable=False)
    status: Mapped[str] = mapped_column(String, nullable=False, default="ACTIVE")
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)


class SurveyQuestion(CuidMixin, Base):
    __tablename__ = "survey_questions"

    survey_id: Mapped[str] = mapped_column(
        String, ForeignKey("surveys.id"), nullable=False, index=True
    )
    question_text: Mapped[str] = mapped_column(Text, nullable=False)
    question_type: Mapped[str] = mapped_column(String, nullable=False)
    is_required: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    sequence_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class SurveyResponse(CuidMixin, Base):
    """submitted_at NULL means the response is still pending."""

    __tablename__ = "survey_responses"

    survey_id: Mapped[str] = mapped_column(
        String, ForeignKey("surveys.id"), nullable=False, index=True
    )
    participant_id: Mapped[str] = mapped_column(
        String, ForeignKey("participants.id"), nullable=False, index=True
    )
    submitted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )


class SurveyAnswer(CuidMixin, Base):
    __tablename__ = "survey_answers"

    response_id: Mapped[str] = mapped_column(
        String, ForeignKey("survey_responses.id"), nullable=False, index=True
    )
    question_id: Mapped[str] = mapped_column(
        String, ForeignKey("survey_questions.id"), nullable=False, index=True
    )
    answer_value: Mapped[str | None] = mapped_column(Text, nullable=True)
