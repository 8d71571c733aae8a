"""Participant, enrollment, internship and employment outcome tables."""

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from cohort_insights.infrastructure.persistence.database import Base
from cohort_insights.infrastructure.persistence.models.mixins import CuidMixin


class Participant(CuidMixin, Base):
    __tablename__ = "participants"

    partner_id: Mapped[str] = mapped_column(
        String, ForeignKey("partners.id"), nullable=False, index=True
    )
    first_name: Mapped[str] = mapped_column(String, nullable=False, default="")
    last_name: Mapped[str] = mapped_column(String, nullable=False, default="")
    gender: Mapped[str | None] = mapped_column(String, nullable=True)
    disability_status: Mapped[str | None] = mapped_column(String, nullable=True)
    education_level: Mapped[str | None] = mapped_column(String, nullable=True)


class Enrollment(CuidMixin, Base):
    """A participant's membership in a cohort."""

    __tablename__ = "enrollments"

    participant_id: Mapped[str] = mapped_column(
        String, ForeignKey("participants.id"), nullable=False, index=True
    )
    cohort_id: Mapped[str] = mapped_column(
        String, ForeignKey("cohorts.id"), nullable=False, index=True
    )
    enrollment_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[str] = mapped_column(String, nullable=False, default="ENROLLED")
    completion_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    dropout_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    dropout_reason: Mapped[str | None] = mapped_column(Text, nullable=True)


class Internship(CuidMixin, Base):
    __tablename__ = "internships"

    enrollment_id: Mapped[str] = mapped_column(
        String, ForeignKey("enrollments.id"), nullable=False, index=True
    )
    organization: Mapped[str | None] = mapped_column(String, nullable=True)
    status: Mapped[str] = mapped_column(String, nullable=False, default="PENDING")


class EmploymentOutcome(CuidMixin, Base):
    __tablename__ = "employment_outcomes"

    enrollment_id: Mapped[str] = mapped_column(
        String, ForeignKey("enrollments.id"), nullable=False, index=True
    )
    internship_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("internships.id"), nullable=True
    )
    employment_status: Mapped[str] = mapped_column(String, nullable=False)
    employer_name: Mapped[str | None] = mapped_column(String, nullable=True)
    job_title: Mapped[str | None] = mapped_column(String, nullable=True)
    monthly_amount: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
