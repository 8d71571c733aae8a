"""Partner, center, program and cohort tables (owned by the CRUD platform)."""

from datetime import date

from sqlalchemy import Boolean, Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from cohort_insights.infrastructure.persistence.database import Base
from cohort_insights.infrastructure.persistence.models.mixins import CuidMixin


class Partner(CuidMixin, Base):
    """Tenant organization."""

    __tablename__ = "partners"

    name: Mapped[str] = mapped_column(String, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class Center(CuidMixin, Base):
    __tablename__ = "centers"

    partner_id: Mapped[str] = mapped_column(
        String, ForeignKey("partners.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    location: Mapped[str | None] = mapped_column(String, nullable=True)
    region: Mapped[str | None] = mapped_column(String, nullable=True)
    country: Mapped[str | None] = mapped_column(String, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class Program(CuidMixin, Base):
    __tablename__ = "programs"

    partner_id: Mapped[str] = mapped_column(
        String, ForeignKey("partners.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    duration_weeks: Mapped[int | None] = mapped_column(Integer, nullable=True)


class Cohort(CuidMixin, Base):
    __tablename__ = "cohorts"

    center_id: Mapped[str] = mapped_column(
        String, ForeignKey("centers.id"), nullable=False, index=True
    )
    program_id: Mapped[str] = mapped_column(
        String, ForeignKey("programs.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[str] = mapped_column(String, nullable=False, default="ACTIVE")
    target_enrollment: Mapped[int | None] = mapped_column(Integer, nullable=True)
