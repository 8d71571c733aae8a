"""Notification ORM model. KPI alerts land here, one row per recipient."""

from sqlalchemy import Boolean, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from cohort_insights.infrastructure.persistence.database import Base
from cohort_insights.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    CuidMixin,
)


class Notification(CuidMixin, CreatedAtMixin, Base):
    __tablename__ = "notifications"

    recipient_id: Mapped[str] = mapped_column(
        String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    notification_type: Mapped[str] = mapped_column(String, nullable=False)
    title: Mapped[str] = mapped_column(String, nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    priority: Mapped[str] = mapped_column(String, nullable=False, default="MEDIUM")
    is_read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
