"""Notification repository; implements INotificationRepository."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from cohort_insights.application.dtos.alerts import NotificationCreate
from cohort_insights.application.dtos.records import NotificationRecord
from cohort_insights.infrastructure.persistence.models.notification import Notification
from cohort_insights.shared.utils.datetime import ensure_utc
from cohort_insights.shared.utils.generators import generate_cuid


def notification_to_record(row: Notification) -> NotificationRecord:
    return NotificationRecord(
        id=row.id,
        recipient_id=row.recipient_id,
        notification_type=row.notification_type,
        title=row.title,
        message=row.message,
        priority=row.priority,
        is_read=row.is_read,
        created_at=ensure_utc(row.created_at) or row.created_at,
    )


class NotificationRepository:
    """Creates notifications; delivery is handled elsewhere."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def create(self, data: NotificationCreate) -> NotificationRecord:
        """Persist one unread notification."""
        row = Notification(
            id=generate_cuid(),
            recipient_id=data.recipient_id,
            notification_type=data.notification_type.value,
            title=data.title,
            message=data.message,
            priority=data.priority.value,
            is_read=False,
        )
        self.db.add(row)
        await self.db.flush()
        await self.db.refresh(row)
        return notification_to_record(row)
