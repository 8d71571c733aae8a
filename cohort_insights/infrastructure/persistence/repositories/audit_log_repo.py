"""Audit log repository. Append-only; implements IAuditLogRepository."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from cohort_insights.application.dtos.alerts import AuditLogEntryCreate
from cohort_insights.application.dtos.records import AuditLogRecord
from cohort_insights.infrastructure.persistence.models.audit_log import AuditLog
from cohort_insights.shared.utils.datetime import ensure_utc
from cohort_insights.shared.utils.generators import generate_cuid


def audit_log_to_record(row: AuditLog) -> AuditLogRecord:
    """Map ORM to application record."""
    return AuditLogRecord(
        id=row.id,
        actor_id=row.actor_id,
        actor_role=row.actor_role,
        action=row.action,
        entity_type=row.entity_type,
        entity_id=row.entity_id,
        description=row.description,
        created_at=ensure_utc(row.created_at) or row.created_at,
    )


class AuditLogRepository:
    """Append-only audit log repository. No update/delete."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def create(self, entry: AuditLogEntryCreate) -> AuditLogRecord:
        """Append one audit log entry; return created record."""
        row = AuditLog(
            id=generate_cuid(),
            actor_id=entry.actor_id,
            actor_role=entry.actor_role,
            action=entry.action,
            entity_type=entry.entity_type,
            entity_id=entry.entity_id,
            description=entry.description,
        )
        self.db.add(row)
        await self.db.flush()
        await self.db.refresh(row)
        return audit_log_to_record(row)

    async def exists_since(
        self, action: str, entity_type: str, since: datetime
    ) -> bool:
        """True if an entry with this action and entity_type exists at or after since."""
        stmt = (
            select(AuditLog.id)
            .where(
                and_(
                    AuditLog.action == action,
                    AuditLog.entity_type == entity_type,
                    AuditLog.created_at >= since,
                )
            )
            .limit(1)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none() is not None
