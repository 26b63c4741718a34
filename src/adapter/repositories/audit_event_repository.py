import base64
import binascii
from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.audit_event_repository import IAuditEventRepository
from src.domain.entities import AuditEvent


class AuditEventRepository(IAuditEventRepository):
    """AuditEvent repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, audit_event: AuditEvent) -> AuditEvent:
        """Create a new audit event (immutable)"""
        self.session.add(audit_event)
        await self.session.flush()
        await self.session.refresh(audit_event)
        return audit_event

    async def get_by_company_paginated(
        self, company_id: UUID, limit: int = 50, cursor: Optional[str] = None
    ) -> Tuple[List[AuditEvent], Optional[str]]:
        """
        Get audit events for a company with cursor-based pagination.

        Cursor format: base64-encoded ISO timestamp of created_at

        Raises:
            ValueError: cursor cannot be decoded
        """
        stmt = select(AuditEvent).where(AuditEvent.company_id == company_id)

        if cursor:
            try:
                cursor_timestamp_str = base64.b64decode(cursor, validate=True).decode("utf-8")
                cursor_timestamp = datetime.fromisoformat(cursor_timestamp_str)
            except (binascii.Error, UnicodeDecodeError) as e:
                raise ValueError(f"Invalid cursor: {cursor}") from e
            stmt = stmt.where(AuditEvent.created_at < cursor_timestamp)

        # Newest first; one extra row tells whether another page exists
        stmt = stmt.order_by(col(AuditEvent.created_at).desc()).limit(limit + 1)

        result = await self.session.execute(stmt)
        events = list(result.scalars().all())

        has_more = len(events) > limit
        if has_more:
            events = events[:limit]

        next_cursor = None
        if has_more and events:
            cursor_timestamp_str = events[-1].created_at.isoformat()
            next_cursor = base64.b64encode(cursor_timestamp_str.encode("utf-8")).decode("utf-8")

        return events, next_cursor
