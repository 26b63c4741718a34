from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import AuditEvent


class IAuditEventRepository(ABC):
    """Append-only store of onboarding audit events"""

    @abstractmethod
    async def create(self, audit_event: AuditEvent) -> AuditEvent:
        """Append an event; events are never updated or deleted"""
        pass

    @abstractmethod
    async def get_by_company_paginated(
        self, company_id: UUID, limit: int = 50, cursor: Optional[str] = None
    ) -> Tuple[List[AuditEvent], Optional[str]]:
        """
        One page of a company's events, newest first.

        The cursor is opaque to callers and is the next_cursor of the
        previous page.

        Raises:
            ValueError: cursor cannot be decoded
        """
        pass
