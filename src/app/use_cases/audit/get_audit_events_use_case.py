"""
Get Audit Events Use Case

Retrieves onboarding audit events for a company with pagination.
"""

from typing import Any, Dict, Optional

from src.app.errors import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.shared import denied
from src.domain.actor import Actor
from src.domain.policy import Operation, authorize
from src.shared.result import Error, Result, Return

MAX_PAGE_SIZE = 100


class GetAuditEventsUseCase:
    """
    Use case for retrieving audit events for a company.

    Business Rules:
    - Caller must be admin or hr
    - Results are company-scoped
    - Results ordered by newest first
    - Supports cursor-based pagination
    - Each event includes action, actor email, timestamp, metadata
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: Actor,
        limit: int = 50,
        cursor: Optional[str] = None,
    ) -> Result[Dict[str, Any]]:
        """
        Execute get audit events use case.

        Args:
            actor: Caller context
            limit: Maximum number of events to return (1-100)
            cursor: Pagination cursor (optional)

        Returns:
            Result with events list and next_cursor, or Error
        """
        if limit < 1 or limit > MAX_PAGE_SIZE:
            return Return.err(
                Error(
                    ErrorCode.VALIDATION_ERROR,
                    f"limit must be between 1 and {MAX_PAGE_SIZE}",
                )
            )

        async with self.uow:
            decision = authorize(actor, Operation.view_audit, actor.company_id)
            if not decision.allowed:
                return Return.err(denied(decision))

            try:
                events, next_cursor = await self.uow.audit_events.get_by_company_paginated(
                    actor.company_id, limit=limit, cursor=cursor
                )
            except ValueError:
                return Return.err(Error(ErrorCode.VALIDATION_ERROR, "Invalid cursor"))

            emails: Dict[Any, Optional[str]] = {}
            events_list = []
            for event in events:
                actor_email = None
                if event.actor_id:
                    if event.actor_id not in emails:
                        profile = await self.uow.profiles.get_by_id(event.actor_id)
                        emails[event.actor_id] = profile.email if profile else None
                    actor_email = emails[event.actor_id]

                events_list.append(
                    {
                        "id": str(event.id),
                        "action": event.action,
                        "actor_id": str(event.actor_id) if event.actor_id else None,
                        "actor_email": actor_email,
                        "timestamp": event.created_at.isoformat() + "Z",
                        "metadata": event.event_metadata or {},
                    }
                )

            return Return.ok({"events": events_list, "next_cursor": next_cursor})
