"""Helpers shared by onboarding use cases."""

from typing import Any, Dict, Optional
from uuid import UUID

from src.app.errors import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent
from src.domain.policy import Decision
from src.shared.result import Error


def denied(decision: Decision) -> Error:
    return Error(ErrorCode.FORBIDDEN, decision.message)


def not_found(entity: str) -> Error:
    return Error(ErrorCode.NOT_FOUND, f"{entity} not found")


async def record_audit(
    uow: UnitOfWork,
    company_id: UUID,
    actor_id: Optional[UUID],
    action: str,
    metadata: Dict[str, Any],
) -> AuditEvent:
    audit = AuditEvent(
        company_id=company_id,
        actor_id=actor_id,
        action=action,
        event_metadata=metadata,
    )
    return await uow.audit_events.create(audit)
