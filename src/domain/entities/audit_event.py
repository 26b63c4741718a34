"""
AuditEvent Entity

Immutable log of onboarding actions.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from src.domain.base import utcnow


class AuditEvent(SQLModel, table=True):
    """
    AuditEvent entity - immutable record of every onboarding mutation.

    Business Rules:
    - Immutable (never updated or deleted)
    - Written in the same transaction as the change it describes
    - actor_id is empty for service-initiated events
    """

    __tablename__ = "audit_events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    company_id: UUID = Field(index=True)
    actor_id: Optional[UUID] = Field(default=None, index=True)

    action: str = Field(max_length=100)  # e.g., "employee_created", "task_completed"
    event_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_audit_created_at", "created_at"),
        Index("idx_audit_company_action", "company_id", "action"),
    )
