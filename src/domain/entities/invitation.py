"""
Invitation Entity

Single-use credential that links an employee record to a login.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class Invitation(SQLModel, table=True):
    """
    Invitation entity - onboarding invitation for a new hire.

    Business Rules:
    - Expires 7 days after issuance
    - Token is single-use; only its SHA-256 hash is stored
    - Issuing a new invitation supersedes older unused ones
    """

    __tablename__ = "invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    company_id: UUID = Field(foreign_key="companies.id", nullable=False, index=True)
    employee_id: UUID = Field(foreign_key="employee_profiles.id", nullable=False, index=True)

    email: str = Field(max_length=255, nullable=False)
    token_hash: str = Field(unique=True, index=True, max_length=64)

    is_used: bool = Field(default=False)
    used_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    superseded_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_by: Optional[UUID] = Field(default=None, foreign_key="profiles.id")

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_invitation_expires_at", "expires_at"),)
