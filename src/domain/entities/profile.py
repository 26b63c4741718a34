"""
Profile Entity

An authenticated person (actor) belonging to one company.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import ActorRole


class Profile(SQLModel, table=True):
    """
    Profile entity - the actor record behind a login.

    Business Rules:
    - Provisioned outside the onboarding core
    - role is exactly one of admin/hr/manager/employee
    - Deactivated (is_active=False), never deleted
    """

    __tablename__ = "profiles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    company_id: UUID = Field(foreign_key="companies.id", nullable=False, index=True)

    email: str = Field(unique=True, index=True, max_length=255)
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)

    role: ActorRole = Field(nullable=False)
    is_active: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_profile_company_role", "company_id", "role"),)
