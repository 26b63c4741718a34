"""
RoleAssignment Entity

Additional role grants layered on top of a profile's primary role.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import ActorRole, GrantScope


class RoleAssignment(SQLModel, table=True):
    """
    RoleAssignment entity - additive capability grant.

    Business Rules:
    - scope=company applies to every record of the company
    - scope=department applies to employees whose department == scope_id
    - scope=team applies to employees whose manager_id == scope_id
    - Expired grants are ignored
    """

    __tablename__ = "role_assignments"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    company_id: UUID = Field(foreign_key="companies.id", nullable=False, index=True)
    profile_id: UUID = Field(foreign_key="profiles.id", nullable=False, index=True)

    role: ActorRole = Field(nullable=False)
    scope: GrantScope = Field(default=GrantScope.company)
    scope_id: Optional[str] = Field(default=None, max_length=100)

    granted_by: Optional[UUID] = Field(default=None, foreign_key="profiles.id")

    # Timestamps
    expires_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_role_assignment_profile_company", "profile_id", "company_id"),)
