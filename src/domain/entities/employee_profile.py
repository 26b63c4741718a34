"""
EmployeeProfile Entity

The HR record of a hire, independent of login capability.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import EmploymentType, OnboardingStatus


class EmployeeProfile(SQLModel, table=True):
    """
    EmployeeProfile entity - a hire's onboarding record.

    Business Rules:
    - personal_email and work_email are unique within a company
    - user_id stays empty until an invitation is consumed
    - onboarding_completed_at is set iff onboarding_status == completed
    - Status only moves forward; completed is terminal
    - Deactivated (is_active=False), never deleted
    """

    __tablename__ = "employee_profiles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    company_id: UUID = Field(foreign_key="companies.id", nullable=False, index=True)
    user_id: Optional[UUID] = Field(default=None, foreign_key="profiles.id", index=True)

    employee_number: Optional[str] = Field(default=None, max_length=50)
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    personal_email: str = Field(max_length=255)
    work_email: Optional[str] = Field(default=None, max_length=255)

    employment_type: EmploymentType = Field(default=EmploymentType.full_time)
    department: Optional[str] = Field(default=None, max_length=100)
    position: Optional[str] = Field(default=None, max_length=100)
    start_date: Optional[date] = Field(default=None)

    manager_id: Optional[UUID] = Field(default=None, foreign_key="profiles.id", index=True)
    created_by: UUID = Field(foreign_key="profiles.id", nullable=False)

    onboarding_status: OnboardingStatus = Field(default=OnboardingStatus.not_started)
    is_active: bool = Field(default=True)

    # Onboarding milestones
    invitation_sent_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    first_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    onboarding_completed_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_employee_company_personal_email", "company_id", "personal_email", unique=True),
        Index("idx_employee_company_work_email", "company_id", "work_email", unique=True),
        Index("idx_employee_company_status", "company_id", "onboarding_status"),
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
