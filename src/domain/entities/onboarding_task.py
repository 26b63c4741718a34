"""
OnboardingTask Entity

Reusable task template scoped to a company.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import TaskType


class OnboardingTask(SQLModel, table=True):
    """
    OnboardingTask entity - task template.

    Business Rules:
    - order_sequence drives display and default assignment order
    - Inactive tasks are left out of default auto-assignment
    - Soft-deleted (is_active=False); existing assignments are untouched
    """

    __tablename__ = "onboarding_tasks"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    company_id: UUID = Field(foreign_key="companies.id", nullable=False, index=True)

    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None)
    task_type: TaskType = Field(default=TaskType.form)

    required: bool = Field(default=True)
    order_sequence: int = Field(default=0)
    is_active: bool = Field(default=True)

    created_by: Optional[UUID] = Field(default=None, foreign_key="profiles.id")

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_task_company_active", "company_id", "is_active"),)
