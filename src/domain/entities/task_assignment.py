"""
TaskAssignment Entity

One onboarding task assigned to one employee.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from src.domain.base import utcnow

from .enums import AssignmentPriority, AssignmentStatus


class TaskAssignment(SQLModel, table=True):
    """
    TaskAssignment entity - an employee's copy of a task with its own lifecycle.

    Business Rules:
    - (employee_id, task_id) is unique
    - Employee and task belong to the same company as the assignment
    - completed_date is set iff status == completed
    - required is copied from the task at creation; template edits never change it
    - Never deleted (audit trail)
    """

    __tablename__ = "task_assignments"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    company_id: UUID = Field(foreign_key="companies.id", nullable=False, index=True)
    employee_id: UUID = Field(foreign_key="employee_profiles.id", nullable=False, index=True)
    task_id: UUID = Field(foreign_key="onboarding_tasks.id", nullable=False, index=True)

    status: AssignmentStatus = Field(default=AssignmentStatus.pending)
    priority: AssignmentPriority = Field(default=AssignmentPriority.medium)
    required: bool = Field(default=True)

    notes: Optional[str] = Field(default=None)
    completion_data: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    assigned_by: Optional[UUID] = Field(default=None, foreign_key="profiles.id")

    # Timestamps
    due_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    assigned_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    started_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    completed_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_assignment_employee_task", "employee_id", "task_id", unique=True),
        Index("idx_assignment_status", "status"),
    )
