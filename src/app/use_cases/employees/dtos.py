"""
Employee Use Case DTOs (Data Transfer Objects)

Command and Response classes for the employee onboarding domain.
"""

from datetime import date, datetime
from typing import List, Optional, Tuple
from uuid import UUID

from pydantic import BaseModel

from src.app.use_cases.assignments.dtos import AssignmentResponse
from src.domain.entities import (
    EmployeeProfile,
    EmploymentType,
    OnboardingStatus,
    OnboardingTask,
    TaskAssignment,
)
from src.domain.progress import ProgressSummary, summarize_progress


# ============================================================================
# Command DTOs
# ============================================================================


class CreateEmployeeCommand(BaseModel):
    """
    Create employee command - validated intent to register a new hire

    manager_id defaults to the calling manager when omitted.
    """

    first_name: str
    last_name: str
    personal_email: str
    work_email: Optional[str] = None
    employee_number: Optional[str] = None
    employment_type: EmploymentType = EmploymentType.full_time
    department: Optional[str] = None
    position: Optional[str] = None
    start_date: Optional[date] = None
    manager_id: Optional[UUID] = None
    assign_default_tasks: bool = True


class UpdateEmployeeCommand(BaseModel):
    """Partial update; only fields explicitly set are applied"""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    personal_email: Optional[str] = None
    work_email: Optional[str] = None
    employee_number: Optional[str] = None
    employment_type: Optional[EmploymentType] = None
    department: Optional[str] = None
    position: Optional[str] = None
    start_date: Optional[date] = None
    manager_id: Optional[UUID] = None
    is_active: Optional[bool] = None


# ============================================================================
# Response DTOs
# ============================================================================


class EmployeeResponse(BaseModel):
    id: UUID
    company_id: UUID
    user_id: Optional[UUID]
    employee_number: Optional[str]
    first_name: str
    last_name: str
    personal_email: str
    work_email: Optional[str]
    employment_type: EmploymentType
    department: Optional[str]
    position: Optional[str]
    start_date: Optional[date]
    manager_id: Optional[UUID]
    created_by: UUID
    onboarding_status: OnboardingStatus
    is_active: bool
    invitation_sent_at: Optional[datetime]
    first_login_at: Optional[datetime]
    onboarding_completed_at: Optional[datetime]
    created_at: datetime

    @classmethod
    def from_entity(cls, employee: EmployeeProfile) -> "EmployeeResponse":
        return cls.model_validate(employee, from_attributes=True)


class CreateEmployeeResponse(BaseModel):
    employee: EmployeeResponse
    assignments: List[AssignmentResponse]


class EmployeeProgressResponse(BaseModel):
    """Employee record, completion statistics and assignments"""

    employee: EmployeeResponse
    progress: ProgressSummary
    assignments: List[AssignmentResponse]

    @classmethod
    def build(
        cls,
        employee: EmployeeProfile,
        rows: List[Tuple[TaskAssignment, OnboardingTask]],
        now: datetime,
    ) -> "EmployeeProgressResponse":
        return cls(
            employee=EmployeeResponse.from_entity(employee),
            progress=summarize_progress(rows),
            assignments=[
                AssignmentResponse.from_entities(assignment, task, now)
                for assignment, task in rows
            ],
        )


class OnboardingStatsResponse(BaseModel):
    """Dashboard counters over the employees visible to the caller"""

    total: int
    not_started: int
    invited: int
    in_progress: int
    completed: int
