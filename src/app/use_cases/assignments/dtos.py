"""
Task Assignment Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.domain import assignment_lifecycle
from src.domain.base import as_naive_utc
from src.domain.entities import (
    AssignmentPriority,
    AssignmentStatus,
    OnboardingStatus,
    OnboardingTask,
    TaskAssignment,
    TaskType,
)


class AssignmentResponse(BaseModel):
    """A task assignment together with the task it points at"""

    id: UUID
    employee_id: UUID
    task_id: UUID
    task_title: str
    task_type: TaskType
    required: bool
    order_sequence: int
    status: AssignmentStatus
    effective_status: AssignmentStatus
    is_overdue: bool
    priority: AssignmentPriority
    due_date: Optional[datetime]
    assigned_at: datetime
    started_at: Optional[datetime]
    completed_date: Optional[datetime]
    notes: Optional[str]
    completion_data: Optional[Dict[str, Any]]
    assigned_by: Optional[UUID]

    @classmethod
    def from_entities(
        cls, assignment: TaskAssignment, task: OnboardingTask, now: datetime
    ) -> "AssignmentResponse":
        return cls(
            id=assignment.id,
            employee_id=assignment.employee_id,
            task_id=task.id,
            task_title=task.title,
            task_type=task.task_type,
            required=assignment.required,
            order_sequence=task.order_sequence,
            status=assignment.status,
            effective_status=assignment_lifecycle.effective_status(assignment, now),
            is_overdue=assignment_lifecycle.is_overdue(assignment, now),
            priority=assignment.priority,
            due_date=assignment.due_date,
            assigned_at=assignment.assigned_at,
            started_at=assignment.started_at,
            completed_date=assignment.completed_date,
            notes=assignment.notes,
            completion_data=assignment.completion_data,
            assigned_by=assignment.assigned_by,
        )


class AssignTasksCommand(BaseModel):
    """Explicit assignment of tasks; all active tasks when task_ids is None"""

    task_ids: Optional[List[UUID]] = None
    due_date: Optional[datetime] = None
    priority: AssignmentPriority = AssignmentPriority.medium

    @field_validator("due_date")
    @classmethod
    def _naive_due_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_naive_utc(value)


class AssignTasksResponse(BaseModel):
    employee_id: UUID
    assignments: List[AssignmentResponse]


class TaskActionResponse(BaseModel):
    """Result of start/complete/skip on one assignment"""

    assignment: AssignmentResponse
    employee_status: OnboardingStatus
    onboarding_completed_at: Optional[datetime]
