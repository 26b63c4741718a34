"""
Task Catalog Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import OnboardingTask, TaskType


class CreateTaskCommand(BaseModel):
    """order_sequence defaults to after the last task of the company"""

    title: str
    description: Optional[str] = None
    task_type: TaskType = TaskType.form
    required: bool = True
    order_sequence: Optional[int] = None


class UpdateTaskCommand(BaseModel):
    """Partial update; only fields explicitly set are applied"""

    title: Optional[str] = None
    description: Optional[str] = None
    task_type: Optional[TaskType] = None
    required: Optional[bool] = None
    order_sequence: Optional[int] = None
    is_active: Optional[bool] = None


class TaskResponse(BaseModel):
    id: UUID
    company_id: UUID
    title: str
    description: Optional[str]
    task_type: TaskType
    required: bool
    order_sequence: int
    is_active: bool
    created_by: Optional[UUID]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, task: OnboardingTask) -> "TaskResponse":
        return cls.model_validate(task, from_attributes=True)
