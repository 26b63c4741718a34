"""
Task Assignment Use Cases

Assigning tasks to employees and moving assignments through their lifecycle.
"""

from .assign_tasks_use_case import AssignTasksToEmployeeUseCase
from .complete_task_use_case import CompleteTaskUseCase
from .dtos import (
    AssignmentResponse,
    AssignTasksCommand,
    AssignTasksResponse,
    TaskActionResponse,
)
from .skip_task_use_case import SkipTaskUseCase
from .start_task_use_case import StartTaskUseCase

__all__ = [
    "AssignTasksToEmployeeUseCase",
    "StartTaskUseCase",
    "CompleteTaskUseCase",
    "SkipTaskUseCase",
    "AssignmentResponse",
    "AssignTasksCommand",
    "AssignTasksResponse",
    "TaskActionResponse",
]
