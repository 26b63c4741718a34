"""
Task Catalog Use Cases

Onboarding task templates of a company.
"""

from .create_task_use_case import CreateTaskUseCase
from .delete_task_use_case import DeleteTaskUseCase
from .dtos import CreateTaskCommand, TaskResponse, UpdateTaskCommand
from .get_all_tasks_use_case import GetAllTasksUseCase
from .update_task_use_case import UpdateTaskUseCase

__all__ = [
    "GetAllTasksUseCase",
    "CreateTaskUseCase",
    "UpdateTaskUseCase",
    "DeleteTaskUseCase",
    "CreateTaskCommand",
    "UpdateTaskCommand",
    "TaskResponse",
]
