"""
Employee Onboarding Use Cases

Employee records, progress views and dashboard statistics.
"""

from .create_employee_use_case import CreateEmployeeUseCase
from .dtos import (
    CreateEmployeeCommand,
    CreateEmployeeResponse,
    EmployeeProgressResponse,
    EmployeeResponse,
    OnboardingStatsResponse,
    UpdateEmployeeCommand,
)
from .get_employee_progress_use_case import GetEmployeeProgressUseCase
from .get_employees_use_case import GetEmployeesUseCase
from .get_my_progress_use_case import GetMyProgressUseCase
from .get_onboarding_stats_use_case import GetOnboardingStatsUseCase
from .update_employee_use_case import UpdateEmployeeUseCase

__all__ = [
    "GetEmployeesUseCase",
    "CreateEmployeeUseCase",
    "UpdateEmployeeUseCase",
    "GetEmployeeProgressUseCase",
    "GetMyProgressUseCase",
    "GetOnboardingStatsUseCase",
    "CreateEmployeeCommand",
    "UpdateEmployeeCommand",
    "CreateEmployeeResponse",
    "EmployeeResponse",
    "EmployeeProgressResponse",
    "OnboardingStatsResponse",
]
