"""
Use Cases

Organized into domain folders:
- actors/: Caller context
- employees/: Employee records and progress
- tasks/: Onboarding task catalog
- assignments/: Task assignment lifecycle
- invitations/: Invitation issuing and consumption
- audit/: Audit logs

Import from subdirectories for better organization.
"""

from .actors import LoadActorUseCase
from .assignments import (
    AssignTasksToEmployeeUseCase,
    CompleteTaskUseCase,
    SkipTaskUseCase,
    StartTaskUseCase,
)
from .audit import GetAuditEventsUseCase
from .employees import (
    CreateEmployeeUseCase,
    GetEmployeeProgressUseCase,
    GetEmployeesUseCase,
    GetMyProgressUseCase,
    GetOnboardingStatsUseCase,
    UpdateEmployeeUseCase,
)
from .invitations import (
    ConsumeInvitationUseCase,
    SendInvitationUseCase,
    ValidateInvitationUseCase,
)
from .tasks import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetAllTasksUseCase,
    UpdateTaskUseCase,
)

__all__ = [
    # Actors
    "LoadActorUseCase",
    # Employees
    "GetEmployeesUseCase",
    "CreateEmployeeUseCase",
    "UpdateEmployeeUseCase",
    "GetEmployeeProgressUseCase",
    "GetMyProgressUseCase",
    "GetOnboardingStatsUseCase",
    # Tasks
    "GetAllTasksUseCase",
    "CreateTaskUseCase",
    "UpdateTaskUseCase",
    "DeleteTaskUseCase",
    # Assignments
    "AssignTasksToEmployeeUseCase",
    "StartTaskUseCase",
    "CompleteTaskUseCase",
    "SkipTaskUseCase",
    # Invitations
    "SendInvitationUseCase",
    "ValidateInvitationUseCase",
    "ConsumeInvitationUseCase",
    # Audit
    "GetAuditEventsUseCase",
]
