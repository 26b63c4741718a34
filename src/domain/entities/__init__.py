"""
Onboarding Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    ActorRole,
    AssignmentPriority,
    AssignmentStatus,
    EmploymentType,
    GrantScope,
    OnboardingStatus,
    SubscriptionTier,
    TaskType,
)

# Export all entities
from .company import Company
from .profile import Profile
from .role_assignment import RoleAssignment
from .employee_profile import EmployeeProfile
from .onboarding_task import OnboardingTask
from .task_assignment import TaskAssignment
from .invitation import Invitation
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "ActorRole",
    "AssignmentPriority",
    "AssignmentStatus",
    "EmploymentType",
    "GrantScope",
    "OnboardingStatus",
    "SubscriptionTier",
    "TaskType",
    # Entities
    "Company",
    "Profile",
    "RoleAssignment",
    "EmployeeProfile",
    "OnboardingTask",
    "TaskAssignment",
    "Invitation",
    "AuditEvent",
]
