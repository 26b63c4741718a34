"""
Onboarding Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class ActorRole(str, Enum):
    """Primary role of an authenticated person within a company"""

    admin = "admin"
    hr = "hr"
    manager = "manager"
    employee = "employee"


class SubscriptionTier(str, Enum):
    """Company subscription plan"""

    basic = "basic"
    professional = "professional"
    enterprise = "enterprise"


class OnboardingStatus(str, Enum):
    """Overall onboarding status of an employee record"""

    not_started = "not_started"
    invited = "invited"
    in_progress = "in_progress"
    completed = "completed"


class EmploymentType(str, Enum):
    full_time = "full_time"
    part_time = "part_time"
    contract = "contract"
    intern = "intern"


class TaskType(str, Enum):
    """Kind of onboarding task template"""

    form = "form"
    document = "document"
    acknowledgment = "acknowledgment"
    training = "training"
    meeting = "meeting"


class AssignmentStatus(str, Enum):
    """
    Task assignment status.

    ``overdue`` is normally derived at read time; the stored value exists so
    an external sweep may persist it.
    """

    pending = "pending"
    in_progress = "in_progress"
    completed = "completed"
    skipped = "skipped"
    overdue = "overdue"


class AssignmentPriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class GrantScope(str, Enum):
    """Reach of an additional role grant"""

    company = "company"
    department = "department"
    team = "team"
