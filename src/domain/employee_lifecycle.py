"""
Employee onboarding lifecycle.

    not_started -> invited -> in_progress -> completed
    not_started -> in_progress            (manual onboarding, no invitation)

completed is terminal. The completion gate is evaluated from the employee's
full current assignment set every time it is checked.
"""

from datetime import datetime
from typing import Iterable, List, Tuple, Union

from src.domain.entities import (
    AssignmentStatus,
    EmployeeProfile,
    OnboardingStatus,
    OnboardingTask,
    TaskAssignment,
)
from src.domain.errors import InvalidTransitionError

_ALLOWED_TRANSITIONS: dict[OnboardingStatus, tuple[OnboardingStatus, ...]] = {
    OnboardingStatus.not_started: (
        OnboardingStatus.invited,
        OnboardingStatus.in_progress,
    ),
    OnboardingStatus.invited: (OnboardingStatus.in_progress,),
    OnboardingStatus.in_progress: (OnboardingStatus.completed,),
    OnboardingStatus.completed: (),
}

_PRE_START = (OnboardingStatus.not_started, OnboardingStatus.invited)
_RESOLVED = (AssignmentStatus.completed, AssignmentStatus.skipped)


def _coerce(value: Union[str, OnboardingStatus]) -> OnboardingStatus:
    if isinstance(value, OnboardingStatus):
        return value
    try:
        return OnboardingStatus(value)
    except ValueError as exc:
        raise InvalidTransitionError(f"Unknown onboarding status '{value}'") from exc


def can_transition(
    status_from: Union[str, OnboardingStatus], status_to: Union[str, OnboardingStatus]
) -> bool:
    return _coerce(status_to) in _ALLOWED_TRANSITIONS[_coerce(status_from)]


def validate_transition(
    status_from: Union[str, OnboardingStatus], status_to: Union[str, OnboardingStatus]
) -> None:
    source = _coerce(status_from)
    target = _coerce(status_to)
    allowed = _ALLOWED_TRANSITIONS[source]
    if target not in allowed:
        allowed_str = ", ".join(s.value for s in allowed) or "none"
        raise InvalidTransitionError(
            f"Invalid onboarding transition '{source.value}' -> '{target.value}'. "
            f"Allowed targets: {allowed_str}."
        )


def transition(
    employee: EmployeeProfile, target: OnboardingStatus, now: datetime
) -> EmployeeProfile:
    """Move the employee to target, stamping the matching milestone"""
    validate_transition(employee.onboarding_status, target)

    employee.onboarding_status = target
    if target == OnboardingStatus.invited:
        employee.invitation_sent_at = now
    elif target == OnboardingStatus.completed:
        employee.onboarding_completed_at = now
    employee.updated_at = now
    return employee


def mark_invited(employee: EmployeeProfile, now: datetime) -> EmployeeProfile:
    """
    Record an invitation being issued.

    A not_started employee becomes invited; invited and in_progress employees
    keep their status and only get a fresh invitation_sent_at.
    """
    status = employee.onboarding_status
    if status == OnboardingStatus.not_started:
        return transition(employee, OnboardingStatus.invited, now)
    if status == OnboardingStatus.completed:
        raise InvalidTransitionError("Cannot invite an employee who completed onboarding")

    employee.invitation_sent_at = now
    employee.updated_at = now
    return employee


def record_first_login(employee: EmployeeProfile, now: datetime) -> EmployeeProfile:
    if employee.first_login_at is None:
        employee.first_login_at = now
    if employee.onboarding_status in _PRE_START:
        transition(employee, OnboardingStatus.in_progress, now)
    employee.updated_at = now
    return employee


def record_task_activity(employee: EmployeeProfile, now: datetime) -> bool:
    """Employee started or finished a task; returns True if the status moved"""
    if employee.onboarding_status in _PRE_START:
        transition(employee, OnboardingStatus.in_progress, now)
        return True
    return False


def completion_gate_met(
    assignments: Iterable[Tuple[TaskAssignment, OnboardingTask]],
) -> bool:
    """Every required assignment is completed or skipped"""
    return all(
        assignment.status in _RESOLVED
        for assignment, _ in assignments
        if assignment.required
    )


def apply_completion_gate(
    employee: EmployeeProfile,
    assignments: Iterable[Tuple[TaskAssignment, OnboardingTask]],
    now: datetime,
) -> List[OnboardingStatus]:
    """
    Complete the employee when the gate is met.

    Idempotent: a completed employee is left untouched. Returns the statuses
    entered, in order.
    """
    if employee.onboarding_status == OnboardingStatus.completed:
        return []
    if not completion_gate_met(assignments):
        return []

    entered = []
    if employee.onboarding_status in _PRE_START:
        transition(employee, OnboardingStatus.in_progress, now)
        entered.append(OnboardingStatus.in_progress)
    transition(employee, OnboardingStatus.completed, now)
    entered.append(OnboardingStatus.completed)
    return entered
