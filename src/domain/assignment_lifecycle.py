"""
Task assignment lifecycle.

    pending -> in_progress -> completed
    pending -> completed
    pending | in_progress -> skipped

overdue is a read-time classification of an open assignment past its due
date. A stored overdue value (written by an external sweep) is treated as
open: pending if never started, in_progress otherwise.
"""

from datetime import datetime
from typing import Optional, Union

from src.domain.entities import AssignmentStatus, TaskAssignment
from src.domain.errors import InvalidTransitionError

_ALLOWED_TRANSITIONS: dict[AssignmentStatus, tuple[AssignmentStatus, ...]] = {
    AssignmentStatus.pending: (
        AssignmentStatus.in_progress,
        AssignmentStatus.completed,
        AssignmentStatus.skipped,
    ),
    AssignmentStatus.in_progress: (
        AssignmentStatus.completed,
        AssignmentStatus.skipped,
    ),
    AssignmentStatus.completed: (),
    AssignmentStatus.skipped: (),
}

OPEN_STATUSES = (
    AssignmentStatus.pending,
    AssignmentStatus.in_progress,
    AssignmentStatus.overdue,
)


def _coerce(value: Union[str, AssignmentStatus]) -> AssignmentStatus:
    if isinstance(value, AssignmentStatus):
        return value
    try:
        return AssignmentStatus(value)
    except ValueError as exc:
        raise InvalidTransitionError(f"Unknown assignment status '{value}'") from exc


def stored_state(assignment: TaskAssignment) -> AssignmentStatus:
    """Resolve a persisted overdue marker back to the underlying state"""
    status = _coerce(assignment.status)
    if status == AssignmentStatus.overdue:
        if assignment.started_at is None:
            return AssignmentStatus.pending
        return AssignmentStatus.in_progress
    return status


def can_transition(
    status_from: Union[str, AssignmentStatus], status_to: Union[str, AssignmentStatus]
) -> bool:
    source = _coerce(status_from)
    target = _coerce(status_to)
    if source == AssignmentStatus.overdue or target == AssignmentStatus.overdue:
        return False
    return target in _ALLOWED_TRANSITIONS[source]


def validate_transition(assignment: TaskAssignment, target: AssignmentStatus) -> None:
    source = stored_state(assignment)
    allowed = _ALLOWED_TRANSITIONS[source]
    if target not in allowed:
        allowed_str = ", ".join(s.value for s in allowed) or "none"
        raise InvalidTransitionError(
            f"Invalid assignment transition '{source.value}' -> '{target.value}'. "
            f"Allowed targets: {allowed_str}."
        )


def start(assignment: TaskAssignment, now: datetime) -> TaskAssignment:
    validate_transition(assignment, AssignmentStatus.in_progress)
    assignment.status = AssignmentStatus.in_progress
    assignment.started_at = now
    return assignment


def complete(
    assignment: TaskAssignment,
    now: datetime,
    notes: Optional[str] = None,
    completion_data: Optional[dict] = None,
) -> bool:
    """
    Complete the assignment.

    Completing an already completed assignment is a no-op and returns False;
    the original completion record is kept.
    """
    if _coerce(assignment.status) == AssignmentStatus.completed:
        return False

    validate_transition(assignment, AssignmentStatus.completed)
    assignment.status = AssignmentStatus.completed
    assignment.completed_date = now
    if notes is not None:
        assignment.notes = notes
    if completion_data is not None:
        assignment.completion_data = completion_data
    return True


def skip(
    assignment: TaskAssignment, now: datetime, notes: Optional[str] = None
) -> TaskAssignment:
    validate_transition(assignment, AssignmentStatus.skipped)
    assignment.status = AssignmentStatus.skipped
    if notes is not None:
        assignment.notes = notes
    return assignment


def is_overdue(assignment: TaskAssignment, now: datetime) -> bool:
    if _coerce(assignment.status) not in OPEN_STATUSES:
        return False
    if assignment.due_date is None:
        return _coerce(assignment.status) == AssignmentStatus.overdue
    return assignment.due_date < now


def effective_status(assignment: TaskAssignment, now: datetime) -> AssignmentStatus:
    if is_overdue(assignment, now):
        return AssignmentStatus.overdue
    return stored_state(assignment)
