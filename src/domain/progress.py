"""
Progress aggregation over one employee's assignments.

Pure and order-independent: only counts are used. Required counts come
from the assignment, not the current task template.
"""

from typing import Iterable, Tuple

from pydantic import BaseModel

from src.domain.entities import AssignmentStatus, OnboardingTask, TaskAssignment


class ProgressSummary(BaseModel):
    total: int = 0
    completed: int = 0
    required: int = 0
    completed_required: int = 0
    progress_percentage: float = 0.0
    required_progress_percentage: float = 0.0


def _percentage(part: int, whole: int) -> float:
    if whole == 0:
        return 0.0
    return part / whole * 100


def summarize_progress(
    assignments: Iterable[Tuple[TaskAssignment, OnboardingTask]],
) -> ProgressSummary:
    total = completed = required = completed_required = 0
    for assignment, _ in assignments:
        done = assignment.status == AssignmentStatus.completed
        total += 1
        completed += done
        if assignment.required:
            required += 1
            completed_required += done

    return ProgressSummary(
        total=total,
        completed=completed,
        required=required,
        completed_required=completed_required,
        progress_percentage=_percentage(completed, total),
        required_progress_percentage=_percentage(completed_required, required),
    )
