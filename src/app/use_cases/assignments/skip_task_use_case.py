"""
Skip Task Use Case

A privileged actor waives an open assignment.
"""

import logging
from typing import Optional
from uuid import UUID

from src.app.errors import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.shared import denied, not_found, record_audit
from src.domain import assignment_lifecycle, employee_lifecycle
from src.domain.actor import Actor
from src.domain.base import utcnow
from src.domain.errors import InvalidTransitionError
from src.domain.policy import Operation, authorize
from src.shared.result import Error, Result, Return

from .dtos import AssignmentResponse, TaskActionResponse

logger = logging.getLogger(__name__)


class SkipTaskUseCase:
    """
    Use case for skipping an assignment.

    Business Rules:
    - admin/hr for any employee of the company, managers for direct reports
    - pending or in_progress -> skipped
    - Skipped assignments count as resolved for the completion gate
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, assignment_id: UUID, notes: Optional[str] = None
    ) -> Result[TaskActionResponse]:
        async with self.uow:
            assignment = await self.uow.assignments.get_by_id(assignment_id, actor.company_id)
            if assignment is None:
                return Return.err(not_found("Assignment"))

            employee = await self.uow.employees.get_by_id_for_update(
                assignment.employee_id, actor.company_id
            )
            if employee is None:
                return Return.err(not_found("Employee"))

            decision = authorize(
                actor,
                Operation.skip_task,
                employee.company_id,
                target_owner_id=employee.manager_id,
                target_department=employee.department,
            )
            if not decision.allowed:
                return Return.err(denied(decision))

            task = await self.uow.tasks.get_by_id(assignment.task_id, employee.company_id)
            if task is None:
                return Return.err(not_found("Task"))

            now = utcnow()
            try:
                assignment_lifecycle.skip(assignment, now, notes=notes)
                await self.uow.assignments.update(assignment)

                rows = await self.uow.assignments.list_for_employee(employee.id)
                entered = employee_lifecycle.apply_completion_gate(employee, rows, now)
            except InvalidTransitionError as e:
                return Return.err(Error(ErrorCode.INVALID_TRANSITION, str(e)))

            if entered:
                await self.uow.employees.update(employee)
                logger.info(
                    "Employee %s moved through %s",
                    employee.id,
                    " -> ".join(status.value for status in entered),
                )

            await record_audit(
                self.uow,
                employee.company_id,
                actor.id,
                "task_skipped",
                {"assignment_id": str(assignment.id), "employee_id": str(employee.id)},
            )

            await self.uow.commit()

            return Return.ok(
                TaskActionResponse(
                    assignment=AssignmentResponse.from_entities(assignment, task, now),
                    employee_status=employee.onboarding_status,
                    onboarding_completed_at=employee.onboarding_completed_at,
                )
            )
