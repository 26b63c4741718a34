"""
Start Task Use Case

The employee linked to an assignment begins working on it.
"""

import logging
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


class StartTaskUseCase:
    """
    Use case for starting an assignment.

    Business Rules:
    - Only the actor linked to the assignment's employee may start it
    - pending -> in_progress only
    - A not_started or invited employee moves to in_progress
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, assignment_id: UUID) -> Result[TaskActionResponse]:
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
                Operation.progress_own_task,
                employee.company_id,
                target_owner_id=employee.user_id,
            )
            if not decision.allowed:
                return Return.err(denied(decision))

            task = await self.uow.tasks.get_by_id(assignment.task_id, employee.company_id)
            if task is None:
                return Return.err(not_found("Task"))

            now = utcnow()
            try:
                assignment_lifecycle.start(assignment, now)
                moved = employee_lifecycle.record_task_activity(employee, now)
            except InvalidTransitionError as e:
                return Return.err(Error(ErrorCode.INVALID_TRANSITION, str(e)))

            await self.uow.assignments.update(assignment)
            if moved:
                await self.uow.employees.update(employee)
                logger.info(
                    "Employee %s moved to %s", employee.id, employee.onboarding_status.value
                )

            await record_audit(
                self.uow,
                employee.company_id,
                actor.id,
                "task_started",
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
