"""
Get My Progress Use Case

Returns the onboarding progress of the employee record linked to the caller.
"""

from src.app.errors import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.shared import denied
from src.domain.actor import Actor
from src.domain.base import utcnow
from src.domain.policy import Operation, authorize
from src.shared.result import Error, Result, Return

from .dtos import EmployeeProgressResponse


class GetMyProgressUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor) -> Result[EmployeeProgressResponse]:
        async with self.uow:
            employee = await self.uow.employees.get_by_user_id(actor.id, actor.company_id)
            if employee is None:
                return Return.err(
                    Error(
                        ErrorCode.NOT_FOUND,
                        "No onboarding record is linked to your account",
                    )
                )

            decision = authorize(
                actor,
                Operation.view_own_progress,
                employee.company_id,
                target_owner_id=employee.user_id,
            )
            if not decision.allowed:
                return Return.err(denied(decision))

            rows = await self.uow.assignments.list_for_employee(employee.id)
            return Return.ok(EmployeeProgressResponse.build(employee, rows, utcnow()))
