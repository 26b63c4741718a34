"""
Get Employee Progress Use Case

Returns an employee's onboarding statistics and assignments.
"""

from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.shared import denied, not_found
from src.domain.actor import Actor
from src.domain.base import utcnow
from src.domain.policy import Operation, authorize
from src.shared.result import Result, Return

from .dtos import EmployeeProgressResponse


class GetEmployeeProgressUseCase:
    """
    Use case for viewing another employee's onboarding progress.

    Business Rules:
    - admin and hr see any employee of their company
    - Managers see their direct reports only
    - Records of other companies are reported as not found
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, employee_id: UUID
    ) -> Result[EmployeeProgressResponse]:
        async with self.uow:
            employee = await self.uow.employees.get_by_id(employee_id, actor.company_id)
            if employee is None:
                return Return.err(not_found("Employee"))

            decision = authorize(
                actor,
                Operation.view_progress,
                employee.company_id,
                target_owner_id=employee.manager_id,
                target_department=employee.department,
            )
            if not decision.allowed:
                return Return.err(denied(decision))

            rows = await self.uow.assignments.list_for_employee(employee.id)
            return Return.ok(EmployeeProgressResponse.build(employee, rows, utcnow()))
