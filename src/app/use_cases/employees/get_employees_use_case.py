"""
Get Employees Use Case

Lists the employee records visible to the caller.
"""

from typing import List, Optional

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.shared import denied
from src.domain.actor import Actor
from src.domain.entities import OnboardingStatus
from src.domain.policy import Operation, authorize
from src.shared.result import Result, Return

from .dtos import EmployeeResponse


class GetEmployeesUseCase:
    """
    Use case for listing employees of the caller's company.

    Business Rules:
    - Any active actor of the company may list employees
    - Managers only see their direct reports
    - Optional onboarding status filter and free-text search
    - Deactivated employees are hidden unless explicitly requested
    - Newest records first
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: Actor,
        status: Optional[OnboardingStatus] = None,
        search: Optional[str] = None,
        include_inactive: bool = False,
    ) -> Result[List[EmployeeResponse]]:
        async with self.uow:
            decision = authorize(
                actor, Operation.read_employees, actor.company_id, list_read=True
            )
            if not decision.allowed:
                return Return.err(denied(decision))

            manager_id = actor.id if decision.restricted_to_owner else None
            search = search.strip() if search else None

            employees = await self.uow.employees.list_by_company(
                actor.company_id,
                status=status,
                manager_id=manager_id,
                search=search or None,
                include_inactive=include_inactive,
            )

            return Return.ok([EmployeeResponse.from_entity(e) for e in employees])
