"""
Get All Tasks Use Case

Lists the onboarding task catalog of the caller's company.
"""

from typing import List

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.shared import denied
from src.domain.actor import Actor
from src.domain.policy import Operation, authorize
from src.shared.result import Result, Return

from .dtos import TaskResponse


class GetAllTasksUseCase:
    """
    Use case for reading the task catalog.

    Business Rules:
    - Every active actor of the company may read active tasks
    - Inactive (deleted) tasks are only listed for actors who manage tasks
    - Ordered by order_sequence, then title
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, include_inactive: bool = False
    ) -> Result[List[TaskResponse]]:
        async with self.uow:
            operation = Operation.manage_tasks if include_inactive else Operation.read_tasks
            decision = authorize(actor, operation, actor.company_id)
            if not decision.allowed:
                return Return.err(denied(decision))

            tasks = await self.uow.tasks.list_by_company(
                actor.company_id, include_inactive=include_inactive
            )
            return Return.ok([TaskResponse.from_entity(t) for t in tasks])
