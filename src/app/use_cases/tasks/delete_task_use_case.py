"""
Delete Task Use Case

Soft-deletes a task template (is_active=False).
"""

from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.shared import denied, not_found, record_audit
from src.domain.actor import Actor
from src.domain.base import utcnow
from src.domain.policy import Operation, authorize
from src.shared.result import Result, Return

from .dtos import TaskResponse


class DeleteTaskUseCase:
    """
    Use case for removing a task from the catalog.

    Business Rules:
    - Soft delete only; the row stays for existing assignments
    - Existing assignments are not altered
    - The task leaves the default auto-assignment set
    - Deleting an already deleted task succeeds without changes
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, task_id: UUID) -> Result[TaskResponse]:
        async with self.uow:
            task = await self.uow.tasks.get_by_id(task_id, actor.company_id)
            if task is None:
                return Return.err(not_found("Task"))

            decision = authorize(actor, Operation.manage_tasks, task.company_id)
            if not decision.allowed:
                return Return.err(denied(decision))

            if not task.is_active:
                return Return.ok(TaskResponse.from_entity(task))

            task.is_active = False
            task.updated_at = utcnow()
            await self.uow.tasks.update(task)

            await record_audit(
                self.uow,
                task.company_id,
                actor.id,
                "task_deleted",
                {"task_id": str(task.id), "title": task.title},
            )

            await self.uow.commit()

            return Return.ok(TaskResponse.from_entity(task))
