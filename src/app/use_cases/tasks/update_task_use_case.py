"""
Update Task Use Case

Edits a task template. Existing assignments keep pointing at the task and
are not otherwise touched.
"""

from uuid import UUID

from src.app.errors import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.shared import denied, not_found, record_audit
from src.domain.actor import Actor
from src.domain.base import utcnow
from src.domain.policy import Operation, authorize
from src.shared.result import Error, Result, Return

from .dtos import TaskResponse, UpdateTaskCommand


class UpdateTaskUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, task_id: UUID, command: UpdateTaskCommand
    ) -> Result[TaskResponse]:
        changes = command.model_dump(exclude_unset=True)

        async with self.uow:
            task = await self.uow.tasks.get_by_id(task_id, actor.company_id)
            if task is None:
                return Return.err(not_found("Task"))

            decision = authorize(actor, Operation.manage_tasks, task.company_id)
            if not decision.allowed:
                return Return.err(denied(decision))

            if "title" in changes:
                changes["title"] = (changes["title"] or "").strip()
                if not changes["title"]:
                    return Return.err(
                        Error(ErrorCode.VALIDATION_ERROR, "Task title is required")
                    )

            for field in ("task_type", "required", "order_sequence", "is_active"):
                if field in changes and changes[field] is None:
                    return Return.err(
                        Error(ErrorCode.VALIDATION_ERROR, f"{field} cannot be null")
                    )

            for field, value in changes.items():
                setattr(task, field, value)
            task.updated_at = utcnow()
            await self.uow.tasks.update(task)

            await record_audit(
                self.uow,
                task.company_id,
                actor.id,
                "task_updated",
                {"task_id": str(task.id), "fields": sorted(changes)},
            )

            await self.uow.commit()

            return Return.ok(TaskResponse.from_entity(task))
