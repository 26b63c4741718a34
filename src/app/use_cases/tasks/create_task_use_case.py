"""
Create Task Use Case

Adds a task template to the company's onboarding catalog.
"""

from src.app.errors import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.shared import denied, record_audit
from src.domain.actor import Actor
from src.domain.entities import OnboardingTask
from src.domain.policy import Operation, authorize
from src.shared.result import Error, Result, Return

from .dtos import CreateTaskCommand, TaskResponse


class CreateTaskUseCase:
    """
    Use case for creating an onboarding task template.

    Business Rules:
    - Only admin, hr and manager actors may edit the catalog
    - Title must not be blank
    - Without an explicit order_sequence the task is appended last
    - New tasks are active and join the default assignment set
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, command: CreateTaskCommand) -> Result[TaskResponse]:
        async with self.uow:
            decision = authorize(actor, Operation.manage_tasks, actor.company_id)
            if not decision.allowed:
                return Return.err(denied(decision))

            title = command.title.strip()
            if not title:
                return Return.err(Error(ErrorCode.VALIDATION_ERROR, "Task title is required"))

            order_sequence = command.order_sequence
            if order_sequence is None:
                current_max = await self.uow.tasks.get_max_order_sequence(actor.company_id)
                order_sequence = 0 if current_max is None else current_max + 1

            task = OnboardingTask(
                company_id=actor.company_id,
                title=title,
                description=command.description,
                task_type=command.task_type,
                required=command.required,
                order_sequence=order_sequence,
                is_active=True,
                created_by=actor.id,
            )
            task = await self.uow.tasks.create(task)

            await record_audit(
                self.uow,
                actor.company_id,
                actor.id,
                "task_created",
                {"task_id": str(task.id), "title": task.title, "required": task.required},
            )

            await self.uow.commit()

            return Return.ok(TaskResponse.from_entity(task))
