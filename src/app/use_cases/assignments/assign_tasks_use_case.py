"""
Assign Tasks To Employee Use Case

Explicitly assigns catalog tasks to one employee.
"""

from uuid import UUID

from src.app.errors import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.shared import denied, not_found, record_audit
from src.domain.actor import Actor
from src.domain.base import utcnow
from src.domain.entities import AssignmentStatus, OnboardingStatus, TaskAssignment
from src.domain.policy import Operation, authorize
from src.shared.result import Error, Result, Return

from .dtos import AssignmentResponse, AssignTasksCommand, AssignTasksResponse


class AssignTasksToEmployeeUseCase:
    """
    Use case for assigning tasks to an employee.

    Business Rules:
    - admin/hr for any employee of the company, managers for direct reports
    - Without task_ids every active task of the company is assigned
    - Every task must exist in the employee's company and be active
    - An (employee, task) pair is assigned at most once; any overlap with
      existing assignments rejects the whole call
    - Employees who completed onboarding take no new assignments
    - Creates audit event for compliance tracking
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, employee_id: UUID, command: AssignTasksCommand
    ) -> Result[AssignTasksResponse]:
        async with self.uow:
            employee = await self.uow.employees.get_by_id(employee_id, actor.company_id)
            if employee is None:
                return Return.err(not_found("Employee"))

            decision = authorize(
                actor,
                Operation.assign_tasks,
                employee.company_id,
                target_owner_id=employee.manager_id,
                target_department=employee.department,
            )
            if not decision.allowed:
                return Return.err(denied(decision))

            if not employee.is_active:
                return Return.err(
                    Error(ErrorCode.VALIDATION_ERROR, "Employee is deactivated")
                )
            if employee.onboarding_status == OnboardingStatus.completed:
                return Return.err(
                    Error(
                        ErrorCode.INVALID_TRANSITION,
                        "Cannot assign tasks to an employee who completed onboarding",
                    )
                )

            if command.task_ids is None:
                tasks = await self.uow.tasks.list_by_company(employee.company_id)
            else:
                if not command.task_ids:
                    return Return.err(
                        Error(ErrorCode.VALIDATION_ERROR, "task_ids must not be empty")
                    )
                if len(set(command.task_ids)) != len(command.task_ids):
                    return Return.err(
                        Error(ErrorCode.VALIDATION_ERROR, "task_ids contains duplicates")
                    )
                tasks = await self.uow.tasks.get_by_ids(command.task_ids, employee.company_id)
                if len(tasks) != len(command.task_ids):
                    return Return.err(not_found("Task"))
                inactive = [t for t in tasks if not t.is_active]
                if inactive:
                    return Return.err(
                        Error(
                            ErrorCode.VALIDATION_ERROR,
                            f"Task {inactive[0].title} is inactive",
                        )
                    )

            assigned = await self.uow.assignments.get_assigned_task_ids(employee.id)
            duplicates = [t for t in tasks if t.id in assigned]
            if duplicates:
                return Return.err(
                    Error(
                        ErrorCode.DUPLICATE_ASSIGNMENT,
                        f"Task {duplicates[0].title} is already assigned to this employee",
                    )
                )

            assignments = await self.uow.assignments.create_many(
                [
                    TaskAssignment(
                        company_id=employee.company_id,
                        employee_id=employee.id,
                        task_id=task.id,
                        required=task.required,
                        status=AssignmentStatus.pending,
                        priority=command.priority,
                        due_date=command.due_date,
                        assigned_by=actor.id,
                    )
                    for task in tasks
                ]
            )

            await record_audit(
                self.uow,
                employee.company_id,
                actor.id,
                "tasks_assigned",
                {
                    "employee_id": str(employee.id),
                    "task_ids": [str(t.id) for t in tasks],
                },
            )

            await self.uow.commit()

            now = utcnow()
            return Return.ok(
                AssignTasksResponse(
                    employee_id=employee.id,
                    assignments=[
                        AssignmentResponse.from_entities(assignment, task, now)
                        for assignment, task in zip(assignments, tasks)
                    ],
                )
            )
