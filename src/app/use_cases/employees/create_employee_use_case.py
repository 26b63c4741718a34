"""
Create Employee Use Case

Registers a new hire and optionally assigns the company's active tasks.
"""

from sqlalchemy.exc import IntegrityError

from src.app.errors import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.assignments.dtos import AssignmentResponse
from src.app.use_cases.shared import denied, not_found, record_audit
from src.domain.actor import Actor
from src.domain.base import utcnow
from src.domain.entities import (
    ActorRole,
    AssignmentStatus,
    EmployeeProfile,
    OnboardingStatus,
    TaskAssignment,
)
from src.domain.policy import Operation, authorize
from src.shared.result import Error, Result, Return

from .dtos import CreateEmployeeCommand, CreateEmployeeResponse, EmployeeResponse


class CreateEmployeeUseCase:
    """
    Use case for creating an employee onboarding record.

    Business Rules:
    - Only admin, hr and manager actors may create employees
    - A manager may only create their own direct reports; manager_id
      defaults to the calling manager
    - The referenced manager must be an active profile of the same company
    - personal_email and work_email must be unique within the company
    - The company's employee_limit caps active employees
    - New records start in not_started
    - With assign_default_tasks, every active task is assigned as pending
    - Creates audit event for compliance tracking
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, command: CreateEmployeeCommand
    ) -> Result[CreateEmployeeResponse]:
        """
        Execute create employee use case.

        Args:
            actor: Caller context
            command: Validated employee fields

        Returns:
            Result with CreateEmployeeResponse DTO, or Error
        """
        manager_id = command.manager_id
        if manager_id is None and actor.role == ActorRole.manager:
            manager_id = actor.id

        async with self.uow:
            decision = authorize(
                actor,
                Operation.manage_employees,
                actor.company_id,
                target_owner_id=manager_id,
                target_department=command.department,
            )
            if not decision.allowed:
                return Return.err(denied(decision))

            first_name = command.first_name.strip()
            last_name = command.last_name.strip()
            if not first_name or not last_name:
                return Return.err(
                    Error(ErrorCode.VALIDATION_ERROR, "First and last name are required")
                )

            company = await self.uow.companies.get_by_id(actor.company_id)
            if company is None:
                return Return.err(not_found("Company"))

            if company.employee_limit is not None:
                active_count = await self.uow.employees.count_active(company.id)
                if active_count >= company.employee_limit:
                    return Return.err(
                        Error(
                            ErrorCode.CONFLICT,
                            f"Employee limit of {company.employee_limit} reached for this company",
                        )
                    )

            if manager_id is not None:
                manager = await self.uow.profiles.get_in_company(manager_id, company.id)
                if manager is None or not manager.is_active:
                    return Return.err(not_found("Manager"))

            personal_email = command.personal_email.strip().lower()
            work_email = command.work_email.strip().lower() if command.work_email else None
            for email in filter(None, (personal_email, work_email)):
                existing = await self.uow.employees.get_by_email(company.id, email)
                if existing:
                    return Return.err(
                        Error(
                            ErrorCode.CONFLICT,
                            f"An employee with email {email} already exists",
                        )
                    )

            employee = EmployeeProfile(
                company_id=company.id,
                employee_number=command.employee_number,
                first_name=first_name,
                last_name=last_name,
                personal_email=personal_email,
                work_email=work_email,
                employment_type=command.employment_type,
                department=command.department,
                position=command.position,
                start_date=command.start_date,
                manager_id=manager_id,
                created_by=actor.id,
                onboarding_status=OnboardingStatus.not_started,
            )
            try:
                employee = await self.uow.employees.create(employee)
            except IntegrityError:
                return Return.err(
                    Error(ErrorCode.CONFLICT, "An employee with this email already exists")
                )

            tasks = []
            assignments = []
            if command.assign_default_tasks:
                tasks = await self.uow.tasks.list_by_company(company.id)
                assignments = await self.uow.assignments.create_many(
                    [
                        TaskAssignment(
                            company_id=company.id,
                            employee_id=employee.id,
                            task_id=task.id,
                            required=task.required,
                            status=AssignmentStatus.pending,
                            assigned_by=actor.id,
                        )
                        for task in tasks
                    ]
                )

            await record_audit(
                self.uow,
                company.id,
                actor.id,
                "employee_created",
                {
                    "employee_id": str(employee.id),
                    "manager_id": str(manager_id) if manager_id else None,
                    "assigned_tasks": len(assignments),
                },
            )

            await self.uow.commit()

            now = utcnow()
            return Return.ok(
                CreateEmployeeResponse(
                    employee=EmployeeResponse.from_entity(employee),
                    assignments=[
                        AssignmentResponse.from_entities(assignment, task, now)
                        for assignment, task in zip(assignments, tasks)
                    ],
                )
            )
