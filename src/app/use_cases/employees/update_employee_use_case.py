"""
Update Employee Use Case

Edits HR fields of an employee record, reassigns its manager, or
deactivates it.
"""

from uuid import UUID

from src.app.errors import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.shared import denied, not_found, record_audit
from src.domain.actor import Actor
from src.domain.base import utcnow
from src.domain.policy import Operation, authorize
from src.shared.result import Error, Result, Return

from .dtos import EmployeeResponse, UpdateEmployeeCommand


class UpdateEmployeeUseCase:
    """
    Use case for updating an employee record.

    Business Rules:
    - Same authorization as creation, checked against the current manager
      and again against a new manager when it changes
    - Emails stay unique within the company
    - Onboarding status is never edited directly
    - Reactivation respects the company's employee limit
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, employee_id: UUID, command: UpdateEmployeeCommand
    ) -> Result[EmployeeResponse]:
        changes = command.model_dump(exclude_unset=True)

        async with self.uow:
            employee = await self.uow.employees.get_by_id(employee_id, actor.company_id)
            if employee is None:
                return Return.err(not_found("Employee"))

            decision = authorize(
                actor,
                Operation.manage_employees,
                employee.company_id,
                target_owner_id=employee.manager_id,
                target_department=employee.department,
            )
            if not decision.allowed:
                return Return.err(denied(decision))

            if "manager_id" in changes and changes["manager_id"] != employee.manager_id:
                new_manager_id = changes["manager_id"]
                decision = authorize(
                    actor,
                    Operation.manage_employees,
                    employee.company_id,
                    target_owner_id=new_manager_id,
                    target_department=changes.get("department", employee.department),
                )
                if not decision.allowed:
                    return Return.err(denied(decision))
                if new_manager_id is not None:
                    manager = await self.uow.profiles.get_in_company(
                        new_manager_id, employee.company_id
                    )
                    if manager is None or not manager.is_active:
                        return Return.err(not_found("Manager"))

            for field in ("first_name", "last_name"):
                if field in changes:
                    changes[field] = (changes[field] or "").strip()
                    if not changes[field]:
                        return Return.err(
                            Error(ErrorCode.VALIDATION_ERROR, f"{field} cannot be empty")
                        )

            if "personal_email" in changes and not changes["personal_email"]:
                return Return.err(
                    Error(ErrorCode.VALIDATION_ERROR, "personal_email cannot be empty")
                )
            for field in ("personal_email", "work_email"):
                if changes.get(field):
                    email = changes[field].strip().lower()
                    changes[field] = email
                    existing = await self.uow.employees.get_by_email(
                        employee.company_id, email, exclude_id=employee.id
                    )
                    if existing:
                        return Return.err(
                            Error(
                                ErrorCode.CONFLICT,
                                f"An employee with email {email} already exists",
                            )
                        )

            if changes.get("is_active") and not employee.is_active:
                company = await self.uow.companies.get_by_id(employee.company_id)
                if company and company.employee_limit is not None:
                    active_count = await self.uow.employees.count_active(company.id)
                    if active_count >= company.employee_limit:
                        return Return.err(
                            Error(
                                ErrorCode.CONFLICT,
                                f"Employee limit of {company.employee_limit} reached for this company",
                            )
                        )

            for field, value in changes.items():
                setattr(employee, field, value)
            employee.updated_at = utcnow()
            await self.uow.employees.update(employee)

            await record_audit(
                self.uow,
                employee.company_id,
                actor.id,
                "employee_updated",
                {"employee_id": str(employee.id), "fields": sorted(changes)},
            )

            await self.uow.commit()

            return Return.ok(EmployeeResponse.from_entity(employee))
