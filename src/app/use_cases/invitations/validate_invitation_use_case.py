"""
Validate Invitation Use Case

Read-only check of an invitation token, used by the activation page before
the new hire signs up.
"""

from src.app.errors import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.shared import not_found
from src.domain import invitation_rules
from src.domain.base import utcnow
from src.shared.result import Error, Result, Return

from .dtos import ValidateInvitationResponse


class ValidateInvitationUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[ValidateInvitationResponse]:
        async with self.uow:
            invitation = await self.uow.invitations.get_by_token_hash(
                invitation_rules.hash_token(token)
            )
            if invitation is None:
                return Return.err(not_found("Invitation"))

            try:
                invitation_rules.ensure_consumable(invitation, utcnow())
            except invitation_rules.InvitationError as e:
                return Return.err(Error(e.code, str(e)))

            employee = await self.uow.employees.get_by_id(
                invitation.employee_id, invitation.company_id
            )
            company = await self.uow.companies.get_by_id(invitation.company_id)
            if employee is None or company is None:
                return Return.err(not_found("Invitation"))
            if not employee.is_active:
                return Return.err(
                    Error(ErrorCode.VALIDATION_ERROR, "Employee is deactivated")
                )

            return Return.ok(
                ValidateInvitationResponse(
                    employee_id=employee.id,
                    company_id=company.id,
                    company_name=company.name,
                    employee_name=employee.full_name,
                    email=invitation.email,
                    expires_at=invitation.expires_at,
                )
            )
