"""
Consume Invitation Use Case

Called by the account activation flow once the new hire has a login.
Links the login to the employee record and starts onboarding.
"""

import logging
from uuid import UUID

from src.app.errors import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.shared import not_found, record_audit
from src.domain import employee_lifecycle, invitation_rules
from src.domain.base import utcnow
from src.domain.errors import InvalidTransitionError
from src.shared.result import Error, Result, Return

from .dtos import ConsumeInvitationResponse

logger = logging.getLogger(__name__)


class ConsumeInvitationUseCase:
    """
    Use case for consuming an invitation token.

    Business Rules:
    - A token is consumed at most once and only before its expiry
    - Superseded tokens are rejected as expired
    - The login must belong to the invitation's company
    - An employee links to one login and a login to one employee
    - The employee gets first_login_at and moves to in_progress
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str, user_id: UUID) -> Result[ConsumeInvitationResponse]:
        async with self.uow:
            invitation = await self.uow.invitations.get_by_token_hash(
                invitation_rules.hash_token(token)
            )
            if invitation is None:
                return Return.err(not_found("Invitation"))

            now = utcnow()
            try:
                invitation_rules.consume(invitation, now)
            except invitation_rules.InvitationError as e:
                return Return.err(Error(e.code, str(e)))

            employee = await self.uow.employees.get_by_id_for_update(
                invitation.employee_id, invitation.company_id
            )
            if employee is None:
                return Return.err(not_found("Employee"))
            if not employee.is_active:
                return Return.err(
                    Error(ErrorCode.VALIDATION_ERROR, "Employee is deactivated")
                )

            profile = await self.uow.profiles.get_in_company(user_id, invitation.company_id)
            if profile is None:
                return Return.err(not_found("User"))

            if employee.user_id is not None and employee.user_id != user_id:
                return Return.err(
                    Error(ErrorCode.CONFLICT, "Employee is linked to another account")
                )
            linked = await self.uow.employees.get_by_user_id(user_id, invitation.company_id)
            if linked is not None and linked.id != employee.id:
                return Return.err(
                    Error(ErrorCode.CONFLICT, "Account is linked to another employee")
                )

            employee.user_id = user_id
            try:
                employee_lifecycle.record_first_login(employee, now)
            except InvalidTransitionError as e:
                return Return.err(Error(ErrorCode.INVALID_TRANSITION, str(e)))

            await self.uow.invitations.update(invitation)
            await self.uow.employees.update(employee)

            await record_audit(
                self.uow,
                employee.company_id,
                user_id,
                "invitation_consumed",
                {"invitation_id": str(invitation.id), "employee_id": str(employee.id)},
            )

            await self.uow.commit()

            logger.info("Employee %s linked to user %s", employee.id, user_id)

            return Return.ok(
                ConsumeInvitationResponse(
                    employee_id=employee.id,
                    company_id=employee.company_id,
                    user_id=user_id,
                    employee_status=employee.onboarding_status,
                    first_login_at=employee.first_login_at,
                )
            )
