"""
Send Invitation Use Case

Issues an onboarding invitation to an employee's personal email.
"""

import logging
from datetime import timedelta
from uuid import UUID

from src.app.errors import ErrorCode
from src.app.services.notification_sender import NotificationSender
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.shared import denied, not_found, record_audit
from src.domain import employee_lifecycle, invitation_rules
from src.domain.actor import Actor
from src.domain.base import utcnow
from src.domain.entities import Invitation
from src.domain.errors import InvalidTransitionError
from src.domain.policy import Operation, authorize
from src.shared.result import Error, Result, Return

from .dtos import SendInvitationResponse

logger = logging.getLogger(__name__)


class SendInvitationUseCase:
    """
    Use case for inviting an employee to activate their account.

    Business Rules:
    - admin/hr for any employee of the company, managers for direct reports
    - Employees already linked to a login cannot be invited again
    - Employees who completed onboarding cannot be invited
    - not_started employees move to invited; others keep their status
    - A new invitation supersedes every earlier unused one
    - Token is generated securely; only its hash is stored
    - Delivery happens after commit and never undoes the invitation
    """

    def __init__(
        self,
        uow: UnitOfWork,
        notifier: NotificationSender,
        ttl: timedelta = invitation_rules.INVITATION_TTL,
    ):
        self.uow = uow
        self.notifier = notifier
        self.ttl = ttl

    async def execute(self, actor: Actor, employee_id: UUID) -> Result[SendInvitationResponse]:
        """
        Execute send invitation use case.

        Args:
            actor: Caller context
            employee_id: Employee to invite

        Returns:
            Result with SendInvitationResponse DTO, or Error
        """
        async with self.uow:
            employee = await self.uow.employees.get_by_id_for_update(
                employee_id, actor.company_id
            )
            if employee is None:
                return Return.err(not_found("Employee"))

            decision = authorize(
                actor,
                Operation.send_invitation,
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
            if employee.user_id is not None:
                return Return.err(
                    Error(ErrorCode.CONFLICT, "Employee has already activated an account")
                )

            company = await self.uow.companies.get_by_id(employee.company_id)
            if company is None:
                return Return.err(not_found("Company"))

            now = utcnow()
            try:
                employee_lifecycle.mark_invited(employee, now)
            except InvalidTransitionError as e:
                return Return.err(Error(ErrorCode.INVALID_TRANSITION, str(e)))
            await self.uow.employees.update(employee)

            superseded = await self.uow.invitations.get_open_by_employee(employee.id)
            for previous in superseded:
                invitation_rules.supersede(previous, now)
                await self.uow.invitations.update(previous)

            token = invitation_rules.generate_token()
            invitation = Invitation(
                company_id=employee.company_id,
                employee_id=employee.id,
                email=employee.personal_email,
                token_hash=invitation_rules.hash_token(token),
                created_by=actor.id,
                expires_at=invitation_rules.expiry_for(now, self.ttl),
                created_at=now,
            )
            invitation = await self.uow.invitations.create(invitation)

            await record_audit(
                self.uow,
                employee.company_id,
                actor.id,
                "invitation_sent",
                {
                    "invitation_id": str(invitation.id),
                    "employee_id": str(employee.id),
                    "email": invitation.email,
                    "superseded": len(superseded),
                },
            )

            await self.uow.commit()

        try:
            await self.notifier.send_invitation(
                email=invitation.email,
                employee_name=employee.full_name,
                company_name=company.name,
                token=token,
                expires_at=invitation.expires_at,
            )
        except Exception:
            logger.warning(
                "Failed to deliver invitation %s to %s",
                invitation.id,
                invitation.email,
                exc_info=True,
            )

        return Return.ok(
            SendInvitationResponse(
                invitation_id=invitation.id,
                employee_id=employee.id,
                email=invitation.email,
                expires_at=invitation.expires_at,
                employee_status=employee.onboarding_status,
                superseded_count=len(superseded),
            )
        )
