"""
Load Actor Use Case

Builds the caller context from verified token claims.
"""

from uuid import UUID

from src.app.errors import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.domain.actor import Actor
from src.domain.base import utcnow
from src.shared.result import Error, Result, Return


class LoadActorUseCase:
    """
    Use case for resolving the calling actor.

    Business Rules:
    - Profile must exist
    - Token company must match the profile's company
    - Unexpired role grants of the company are attached
    - Inactive profiles still load; the policy denies them
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, company_id: UUID) -> Result[Actor]:
        async with self.uow:
            profile = await self.uow.profiles.get_by_id(user_id)
            if profile is None:
                return Return.err(Error(ErrorCode.UNAUTHENTICATED, "User not found"))

            if profile.company_id != company_id:
                return Return.err(
                    Error(
                        ErrorCode.UNAUTHENTICATED,
                        "Token does not match the user's company",
                    )
                )

            grants = await self.uow.profiles.get_active_role_assignments(
                profile.id, profile.company_id, utcnow()
            )
            return Return.ok(Actor.from_profile(profile, grants))
