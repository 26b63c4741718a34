from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.invitation_repository import IInvitationRepository
from src.domain.entities import Invitation


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_token_hash(self, token_hash: str) -> Optional[Invitation]:
        """Get invitation by token hash"""
        stmt = select(Invitation).where(Invitation.token_hash == token_hash)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_open_by_employee(self, employee_id: UUID) -> List[Invitation]:
        """Get unused, not superseded invitations of an employee"""
        stmt = select(Invitation).where(
            Invitation.employee_id == employee_id,
            Invitation.is_used == False,  # noqa: E712
            Invitation.superseded_at == None,  # noqa: E711
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation
