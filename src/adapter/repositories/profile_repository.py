from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlmodel import or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.profile_repository import IProfileRepository
from src.domain.entities import Profile, RoleAssignment


class ProfileRepository(IProfileRepository):
    """Profile repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, profile_id: UUID) -> Optional[Profile]:
        """Get profile by ID"""
        stmt = select(Profile).where(Profile.id == profile_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_in_company(self, profile_id: UUID, company_id: UUID) -> Optional[Profile]:
        """Get profile by ID, only if it belongs to the company"""
        stmt = select(Profile).where(
            Profile.id == profile_id, Profile.company_id == company_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_active_role_assignments(
        self, profile_id: UUID, company_id: UUID, now: datetime
    ) -> List[RoleAssignment]:
        """Get unexpired role grants of a profile within its company"""
        stmt = select(RoleAssignment).where(
            RoleAssignment.profile_id == profile_id,
            RoleAssignment.company_id == company_id,
            or_(RoleAssignment.expires_at == None, RoleAssignment.expires_at > now),  # noqa: E711
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
