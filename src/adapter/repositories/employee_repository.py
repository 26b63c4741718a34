from typing import Dict, List, Optional
from uuid import UUID

from sqlmodel import col, func, or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.employee_repository import IEmployeeRepository
from src.domain.entities import EmployeeProfile, OnboardingStatus


class EmployeeRepository(IEmployeeRepository):
    """EmployeeProfile repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, employee_id: UUID, company_id: UUID) -> Optional[EmployeeProfile]:
        """Get employee by ID within a company"""
        stmt = select(EmployeeProfile).where(
            EmployeeProfile.id == employee_id, EmployeeProfile.company_id == company_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_id_for_update(
        self, employee_id: UUID, company_id: UUID
    ) -> Optional[EmployeeProfile]:
        """Get employee by ID within a company, locking the row"""
        stmt = (
            select(EmployeeProfile)
            .where(EmployeeProfile.id == employee_id, EmployeeProfile.company_id == company_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_user_id(self, user_id: UUID, company_id: UUID) -> Optional[EmployeeProfile]:
        """Get the employee record linked to an actor"""
        stmt = select(EmployeeProfile).where(
            EmployeeProfile.user_id == user_id, EmployeeProfile.company_id == company_id
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_by_email(
        self, company_id: UUID, email: str, exclude_id: Optional[UUID] = None
    ) -> Optional[EmployeeProfile]:
        """Get employee whose personal or work email matches, within a company"""
        stmt = select(EmployeeProfile).where(
            EmployeeProfile.company_id == company_id,
            or_(EmployeeProfile.personal_email == email, EmployeeProfile.work_email == email),
        )
        if exclude_id is not None:
            stmt = stmt.where(EmployeeProfile.id != exclude_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_by_company(
        self,
        company_id: UUID,
        status: Optional[OnboardingStatus] = None,
        manager_id: Optional[UUID] = None,
        search: Optional[str] = None,
        include_inactive: bool = False,
    ) -> List[EmployeeProfile]:
        """List employees of a company, newest first"""
        stmt = select(EmployeeProfile).where(EmployeeProfile.company_id == company_id)

        if status is not None:
            stmt = stmt.where(EmployeeProfile.onboarding_status == status)
        if manager_id is not None:
            stmt = stmt.where(EmployeeProfile.manager_id == manager_id)
        if not include_inactive:
            stmt = stmt.where(EmployeeProfile.is_active == True)  # noqa: E712
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(
                    col(EmployeeProfile.first_name).ilike(pattern),
                    col(EmployeeProfile.last_name).ilike(pattern),
                    col(EmployeeProfile.position).ilike(pattern),
                    col(EmployeeProfile.department).ilike(pattern),
                )
            )

        stmt = stmt.order_by(col(EmployeeProfile.created_at).desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_active(self, company_id: UUID) -> int:
        """Count active employees of a company"""
        stmt = select(func.count(EmployeeProfile.id)).where(
            EmployeeProfile.company_id == company_id,
            EmployeeProfile.is_active == True,  # noqa: E712
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_by_status(
        self, company_id: UUID, manager_id: Optional[UUID] = None
    ) -> Dict[OnboardingStatus, int]:
        """Count active employees per onboarding status"""
        stmt = select(EmployeeProfile.onboarding_status, func.count(EmployeeProfile.id)).where(
            EmployeeProfile.company_id == company_id,
            EmployeeProfile.is_active == True,  # noqa: E712
        )
        if manager_id is not None:
            stmt = stmt.where(EmployeeProfile.manager_id == manager_id)
        stmt = stmt.group_by(EmployeeProfile.onboarding_status)

        result = await self.session.execute(stmt)
        return {OnboardingStatus(status): count for status, count in result.all()}

    async def create(self, employee: EmployeeProfile) -> EmployeeProfile:
        """Create a new employee"""
        self.session.add(employee)
        await self.session.flush()
        await self.session.refresh(employee)
        return employee

    async def update(self, employee: EmployeeProfile) -> EmployeeProfile:
        """Update existing employee"""
        self.session.add(employee)
        await self.session.flush()
        await self.session.refresh(employee)
        return employee
