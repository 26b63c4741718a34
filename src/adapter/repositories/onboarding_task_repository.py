from typing import List, Optional
from uuid import UUID

from sqlmodel import col, func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.onboarding_task_repository import IOnboardingTaskRepository
from src.domain.entities import OnboardingTask


class OnboardingTaskRepository(IOnboardingTaskRepository):
    """OnboardingTask repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, task_id: UUID, company_id: UUID) -> Optional[OnboardingTask]:
        """Get task by ID within a company"""
        stmt = select(OnboardingTask).where(
            OnboardingTask.id == task_id, OnboardingTask.company_id == company_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_ids(self, task_ids: List[UUID], company_id: UUID) -> List[OnboardingTask]:
        """Get tasks by ID within a company, in catalog order"""
        stmt = (
            select(OnboardingTask)
            .where(col(OnboardingTask.id).in_(task_ids), OnboardingTask.company_id == company_id)
            .order_by(OnboardingTask.order_sequence, OnboardingTask.title)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_company(
        self, company_id: UUID, include_inactive: bool = False
    ) -> List[OnboardingTask]:
        """List tasks of a company ordered by order_sequence, then title"""
        stmt = select(OnboardingTask).where(OnboardingTask.company_id == company_id)
        if not include_inactive:
            stmt = stmt.where(OnboardingTask.is_active == True)  # noqa: E712
        stmt = stmt.order_by(OnboardingTask.order_sequence, OnboardingTask.title)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_max_order_sequence(self, company_id: UUID) -> Optional[int]:
        """Highest order_sequence in the company's catalog, None when empty"""
        stmt = select(func.max(OnboardingTask.order_sequence)).where(
            OnboardingTask.company_id == company_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, task: OnboardingTask) -> OnboardingTask:
        """Create a new task"""
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task

    async def update(self, task: OnboardingTask) -> OnboardingTask:
        """Update existing task"""
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task
