from typing import List, Optional, Set, Tuple
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.task_assignment_repository import ITaskAssignmentRepository
from src.domain.entities import OnboardingTask, TaskAssignment


class TaskAssignmentRepository(ITaskAssignmentRepository):
    """TaskAssignment repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, assignment_id: UUID, company_id: UUID) -> Optional[TaskAssignment]:
        """Get assignment by ID within a company"""
        stmt = select(TaskAssignment).where(
            TaskAssignment.id == assignment_id, TaskAssignment.company_id == company_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_employee(
        self, employee_id: UUID
    ) -> List[Tuple[TaskAssignment, OnboardingTask]]:
        """Get every assignment of an employee with its task, in task order"""
        stmt = (
            select(TaskAssignment, OnboardingTask)
            .join(OnboardingTask, TaskAssignment.task_id == OnboardingTask.id)
            .where(TaskAssignment.employee_id == employee_id)
            .order_by(OnboardingTask.order_sequence, OnboardingTask.title)
        )
        result = await self.session.execute(stmt)
        return [(assignment, task) for assignment, task in result.all()]

    async def get_assigned_task_ids(self, employee_id: UUID) -> Set[UUID]:
        """Task IDs already assigned to an employee"""
        stmt = select(TaskAssignment.task_id).where(TaskAssignment.employee_id == employee_id)
        result = await self.session.execute(stmt)
        return set(result.scalars().all())

    async def create_many(self, assignments: List[TaskAssignment]) -> List[TaskAssignment]:
        """Create several assignments, preserving order"""
        if not assignments:
            return []
        self.session.add_all(assignments)
        await self.session.flush()
        for assignment in assignments:
            await self.session.refresh(assignment)
        return assignments

    async def update(self, assignment: TaskAssignment) -> TaskAssignment:
        """Update existing assignment"""
        self.session.add(assignment)
        await self.session.flush()
        await self.session.refresh(assignment)
        return assignment
