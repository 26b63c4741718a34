from abc import ABC, abstractmethod
from typing import List, Optional, Set, Tuple
from uuid import UUID

from src.domain.entities import OnboardingTask, TaskAssignment


class ITaskAssignmentRepository(ABC):
    """TaskAssignment repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, assignment_id: UUID, company_id: UUID) -> Optional[TaskAssignment]:
        """Get assignment by ID within a company"""
        pass

    @abstractmethod
    async def list_for_employee(
        self, employee_id: UUID
    ) -> List[Tuple[TaskAssignment, OnboardingTask]]:
        """Get every assignment of an employee with its task, in task order"""
        pass

    @abstractmethod
    async def get_assigned_task_ids(self, employee_id: UUID) -> Set[UUID]:
        """Task IDs already assigned to an employee"""
        pass

    @abstractmethod
    async def create_many(self, assignments: List[TaskAssignment]) -> List[TaskAssignment]:
        """Create several assignments"""
        pass

    @abstractmethod
    async def update(self, assignment: TaskAssignment) -> TaskAssignment:
        """Update existing assignment"""
        pass
