from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import OnboardingTask


class IOnboardingTaskRepository(ABC):
    """OnboardingTask repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, task_id: UUID, company_id: UUID) -> Optional[OnboardingTask]:
        """Get task by ID within a company"""
        pass

    @abstractmethod
    async def get_by_ids(self, task_ids: List[UUID], company_id: UUID) -> List[OnboardingTask]:
        """Get tasks by IDs within a company"""
        pass

    @abstractmethod
    async def list_by_company(
        self, company_id: UUID, include_inactive: bool = False
    ) -> List[OnboardingTask]:
        """List tasks of a company ordered by order_sequence, then title"""
        pass

    @abstractmethod
    async def get_max_order_sequence(self, company_id: UUID) -> Optional[int]:
        """Highest order_sequence used in a company"""
        pass

    @abstractmethod
    async def create(self, task: OnboardingTask) -> OnboardingTask:
        """Create a new task"""
        pass

    @abstractmethod
    async def update(self, task: OnboardingTask) -> OnboardingTask:
        """Update existing task"""
        pass
