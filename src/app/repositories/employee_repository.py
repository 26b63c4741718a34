from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from uuid import UUID

from src.domain.entities import EmployeeProfile, OnboardingStatus


class IEmployeeRepository(ABC):
    """EmployeeProfile repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, employee_id: UUID, company_id: UUID) -> Optional[EmployeeProfile]:
        """Get employee by ID within a company"""
        pass

    @abstractmethod
    async def get_by_id_for_update(
        self, employee_id: UUID, company_id: UUID
    ) -> Optional[EmployeeProfile]:
        """Get employee by ID within a company, locking the row"""
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID, company_id: UUID) -> Optional[EmployeeProfile]:
        """Get the employee record linked to an actor"""
        pass

    @abstractmethod
    async def get_by_email(
        self, company_id: UUID, email: str, exclude_id: Optional[UUID] = None
    ) -> Optional[EmployeeProfile]:
        """Get employee whose personal or work email matches, within a company"""
        pass

    @abstractmethod
    async def list_by_company(
        self,
        company_id: UUID,
        status: Optional[OnboardingStatus] = None,
        manager_id: Optional[UUID] = None,
        search: Optional[str] = None,
        include_inactive: bool = False,
    ) -> List[EmployeeProfile]:
        """List employees of a company, newest first"""
        pass

    @abstractmethod
    async def count_active(self, company_id: UUID) -> int:
        """Count active employees of a company"""
        pass

    @abstractmethod
    async def count_by_status(
        self, company_id: UUID, manager_id: Optional[UUID] = None
    ) -> Dict[OnboardingStatus, int]:
        """Count active employees per onboarding status"""
        pass

    @abstractmethod
    async def create(self, employee: EmployeeProfile) -> EmployeeProfile:
        """Create a new employee"""
        pass

    @abstractmethod
    async def update(self, employee: EmployeeProfile) -> EmployeeProfile:
        """Update existing employee"""
        pass
