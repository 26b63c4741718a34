from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Profile, RoleAssignment


class IProfileRepository(ABC):
    """Profile (actor) repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, profile_id: UUID) -> Optional[Profile]:
        """Get profile by ID"""
        pass

    @abstractmethod
    async def get_in_company(self, profile_id: UUID, company_id: UUID) -> Optional[Profile]:
        """Get profile by ID, only if it belongs to the company"""
        pass

    @abstractmethod
    async def get_active_role_assignments(
        self, profile_id: UUID, company_id: UUID, now: datetime
    ) -> List[RoleAssignment]:
        """Get unexpired role grants of a profile within its company"""
        pass
