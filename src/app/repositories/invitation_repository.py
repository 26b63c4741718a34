from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Invitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[Invitation]:
        """Get invitation by token hash"""
        pass

    @abstractmethod
    async def get_open_by_employee(self, employee_id: UUID) -> List[Invitation]:
        """Get unused, not superseded invitations of an employee"""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        pass
