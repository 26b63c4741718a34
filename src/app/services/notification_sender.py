from abc import ABC, abstractmethod
from datetime import datetime


class NotificationSender(ABC):
    """Delivers onboarding messages to people outside the system"""

    @abstractmethod
    async def send_invitation(
        self, email: str, employee_name: str, company_name: str, token: str, expires_at: datetime
    ) -> None:
        """Deliver an invitation link carrying the raw token"""
        pass
