import logging
from datetime import datetime

from src.app.services.notification_sender import NotificationSender

logger = logging.getLogger(__name__)


class LoggingNotificationSender(NotificationSender):
    """
    Notification sender that only records deliveries in the log.

    Stands in for an email provider; the invitation link itself is never
    logged.
    """

    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip("/")

    async def send_invitation(
        self, email: str, employee_name: str, company_name: str, token: str, expires_at: datetime
    ) -> None:
        logger.info(
            "Invitation for %s (%s) at %s queued via %s, expires %s",
            employee_name,
            email,
            company_name,
            self.base_url,
            expires_at.isoformat(),
        )
