"""
Invitation Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import OnboardingStatus


class SendInvitationResponse(BaseModel):
    """The raw token is never returned; it only travels through the notifier"""

    invitation_id: UUID
    employee_id: UUID
    email: str
    expires_at: datetime
    employee_status: OnboardingStatus
    superseded_count: int


class ValidateInvitationResponse(BaseModel):
    employee_id: UUID
    company_id: UUID
    company_name: str
    employee_name: str
    email: str
    expires_at: datetime


class ConsumeInvitationResponse(BaseModel):
    employee_id: UUID
    company_id: UUID
    user_id: UUID
    employee_status: OnboardingStatus
    first_login_at: Optional[datetime]
