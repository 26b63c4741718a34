"""
Company Entity

The tenant boundary for all onboarding data.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow

from .enums import SubscriptionTier


class Company(SQLModel, table=True):
    """
    Company entity - isolated tenant.

    Business Rules:
    - Every other record carries a company_id
    - employee_limit caps active employee records (None = unlimited)
    - Never deleted by the onboarding core
    """

    __tablename__ = "companies"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    domain: Optional[str] = Field(default=None, max_length=100)

    subscription_tier: SubscriptionTier = Field(default=SubscriptionTier.basic)
    employee_limit: Optional[int] = Field(default=None)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
