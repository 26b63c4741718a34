"""
Invitation Use Cases

Issuing invitations to new hires and consuming them on account activation.
"""

from .consume_invitation_use_case import ConsumeInvitationUseCase
from .dtos import (
    ConsumeInvitationResponse,
    SendInvitationResponse,
    ValidateInvitationResponse,
)
from .send_invitation_use_case import SendInvitationUseCase
from .validate_invitation_use_case import ValidateInvitationUseCase

__all__ = [
    "SendInvitationUseCase",
    "ValidateInvitationUseCase",
    "ConsumeInvitationUseCase",
    "SendInvitationResponse",
    "ValidateInvitationResponse",
    "ConsumeInvitationResponse",
]
