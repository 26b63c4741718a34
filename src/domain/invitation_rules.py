"""
Invitation lifecycle: issued -> consumed, or issued -> expired.

Only the SHA-256 hash of a token is ever persisted.
"""

import hashlib
import secrets
from datetime import datetime, timedelta

from src.domain.entities import Invitation

INVITATION_TTL = timedelta(days=7)


class InvitationError(ValueError):
    code = "INVITATION_ERROR"


class InvitationExpiredError(InvitationError):
    code = "EXPIRED"


class InvitationSupersededError(InvitationExpiredError):
    pass


class InvitationAlreadyUsedError(InvitationError):
    code = "ALREADY_USED"


def generate_token() -> str:
    return secrets.token_urlsafe(32)


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def expiry_for(issued_at: datetime, ttl: timedelta = INVITATION_TTL) -> datetime:
    return issued_at + ttl


def ensure_consumable(invitation: Invitation, now: datetime) -> None:
    if invitation.superseded_at is not None:
        raise InvitationSupersededError(
            "This invitation was replaced by a newer one"
        )
    if invitation.expires_at <= now:
        raise InvitationExpiredError("This invitation has expired")
    if invitation.is_used:
        raise InvitationAlreadyUsedError("This invitation has already been used")


def consume(invitation: Invitation, now: datetime) -> Invitation:
    ensure_consumable(invitation, now)
    invitation.is_used = True
    invitation.used_at = now
    return invitation


def supersede(invitation: Invitation, now: datetime) -> Invitation:
    if not invitation.is_used and invitation.superseded_at is None:
        invitation.superseded_at = now
    return invitation
