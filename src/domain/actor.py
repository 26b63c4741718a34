"""
Actor Context

Immutable snapshot of who is calling, passed explicitly into every policy
and use-case call.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.domain.entities import ActorRole, GrantScope, Profile, RoleAssignment


class RoleGrant(BaseModel):
    """An additional role the actor holds within a limited scope"""

    model_config = ConfigDict(frozen=True)

    role: ActorRole
    scope: GrantScope = GrantScope.company
    scope_id: Optional[str] = None
    expires_at: Optional[datetime] = None

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at is not None and self.expires_at <= now

    @classmethod
    def from_entity(cls, assignment: RoleAssignment) -> "RoleGrant":
        return cls(
            role=assignment.role,
            scope=assignment.scope,
            scope_id=assignment.scope_id,
            expires_at=assignment.expires_at,
        )


class Actor(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    company_id: UUID
    role: ActorRole
    is_active: bool = True
    grants: List[RoleGrant] = []

    @classmethod
    def from_profile(
        cls, profile: Profile, role_assignments: Optional[List[RoleAssignment]] = None
    ) -> "Actor":
        return cls(
            id=profile.id,
            company_id=profile.company_id,
            role=profile.role,
            is_active=profile.is_active,
            grants=[RoleGrant.from_entity(ra) for ra in role_assignments or []],
        )
