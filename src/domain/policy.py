"""
Authorization Policy

Decides whether an actor may perform an operation against a target record
and, for list reads, which subset of records is visible. Every operation is
evaluated against the single table below.

Scopes:
- company: any record of the actor's company
- reports: records whose owner is the actor (manager -> direct reports)
- self: records whose owner is the actor (employee record linked to actor)
"""

from datetime import datetime
from enum import Enum
from typing import Dict, Iterable, Optional, Set
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.domain.actor import Actor, RoleGrant
from src.domain.base import utcnow
from src.domain.entities import ActorRole, GrantScope


class Operation(str, Enum):
    read_employees = "read_employees"
    read_tasks = "read_tasks"
    manage_employees = "manage_employees"
    manage_tasks = "manage_tasks"
    assign_tasks = "assign_tasks"
    skip_task = "skip_task"
    send_invitation = "send_invitation"
    view_progress = "view_progress"
    view_stats = "view_stats"
    view_audit = "view_audit"
    progress_own_task = "progress_own_task"
    view_own_progress = "view_own_progress"


class Scope(str, Enum):
    company = "company"
    reports = "reports"
    self = "self"


class DenyReason(str, Enum):
    cross_tenant = "cross_tenant"
    inactive_actor = "inactive_actor"
    insufficient_role = "insufficient_role"
    not_direct_report = "not_direct_report"
    not_owner = "not_owner"


_C, _R, _S = Scope.company, Scope.reports, Scope.self
_ADMIN, _HR, _MANAGER, _EMPLOYEE = (
    ActorRole.admin,
    ActorRole.hr,
    ActorRole.manager,
    ActorRole.employee,
)

POLICY_TABLE: Dict[Operation, Dict[ActorRole, Scope]] = {
    Operation.read_employees: {_ADMIN: _C, _HR: _C, _MANAGER: _R, _EMPLOYEE: _C},
    Operation.read_tasks: {_ADMIN: _C, _HR: _C, _MANAGER: _C, _EMPLOYEE: _C},
    Operation.manage_employees: {_ADMIN: _C, _HR: _C, _MANAGER: _R},
    Operation.manage_tasks: {_ADMIN: _C, _HR: _C, _MANAGER: _C},
    Operation.assign_tasks: {_ADMIN: _C, _HR: _C, _MANAGER: _R},
    Operation.skip_task: {_ADMIN: _C, _HR: _C, _MANAGER: _R},
    Operation.send_invitation: {_ADMIN: _C, _HR: _C, _MANAGER: _R},
    Operation.view_progress: {_ADMIN: _C, _HR: _C, _MANAGER: _R},
    Operation.view_stats: {_ADMIN: _C, _HR: _C, _MANAGER: _R},
    Operation.view_audit: {_ADMIN: _C, _HR: _C},
    Operation.progress_own_task: {_ADMIN: _S, _HR: _S, _MANAGER: _S, _EMPLOYEE: _S},
    Operation.view_own_progress: {_ADMIN: _S, _HR: _S, _MANAGER: _S, _EMPLOYEE: _S},
}


class Decision(BaseModel):
    """Outcome of a policy evaluation"""

    model_config = ConfigDict(frozen=True)

    allowed: bool
    scope: Optional[Scope] = None
    reason: Optional[DenyReason] = None
    message: str = ""

    @classmethod
    def allow(cls, scope: Scope) -> "Decision":
        return cls(allowed=True, scope=scope)

    @classmethod
    def deny(cls, reason: DenyReason, message: str) -> "Decision":
        return cls(allowed=False, reason=reason, message=message)

    @property
    def restricted_to_owner(self) -> bool:
        """True when a list read must be filtered to records owned by the actor"""
        return self.allowed and self.scope in (Scope.reports, Scope.self)


def _grant_applies(
    grant: RoleGrant,
    now: datetime,
    target_owner_id: Optional[UUID],
    target_department: Optional[str],
) -> bool:
    if grant.is_expired(now):
        return False
    if grant.scope == GrantScope.company:
        return True
    if grant.scope == GrantScope.department:
        return target_department is not None and target_department == grant.scope_id
    if grant.scope == GrantScope.team:
        return target_owner_id is not None and str(target_owner_id) == grant.scope_id
    return False


def effective_roles(
    actor: Actor,
    target_owner_id: Optional[UUID] = None,
    target_department: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Set[ActorRole]:
    """Primary role plus every grant that applies to the target"""
    now = now or utcnow()
    roles = {actor.role}
    roles.update(
        grant.role
        for grant in actor.grants
        if _grant_applies(grant, now, target_owner_id, target_department)
    )
    return roles


def _broadest(scopes: Iterable[Scope]) -> Optional[Scope]:
    scopes = set(scopes)
    for candidate in (Scope.company, Scope.reports, Scope.self):
        if candidate in scopes:
            return candidate
    return None


def authorize(
    actor: Actor,
    operation: Operation,
    target_company_id: UUID,
    target_owner_id: Optional[UUID] = None,
    target_department: Optional[str] = None,
    now: Optional[datetime] = None,
    list_read: bool = False,
) -> Decision:
    """
    Evaluate the policy table for one operation.

    Args:
        actor: Caller context
        operation: Operation being attempted
        target_company_id: Company owning the target record(s)
        target_owner_id: Owner of a single target record; the employee's
            manager_id for reports-scoped operations, the employee's linked
            user_id for self-scoped ones.
        target_department: Department of the target employee, used by
            department-scoped grants
        now: Evaluation time for grant expiry
        list_read: Target is a set of records rather than one; a reports
            scope is then allowed and the caller filters to owned records

    Returns:
        Decision.allow(scope) or Decision.deny(reason, message)
    """
    if not actor.is_active:
        return Decision.deny(DenyReason.inactive_actor, "Your account is deactivated")

    if actor.company_id != target_company_id:
        return Decision.deny(
            DenyReason.cross_tenant, "Target record belongs to another company"
        )

    rules = POLICY_TABLE[operation]
    roles = effective_roles(actor, target_owner_id, target_department, now)
    scope = _broadest(rules[role] for role in roles if role in rules)

    if scope is None:
        return Decision.deny(
            DenyReason.insufficient_role,
            f"Your role does not permit {operation.value.replace('_', ' ')}",
        )

    if scope == Scope.company:
        return Decision.allow(scope)

    if list_read and scope == Scope.reports:
        return Decision.allow(scope)

    if target_owner_id is not None and target_owner_id == actor.id:
        return Decision.allow(scope)

    if scope == Scope.reports:
        return Decision.deny(
            DenyReason.not_direct_report, "Employee is not one of your direct reports"
        )
    return Decision.deny(DenyReason.not_owner, "This record does not belong to you")
