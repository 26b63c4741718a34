from datetime import timedelta
from uuid import uuid4

import pytest

from src.domain.actor import RoleGrant
from src.domain.base import utcnow
from src.domain.entities import ActorRole, GrantScope
from src.domain.policy import POLICY_TABLE, DenyReason, Operation, Scope, authorize
from tests.fixtures.factories import make_actor


def test_every_operation_has_a_policy_row():
    assert set(POLICY_TABLE) == set(Operation)


@pytest.mark.parametrize("role", [ActorRole.admin, ActorRole.hr])
def test_admin_and_hr_manage_any_employee_of_their_company(role):
    actor = make_actor(role)

    decision = authorize(
        actor, Operation.manage_employees, actor.company_id, target_owner_id=uuid4()
    )

    assert decision.allowed
    assert decision.scope == Scope.company
    assert not decision.restricted_to_owner


def test_cross_tenant_target_is_denied_even_for_admin():
    actor = make_actor(ActorRole.admin)

    decision = authorize(actor, Operation.read_employees, uuid4(), list_read=True)

    assert not decision.allowed
    assert decision.reason == DenyReason.cross_tenant


def test_inactive_actor_is_denied():
    actor = make_actor(ActorRole.admin, is_active=False)

    decision = authorize(actor, Operation.read_tasks, actor.company_id)

    assert not decision.allowed
    assert decision.reason == DenyReason.inactive_actor


def test_employee_cannot_create_employees():
    actor = make_actor(ActorRole.employee)

    decision = authorize(actor, Operation.manage_employees, actor.company_id)

    assert not decision.allowed
    assert decision.reason == DenyReason.insufficient_role


def test_employee_cannot_manage_tasks_but_can_read_them():
    actor = make_actor(ActorRole.employee)

    assert not authorize(actor, Operation.manage_tasks, actor.company_id).allowed
    assert authorize(actor, Operation.read_tasks, actor.company_id).allowed


def test_manager_list_read_is_restricted_to_reports():
    actor = make_actor(ActorRole.manager)

    decision = authorize(actor, Operation.read_employees, actor.company_id, list_read=True)

    assert decision.allowed
    assert decision.scope == Scope.reports
    assert decision.restricted_to_owner


def test_manager_may_act_on_direct_report():
    actor = make_actor(ActorRole.manager)

    decision = authorize(
        actor, Operation.view_progress, actor.company_id, target_owner_id=actor.id
    )

    assert decision.allowed


def test_manager_denied_for_other_managers_report():
    actor = make_actor(ActorRole.manager)

    decision = authorize(
        actor, Operation.view_progress, actor.company_id, target_owner_id=uuid4()
    )

    assert not decision.allowed
    assert decision.reason == DenyReason.not_direct_report


def test_manager_denied_for_employee_without_manager():
    actor = make_actor(ActorRole.manager)

    decision = authorize(actor, Operation.assign_tasks, actor.company_id, target_owner_id=None)

    assert not decision.allowed
    assert decision.reason == DenyReason.not_direct_report


def test_progress_own_task_requires_ownership():
    actor = make_actor(ActorRole.employee)

    assert authorize(
        actor, Operation.progress_own_task, actor.company_id, target_owner_id=actor.id
    ).allowed

    decision = authorize(
        actor, Operation.progress_own_task, actor.company_id, target_owner_id=uuid4()
    )
    assert not decision.allowed
    assert decision.reason == DenyReason.not_owner


def test_admin_cannot_progress_someone_elses_task():
    actor = make_actor(ActorRole.admin)

    decision = authorize(
        actor, Operation.progress_own_task, actor.company_id, target_owner_id=uuid4()
    )

    assert not decision.allowed


def test_self_scope_denied_for_unlinked_record():
    actor = make_actor(ActorRole.employee)

    decision = authorize(
        actor, Operation.view_own_progress, actor.company_id, target_owner_id=None
    )

    assert not decision.allowed


def test_department_grant_applies_only_to_matching_department():
    grant = RoleGrant(role=ActorRole.hr, scope=GrantScope.department, scope_id="Engineering")
    actor = make_actor(ActorRole.employee, grants=[grant])

    assert authorize(
        actor,
        Operation.manage_employees,
        actor.company_id,
        target_owner_id=uuid4(),
        target_department="Engineering",
    ).allowed
    assert not authorize(
        actor,
        Operation.manage_employees,
        actor.company_id,
        target_owner_id=uuid4(),
        target_department="Sales",
    ).allowed


def test_team_grant_applies_to_that_managers_reports():
    team_lead = uuid4()
    grant = RoleGrant(role=ActorRole.hr, scope=GrantScope.team, scope_id=str(team_lead))
    actor = make_actor(ActorRole.employee, grants=[grant])

    assert authorize(
        actor, Operation.send_invitation, actor.company_id, target_owner_id=team_lead
    ).allowed
    assert not authorize(
        actor, Operation.send_invitation, actor.company_id, target_owner_id=uuid4()
    ).allowed


def test_expired_grant_is_ignored():
    grant = RoleGrant(role=ActorRole.admin, expires_at=utcnow() - timedelta(minutes=1))
    actor = make_actor(ActorRole.employee, grants=[grant])

    decision = authorize(actor, Operation.view_audit, actor.company_id)

    assert not decision.allowed
    assert decision.reason == DenyReason.insufficient_role


def test_broadest_scope_wins_when_grant_widens_manager():
    grant = RoleGrant(role=ActorRole.hr)
    actor = make_actor(ActorRole.manager, grants=[grant])

    decision = authorize(
        actor, Operation.view_progress, actor.company_id, target_owner_id=uuid4()
    )

    assert decision.allowed
    assert decision.scope == Scope.company
