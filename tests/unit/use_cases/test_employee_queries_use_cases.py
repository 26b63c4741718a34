from uuid import uuid4

import pytest

from src.app.errors import ErrorCode
from src.app.use_cases.actors import LoadActorUseCase
from src.app.use_cases.audit import GetAuditEventsUseCase
from src.app.use_cases.employees import (
    GetEmployeeProgressUseCase,
    GetEmployeesUseCase,
    GetMyProgressUseCase,
    GetOnboardingStatsUseCase,
    UpdateEmployeeCommand,
    UpdateEmployeeUseCase,
)
from src.domain.entities import ActorRole, AssignmentStatus, OnboardingStatus, Profile, RoleAssignment
from tests.fixtures.factories import make_actor, make_assignment, make_employee, make_task


@pytest.mark.asyncio
async def test_manager_list_is_filtered_to_reports(mock_uow):
    actor = make_actor(ActorRole.manager)
    mock_uow.employees.list_by_company.return_value = []

    result = await GetEmployeesUseCase(mock_uow).execute(actor, search="  eng ")

    assert result.is_ok()
    mock_uow.employees.list_by_company.assert_called_once_with(
        actor.company_id,
        status=None,
        manager_id=actor.id,
        search="eng",
        include_inactive=False,
    )


@pytest.mark.asyncio
async def test_hr_list_is_company_wide(mock_uow):
    actor = make_actor(ActorRole.hr)
    mock_uow.employees.list_by_company.return_value = [make_employee(actor.company_id)]

    result = await GetEmployeesUseCase(mock_uow).execute(
        actor, status=OnboardingStatus.invited
    )

    assert result.is_ok()
    assert len(result.value) == 1
    kwargs = mock_uow.employees.list_by_company.call_args.kwargs
    assert kwargs["manager_id"] is None
    assert kwargs["status"] == OnboardingStatus.invited


@pytest.mark.asyncio
async def test_employee_progress_for_direct_report(mock_uow):
    manager = make_actor(ActorRole.manager)
    employee = make_employee(manager.company_id, manager_id=manager.id)
    done = make_task(manager.company_id, title="Contract")
    open_task = make_task(manager.company_id, title="Laptop")
    mock_uow.employees.get_by_id.return_value = employee
    mock_uow.assignments.list_for_employee.return_value = [
        (make_assignment(employee, done, AssignmentStatus.completed), done),
        (make_assignment(employee, open_task), open_task),
    ]

    result = await GetEmployeeProgressUseCase(mock_uow).execute(manager, employee.id)

    assert result.is_ok()
    assert result.value.progress.total == 2
    assert result.value.progress.progress_percentage == 50.0
    assert [a.task_title for a in result.value.assignments] == ["Contract", "Laptop"]


@pytest.mark.asyncio
async def test_employee_progress_denied_for_other_team(mock_uow):
    manager = make_actor(ActorRole.manager)
    mock_uow.employees.get_by_id.return_value = make_employee(
        manager.company_id, manager_id=uuid4()
    )

    result = await GetEmployeeProgressUseCase(mock_uow).execute(manager, uuid4())

    assert result.is_err()
    assert result.error.code == ErrorCode.FORBIDDEN


@pytest.mark.asyncio
async def test_my_progress_without_linked_record(mock_uow):
    actor = make_actor(ActorRole.employee)
    mock_uow.employees.get_by_user_id.return_value = None

    result = await GetMyProgressUseCase(mock_uow).execute(actor)

    assert result.is_err()
    assert result.error.code == ErrorCode.NOT_FOUND


@pytest.mark.asyncio
async def test_my_progress_for_linked_employee(mock_uow):
    actor = make_actor(ActorRole.employee)
    employee = make_employee(actor.company_id, user_id=actor.id)
    mock_uow.employees.get_by_user_id.return_value = employee
    mock_uow.assignments.list_for_employee.return_value = []

    result = await GetMyProgressUseCase(mock_uow).execute(actor)

    assert result.is_ok()
    assert result.value.employee.id == employee.id
    assert result.value.progress.total == 0


@pytest.mark.asyncio
async def test_stats_fill_missing_statuses(mock_uow):
    actor = make_actor(ActorRole.admin)
    mock_uow.employees.count_by_status.return_value = {
        OnboardingStatus.invited: 2,
        OnboardingStatus.completed: 1,
    }

    result = await GetOnboardingStatsUseCase(mock_uow).execute(actor)

    assert result.is_ok()
    assert result.value.total == 3
    assert result.value.not_started == 0
    assert result.value.invited == 2


@pytest.mark.asyncio
async def test_update_employee_applies_changes(mock_uow):
    actor = make_actor(ActorRole.hr)
    employee = make_employee(actor.company_id)
    mock_uow.employees.get_by_id.return_value = employee

    result = await UpdateEmployeeUseCase(mock_uow).execute(
        actor, employee.id, UpdateEmployeeCommand(position="Engineer", is_active=False)
    )

    assert result.is_ok()
    assert employee.position == "Engineer"
    assert employee.is_active is False
    assert employee.onboarding_status == OnboardingStatus.not_started
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_manager_cannot_hand_report_to_another_manager(mock_uow):
    manager = make_actor(ActorRole.manager)
    employee = make_employee(manager.company_id, manager_id=manager.id)
    mock_uow.employees.get_by_id.return_value = employee

    result = await UpdateEmployeeUseCase(mock_uow).execute(
        manager, employee.id, UpdateEmployeeCommand(manager_id=uuid4())
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.FORBIDDEN
    assert employee.manager_id == manager.id


@pytest.mark.asyncio
async def test_load_actor_attaches_grants(mock_uow):
    company_id = uuid4()
    profile = Profile(
        id=uuid4(),
        company_id=company_id,
        email="lead@acme.com",
        first_name="Lee",
        last_name="Lead",
        role=ActorRole.employee,
    )
    mock_uow.profiles.get_by_id.return_value = profile
    mock_uow.profiles.get_active_role_assignments.return_value = [
        RoleAssignment(company_id=company_id, profile_id=profile.id, role=ActorRole.hr)
    ]

    result = await LoadActorUseCase(mock_uow).execute(profile.id, company_id)

    assert result.is_ok()
    assert result.value.role == ActorRole.employee
    assert [g.role for g in result.value.grants] == [ActorRole.hr]


@pytest.mark.asyncio
async def test_load_actor_rejects_company_mismatch(mock_uow):
    profile = Profile(
        id=uuid4(),
        company_id=uuid4(),
        email="x@acme.com",
        first_name="X",
        last_name="Y",
        role=ActorRole.admin,
    )
    mock_uow.profiles.get_by_id.return_value = profile

    result = await LoadActorUseCase(mock_uow).execute(profile.id, uuid4())

    assert result.is_err()
    assert result.error.code == ErrorCode.UNAUTHENTICATED


@pytest.mark.asyncio
async def test_manager_cannot_read_audit_events(mock_uow):
    actor = make_actor(ActorRole.manager)

    result = await GetAuditEventsUseCase(mock_uow).execute(actor)

    assert result.is_err()
    assert result.error.code == ErrorCode.FORBIDDEN
    mock_uow.audit_events.get_by_company_paginated.assert_not_called()


@pytest.mark.asyncio
async def test_invalid_audit_cursor_is_validation_error(mock_uow):
    actor = make_actor(ActorRole.admin)
    mock_uow.audit_events.get_by_company_paginated.side_effect = ValueError("bad cursor")

    result = await GetAuditEventsUseCase(mock_uow).execute(actor, cursor="%%%")

    assert result.is_err()
    assert result.error.code == ErrorCode.VALIDATION_ERROR
