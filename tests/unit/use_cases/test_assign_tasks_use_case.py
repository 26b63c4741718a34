from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from src.app.errors import ErrorCode
from src.app.use_cases.assignments import AssignTasksCommand, AssignTasksToEmployeeUseCase
from src.domain.entities import ActorRole, AssignmentPriority, OnboardingStatus
from tests.fixtures.factories import make_actor, make_employee, make_task


@pytest.fixture
def actor():
    return make_actor(ActorRole.hr)


@pytest.fixture
def employee(actor, mock_uow):
    employee = make_employee(actor.company_id)
    mock_uow.employees.get_by_id.return_value = employee
    mock_uow.assignments.get_assigned_task_ids.return_value = set()
    return employee


@pytest.mark.asyncio
async def test_assign_explicit_tasks(mock_uow, actor, employee):
    # Arrange
    tasks = [make_task(actor.company_id, title="Badge"), make_task(actor.company_id, title="VPN", required=False)]
    mock_uow.tasks.get_by_ids.return_value = tasks
    due = datetime.now(timezone.utc) + timedelta(days=3)
    command = AssignTasksCommand(
        task_ids=[t.id for t in tasks], due_date=due, priority=AssignmentPriority.high
    )

    # Act
    result = await AssignTasksToEmployeeUseCase(mock_uow).execute(actor, employee.id, command)

    # Assert
    assert result.is_ok()
    assignments = result.value.assignments
    assert [a.task_title for a in assignments] == ["Badge", "VPN"]
    assert [a.required for a in assignments] == [True, False]
    assert all(a.priority == AssignmentPriority.high for a in assignments)
    assert all(a.due_date.tzinfo is None for a in assignments)
    assert all(not a.is_overdue for a in assignments)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_assign_defaults_to_all_active_tasks(mock_uow, actor, employee):
    tasks = [make_task(actor.company_id)]
    mock_uow.tasks.list_by_company.return_value = tasks

    result = await AssignTasksToEmployeeUseCase(mock_uow).execute(
        actor, employee.id, AssignTasksCommand()
    )

    assert result.is_ok()
    assert len(result.value.assignments) == 1
    mock_uow.tasks.list_by_company.assert_called_once_with(actor.company_id)


@pytest.mark.asyncio
async def test_duplicate_assignment_is_rejected(mock_uow, actor, employee):
    task = make_task(actor.company_id)
    mock_uow.tasks.get_by_ids.return_value = [task]
    mock_uow.assignments.get_assigned_task_ids.return_value = {task.id}

    result = await AssignTasksToEmployeeUseCase(mock_uow).execute(
        actor, employee.id, AssignTasksCommand(task_ids=[task.id])
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.DUPLICATE_ASSIGNMENT
    mock_uow.assignments.create_many.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_task_from_other_company_is_not_found(mock_uow, actor, employee):
    mock_uow.tasks.get_by_ids.return_value = []

    result = await AssignTasksToEmployeeUseCase(mock_uow).execute(
        actor, employee.id, AssignTasksCommand(task_ids=[uuid4()])
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.NOT_FOUND


@pytest.mark.asyncio
async def test_inactive_task_is_rejected(mock_uow, actor, employee):
    task = make_task(actor.company_id, is_active=False)
    mock_uow.tasks.get_by_ids.return_value = [task]

    result = await AssignTasksToEmployeeUseCase(mock_uow).execute(
        actor, employee.id, AssignTasksCommand(task_ids=[task.id])
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.VALIDATION_ERROR


@pytest.mark.asyncio
async def test_repeated_task_ids_are_rejected(mock_uow, actor, employee):
    task_id = uuid4()

    result = await AssignTasksToEmployeeUseCase(mock_uow).execute(
        actor, employee.id, AssignTasksCommand(task_ids=[task_id, task_id])
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.VALIDATION_ERROR


@pytest.mark.asyncio
async def test_completed_employee_takes_no_new_tasks(mock_uow, actor, employee):
    employee.onboarding_status = OnboardingStatus.completed

    result = await AssignTasksToEmployeeUseCase(mock_uow).execute(
        actor, employee.id, AssignTasksCommand()
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.INVALID_TRANSITION


@pytest.mark.asyncio
async def test_manager_cannot_assign_to_other_managers_report(mock_uow, employee):
    manager = make_actor(ActorRole.manager, company_id=employee.company_id)
    employee.manager_id = uuid4()

    result = await AssignTasksToEmployeeUseCase(mock_uow).execute(
        manager, employee.id, AssignTasksCommand()
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.FORBIDDEN
