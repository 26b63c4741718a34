from uuid import uuid4

import pytest

from src.app.errors import ErrorCode
from src.app.use_cases.tasks import (
    CreateTaskCommand,
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetAllTasksUseCase,
    UpdateTaskCommand,
    UpdateTaskUseCase,
)
from src.domain.entities import ActorRole, TaskType
from tests.fixtures.factories import make_actor, make_task


@pytest.mark.asyncio
async def test_create_task_appends_after_last(mock_uow):
    actor = make_actor(ActorRole.manager)
    mock_uow.tasks.get_max_order_sequence.return_value = 4

    result = await CreateTaskUseCase(mock_uow).execute(
        actor, CreateTaskCommand(title=" Read handbook ", task_type=TaskType.acknowledgment)
    )

    assert result.is_ok()
    assert result.value.title == "Read handbook"
    assert result.value.order_sequence == 5
    assert result.value.is_active
    mock_uow.audit_events.create.assert_called_once()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_first_task_starts_at_zero(mock_uow):
    actor = make_actor(ActorRole.hr)
    mock_uow.tasks.get_max_order_sequence.return_value = None

    result = await CreateTaskUseCase(mock_uow).execute(actor, CreateTaskCommand(title="Badge"))

    assert result.is_ok()
    assert result.value.order_sequence == 0


@pytest.mark.asyncio
async def test_employee_cannot_create_task(mock_uow):
    actor = make_actor(ActorRole.employee)

    result = await CreateTaskUseCase(mock_uow).execute(actor, CreateTaskCommand(title="Badge"))

    assert result.is_err()
    assert result.error.code == ErrorCode.FORBIDDEN


@pytest.mark.asyncio
async def test_blank_title_is_rejected(mock_uow):
    actor = make_actor(ActorRole.hr)

    result = await CreateTaskUseCase(mock_uow).execute(actor, CreateTaskCommand(title="   "))

    assert result.is_err()
    assert result.error.code == ErrorCode.VALIDATION_ERROR


@pytest.mark.asyncio
async def test_update_task_applies_only_given_fields(mock_uow):
    actor = make_actor(ActorRole.hr)
    task = make_task(actor.company_id, title="Badge", required=True)
    mock_uow.tasks.get_by_id.return_value = task

    result = await UpdateTaskUseCase(mock_uow).execute(
        actor, task.id, UpdateTaskCommand(required=False)
    )

    assert result.is_ok()
    assert result.value.required is False
    assert result.value.title == "Badge"


@pytest.mark.asyncio
async def test_update_unknown_task_is_not_found(mock_uow):
    actor = make_actor(ActorRole.hr)
    mock_uow.tasks.get_by_id.return_value = None

    result = await UpdateTaskUseCase(mock_uow).execute(
        actor, uuid4(), UpdateTaskCommand(title="X")
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.NOT_FOUND


@pytest.mark.asyncio
async def test_delete_is_soft_and_idempotent(mock_uow):
    actor = make_actor(ActorRole.admin)
    task = make_task(actor.company_id)
    mock_uow.tasks.get_by_id.return_value = task

    first = await DeleteTaskUseCase(mock_uow).execute(actor, task.id)
    second = await DeleteTaskUseCase(mock_uow).execute(actor, task.id)

    assert first.is_ok() and second.is_ok()
    assert task.is_active is False
    mock_uow.tasks.update.assert_called_once_with(task)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_employee_cannot_list_inactive_tasks(mock_uow):
    actor = make_actor(ActorRole.employee)

    result = await GetAllTasksUseCase(mock_uow).execute(actor, include_inactive=True)

    assert result.is_err()
    assert result.error.code == ErrorCode.FORBIDDEN


@pytest.mark.asyncio
async def test_employee_lists_active_tasks(mock_uow):
    actor = make_actor(ActorRole.employee)
    mock_uow.tasks.list_by_company.return_value = [make_task(actor.company_id)]

    result = await GetAllTasksUseCase(mock_uow).execute(actor)

    assert result.is_ok()
    assert len(result.value) == 1
    mock_uow.tasks.list_by_company.assert_called_once_with(
        actor.company_id, include_inactive=False
    )
