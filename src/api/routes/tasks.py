"""
Task Catalog API Routes
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tasks import (
    CreateTaskCommand,
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetAllTasksUseCase,
    TaskResponse,
    UpdateTaskCommand,
    UpdateTaskUseCase,
)
from src.depends import get_current_actor, get_unit_of_work
from src.domain.actor import Actor
from src.domain.entities import TaskType

router = APIRouter(prefix="/tasks", tags=["Tasks"])


class CreateTaskRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    task_type: TaskType = TaskType.form
    required: bool = True
    order_sequence: Optional[int] = Field(None, ge=0)


class UpdateTaskRequest(BaseModel):
    """Omitted fields are left unchanged"""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    task_type: Optional[TaskType] = None
    required: Optional[bool] = None
    order_sequence: Optional[int] = Field(None, ge=0)
    is_active: Optional[bool] = None


@router.get("", status_code=status.HTTP_200_OK, response_model=List[TaskResponse])
async def get_all_tasks(
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    include_inactive: bool = Query(False),
):
    result = await GetAllTasksUseCase(uow).execute(actor, include_inactive=include_inactive)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TaskResponse)
async def create_task(
    request: CreateTaskRequest,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    command = CreateTaskCommand(**request.model_dump())

    result = await CreateTaskUseCase(uow).execute(actor, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{task_id}", status_code=status.HTTP_200_OK, response_model=TaskResponse)
async def update_task(
    task_id: UUID,
    request: UpdateTaskRequest,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    command = UpdateTaskCommand(**request.model_dump(exclude_unset=True))

    result = await UpdateTaskUseCase(uow).execute(actor, task_id, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{task_id}", status_code=status.HTTP_200_OK, response_model=TaskResponse)
async def delete_task(
    task_id: UUID,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Task

    Soft delete: the task leaves the catalog, existing assignments stay.
    """
    result = await DeleteTaskUseCase(uow).execute(actor, task_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
