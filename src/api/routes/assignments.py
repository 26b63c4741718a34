"""
Assignment API Routes

Moves a task assignment through its lifecycle.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.assignments import (
    CompleteTaskUseCase,
    SkipTaskUseCase,
    StartTaskUseCase,
    TaskActionResponse,
)
from src.depends import get_current_actor, get_unit_of_work
from src.domain.actor import Actor

router = APIRouter(prefix="/assignments", tags=["Assignments"])


class CompleteTaskRequest(BaseModel):
    notes: Optional[str] = Field(None, max_length=2000)
    completion_data: Optional[Dict[str, Any]] = Field(
        None, description="Structured payload, e.g. submitted form fields"
    )


class SkipTaskRequest(BaseModel):
    notes: Optional[str] = Field(None, max_length=2000)


@router.post(
    "/{assignment_id}/start",
    status_code=status.HTTP_200_OK,
    response_model=TaskActionResponse,
)
async def start_task(
    assignment_id: UUID,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Start Task

    Raises:
        - 403 Forbidden: assignment belongs to someone else
        - 404 Not Found: assignment not found
        - 409 Conflict: INVALID_TRANSITION
    """
    result = await StartTaskUseCase(uow).execute(actor, assignment_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{assignment_id}/complete",
    status_code=status.HTTP_200_OK,
    response_model=TaskActionResponse,
)
async def complete_task(
    assignment_id: UUID,
    request: Optional[CompleteTaskRequest] = Body(None),
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Complete Task

    Completing the last open required task completes the employee's
    onboarding in the same transaction. Repeating the call is harmless.

    Raises:
        - 403 Forbidden: assignment belongs to someone else
        - 404 Not Found: assignment not found
        - 409 Conflict: INVALID_TRANSITION (assignment was skipped)
    """
    request = request or CompleteTaskRequest()

    use_case = CompleteTaskUseCase(uow)
    result = await use_case.execute(
        actor, assignment_id, notes=request.notes, completion_data=request.completion_data
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{assignment_id}/skip",
    status_code=status.HTTP_200_OK,
    response_model=TaskActionResponse,
)
async def skip_task(
    assignment_id: UUID,
    request: Optional[SkipTaskRequest] = Body(None),
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    request = request or SkipTaskRequest()

    result = await SkipTaskUseCase(uow).execute(actor, assignment_id, notes=request.notes)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
