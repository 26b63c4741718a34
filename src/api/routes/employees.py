"""
Employee API Routes

Employee records, onboarding progress, invitations and task assignment.
"""

from datetime import date, datetime, timedelta
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import raise_for_error
from src.app.services.notification_sender import NotificationSender
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.assignments import (
    AssignTasksCommand,
    AssignTasksResponse,
    AssignTasksToEmployeeUseCase,
)
from src.app.use_cases.employees import (
    CreateEmployeeCommand,
    CreateEmployeeResponse,
    CreateEmployeeUseCase,
    EmployeeProgressResponse,
    EmployeeResponse,
    GetEmployeeProgressUseCase,
    GetEmployeesUseCase,
    GetOnboardingStatsUseCase,
    OnboardingStatsResponse,
    UpdateEmployeeCommand,
    UpdateEmployeeUseCase,
)
from src.app.use_cases.invitations import SendInvitationResponse, SendInvitationUseCase
from src.depends import (
    get_current_actor,
    get_invitation_ttl,
    get_notification_sender,
    get_unit_of_work,
)
from src.domain.actor import Actor
from src.domain.entities import AssignmentPriority, EmploymentType, OnboardingStatus

router = APIRouter(prefix="/employees", tags=["Employees"])


class CreateEmployeeRequest(BaseModel):
    """
    Create employee HTTP request payload

    Validates incoming HTTP request before converting to CreateEmployeeCommand.
    """

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    personal_email: EmailStr
    work_email: Optional[EmailStr] = None
    employee_number: Optional[str] = Field(None, max_length=50)
    employment_type: EmploymentType = EmploymentType.full_time
    department: Optional[str] = Field(None, max_length=100)
    position: Optional[str] = Field(None, max_length=100)
    start_date: Optional[date] = None
    manager_id: Optional[UUID] = Field(
        None, description="Direct manager; defaults to the caller for managers"
    )
    assign_default_tasks: bool = Field(
        True, description="Assign every active catalog task on creation"
    )


class UpdateEmployeeRequest(BaseModel):
    """Partial update payload; omitted fields are left unchanged"""

    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    personal_email: Optional[EmailStr] = None
    work_email: Optional[EmailStr] = None
    employee_number: Optional[str] = Field(None, max_length=50)
    employment_type: Optional[EmploymentType] = None
    department: Optional[str] = Field(None, max_length=100)
    position: Optional[str] = Field(None, max_length=100)
    start_date: Optional[date] = None
    manager_id: Optional[UUID] = None
    is_active: Optional[bool] = None


class AssignTasksRequest(BaseModel):
    task_ids: Optional[List[UUID]] = Field(
        None, description="Tasks to assign; every active task when omitted"
    )
    due_date: Optional[datetime] = None
    priority: AssignmentPriority = AssignmentPriority.medium


@router.get("", status_code=status.HTTP_200_OK, response_model=List[EmployeeResponse])
async def get_employees(
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    status_filter: Optional[OnboardingStatus] = Query(None, alias="status"),
    search: Optional[str] = Query(None, max_length=100),
    include_inactive: bool = Query(False),
):
    """
    List employees visible to the caller.

    Managers only see their direct reports.
    """
    use_case = GetEmployeesUseCase(uow)
    result = await use_case.execute(
        actor, status=status_filter, search=search, include_inactive=include_inactive
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreateEmployeeResponse)
async def create_employee(
    request: CreateEmployeeRequest,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Employee

    Registers a new hire in not_started and assigns the active task catalog.

    Raises:
        - 403 Forbidden: role may not create employees, or manager_id is not the caller
        - 404 Not Found: manager not found in the company
        - 409 Conflict: duplicate email or employee limit reached
        - 422 Unprocessable Entity: invalid input
    """
    command = CreateEmployeeCommand(**request.model_dump())

    use_case = CreateEmployeeUseCase(uow)
    result = await use_case.execute(actor, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/stats", status_code=status.HTTP_200_OK, response_model=OnboardingStatsResponse)
async def get_onboarding_stats(
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetOnboardingStatsUseCase(uow).execute(actor)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch("/{employee_id}", status_code=status.HTTP_200_OK, response_model=EmployeeResponse)
async def update_employee(
    employee_id: UUID,
    request: UpdateEmployeeRequest,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Employee

    Edits HR fields, reassigns the manager or (de)activates the record.
    Onboarding status cannot be edited directly.
    """
    command = UpdateEmployeeCommand(**request.model_dump(exclude_unset=True))

    use_case = UpdateEmployeeUseCase(uow)
    result = await use_case.execute(actor, employee_id, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{employee_id}/progress",
    status_code=status.HTTP_200_OK,
    response_model=EmployeeProgressResponse,
)
async def get_employee_progress(
    employee_id: UUID,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetEmployeeProgressUseCase(uow).execute(actor, employee_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{employee_id}/invitations",
    status_code=status.HTTP_201_CREATED,
    response_model=SendInvitationResponse,
)
async def send_invitation(
    employee_id: UUID,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationSender = Depends(get_notification_sender),
    ttl: timedelta = Depends(get_invitation_ttl),
):
    """
    Send Invitation

    Issues a fresh invitation to the employee's personal email. Earlier
    unused invitations stop working.

    Raises:
        - 403 Forbidden: caller may not invite this employee
        - 404 Not Found: employee not found
        - 409 Conflict: employee already activated, or onboarding completed
    """
    use_case = SendInvitationUseCase(uow, notifier, ttl=ttl)
    result = await use_case.execute(actor, employee_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{employee_id}/assignments",
    status_code=status.HTTP_201_CREATED,
    response_model=AssignTasksResponse,
)
async def assign_tasks_to_employee(
    employee_id: UUID,
    request: AssignTasksRequest,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Assign Tasks To Employee

    Raises:
        - 403 Forbidden: caller may not assign tasks to this employee
        - 404 Not Found: employee or task not found
        - 409 Conflict: DUPLICATE_ASSIGNMENT, or onboarding already completed
        - 422 Unprocessable Entity: empty/duplicate task_ids, inactive task
    """
    command = AssignTasksCommand(
        task_ids=request.task_ids, due_date=request.due_date, priority=request.priority
    )

    use_case = AssignTasksToEmployeeUseCase(uow)
    result = await use_case.execute(actor, employee_id, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
