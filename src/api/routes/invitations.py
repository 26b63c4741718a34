"""
Invitation API Routes

Endpoints used by the account activation flow.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.service_auth import verify_service_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.invitations import (
    ConsumeInvitationResponse,
    ConsumeInvitationUseCase,
    ValidateInvitationResponse,
    ValidateInvitationUseCase,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/invitations", tags=["Invitations"])


class ValidateInvitationRequest(BaseModel):
    token: str = Field(..., min_length=1, description="Invitation token")


class ConsumeInvitationRequest(BaseModel):
    token: str = Field(..., min_length=1, description="Invitation token")
    user_id: UUID = Field(..., description="Profile created for the new hire")


@router.post(
    "/validate",
    status_code=status.HTTP_200_OK,
    response_model=ValidateInvitationResponse,
)
async def validate_invitation(
    request: ValidateInvitationRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Validate Invitation

    Public, read-only check of a token before sign-up.

    Raises:
        - 404 Not Found: unknown token
        - 409 Conflict: ALREADY_USED
        - 410 Gone: EXPIRED (also for superseded tokens)
    """
    result = await ValidateInvitationUseCase(uow).execute(request.token)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/consume",
    status_code=status.HTTP_200_OK,
    response_model=ConsumeInvitationResponse,
    dependencies=[Depends(verify_service_api_key)],
)
async def consume_invitation(
    request: ConsumeInvitationRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Consume Invitation

    Called by the activation service with its API key once the new hire's
    login exists. Links the login to the employee record.

    Raises:
        - 401 Unauthorized: missing or invalid service API key
        - 404 Not Found: unknown token or user
        - 409 Conflict: ALREADY_USED, or account linked elsewhere
        - 410 Gone: EXPIRED
    """
    use_case = ConsumeInvitationUseCase(uow)
    result = await use_case.execute(request.token, request.user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
