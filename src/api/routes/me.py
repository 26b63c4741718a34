from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.employees import EmployeeProgressResponse, GetMyProgressUseCase
from src.depends import get_current_actor, get_unit_of_work
from src.domain.actor import Actor

router = APIRouter(prefix="/me", tags=["Me"])


@router.get("/progress", status_code=status.HTTP_200_OK, response_model=EmployeeProgressResponse)
async def get_my_progress(
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get My Progress

    Onboarding progress of the employee record linked to the caller.

    Raises:
        - 404 Not Found: caller has no employee record
    """
    result = await GetMyProgressUseCase(uow).execute(actor)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
