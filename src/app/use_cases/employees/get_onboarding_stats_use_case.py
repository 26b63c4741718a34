"""
Get Onboarding Stats Use Case

Dashboard counters of employees per onboarding status.
"""

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.shared import denied
from src.domain.actor import Actor
from src.domain.entities import OnboardingStatus
from src.domain.policy import Operation, authorize
from src.shared.result import Result, Return

from .dtos import OnboardingStatsResponse


class GetOnboardingStatsUseCase:
    """
    Use case for the onboarding dashboard counters.

    Business Rules:
    - Only active employees are counted
    - Managers only count their direct reports
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor) -> Result[OnboardingStatsResponse]:
        async with self.uow:
            decision = authorize(
                actor, Operation.view_stats, actor.company_id, list_read=True
            )
            if not decision.allowed:
                return Return.err(denied(decision))

            manager_id = actor.id if decision.restricted_to_owner else None
            counts = await self.uow.employees.count_by_status(
                actor.company_id, manager_id=manager_id
            )

            per_status = {status: counts.get(status, 0) for status in OnboardingStatus}
            return Return.ok(
                OnboardingStatsResponse(
                    total=sum(per_status.values()),
                    not_started=per_status[OnboardingStatus.not_started],
                    invited=per_status[OnboardingStatus.invited],
                    in_progress=per_status[OnboardingStatus.in_progress],
                    completed=per_status[OnboardingStatus.completed],
                )
            )
