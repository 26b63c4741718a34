from abc import ABC, abstractmethod

from src.app.repositories.audit_event_repository import IAuditEventRepository
from src.app.repositories.company_repository import ICompanyRepository
from src.app.repositories.employee_repository import IEmployeeRepository
from src.app.repositories.invitation_repository import IInvitationRepository
from src.app.repositories.onboarding_task_repository import IOnboardingTaskRepository
from src.app.repositories.profile_repository import IProfileRepository
from src.app.repositories.task_assignment_repository import ITaskAssignmentRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    companies: ICompanyRepository
    profiles: IProfileRepository
    employees: IEmployeeRepository
    tasks: IOnboardingTaskRepository
    assignments: ITaskAssignmentRepository
    invitations: IInvitationRepository
    audit_events: IAuditEventRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
