from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.audit_event_repository import AuditEventRepository
from src.adapter.repositories.company_repository import CompanyRepository
from src.adapter.repositories.employee_repository import EmployeeRepository
from src.adapter.repositories.invitation_repository import InvitationRepository
from src.adapter.repositories.onboarding_task_repository import OnboardingTaskRepository
from src.adapter.repositories.profile_repository import ProfileRepository
from src.adapter.repositories.task_assignment_repository import TaskAssignmentRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.companies = CompanyRepository(self.session)
        self.profiles = ProfileRepository(self.session)
        self.employees = EmployeeRepository(self.session)
        self.tasks = OnboardingTaskRepository(self.session)
        self.assignments = TaskAssignmentRepository(self.session)
        self.invitations = InvitationRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
