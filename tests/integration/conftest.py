from types import SimpleNamespace
from typing import Dict, List

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.app import create_app
from src.api.utils.jwt import generate_jwt
from src.app.services.notification_sender import NotificationSender
from src.depends import get_notification_sender, get_unit_of_work
from src.domain.entities import ActorRole, Company, OnboardingTask, Profile, TaskType
from tests.fixtures.json_loader import TestDataLoader


class RecordingNotificationSender(NotificationSender):
    """Keeps delivered invitations so tests can pick up the raw token"""

    def __init__(self):
        self.sent: List[Dict] = []

    async def send_invitation(self, email, employee_name, company_name, token, expires_at):
        self.sent.append(
            {
                "email": email,
                "employee_name": employee_name,
                "company_name": company_name,
                "token": token,
                "expires_at": expires_at,
            }
        )

    @property
    def last_token(self) -> str:
        return self.sent[-1]["token"]


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest.fixture
def notifier():
    return RecordingNotificationSender()


@pytest_asyncio.fixture
async def client(db_session, notifier):
    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_notification_sender] = lambda: notifier

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def seed(db_session):
    """
    Two companies with their profiles and task catalogs.

    Only plain ids are exposed; ORM instances expire as soon as a request
    rolls the shared session back.
    """
    companies = {}
    for key, data in TestDataLoader.get_copy("companies").items():
        companies[key] = Company(**data)
        db_session.add(companies[key])

    profiles = {}
    for key, data in TestDataLoader.get_copy("profiles").items():
        company = companies[data.pop("company")]
        profiles[key] = Profile(
            company_id=company.id, role=ActorRole(data.pop("role")), **data
        )
        db_session.add(profiles[key])

    tasks = {}
    for data in TestDataLoader.get_copy("tasks"):
        company = companies[data.pop("company")]
        tasks[data["title"]] = OnboardingTask(
            company_id=company.id, task_type=TaskType(data.pop("task_type")), **data
        )
        db_session.add(tasks[data["title"]])

    await db_session.commit()

    return SimpleNamespace(
        company_ids={key: c.id for key, c in companies.items()},
        profile_ids={key: p.id for key, p in profiles.items()},
        roles={key: p.role.value for key, p in profiles.items()},
        task_ids={title: t.id for title, t in tasks.items()},
    )


@pytest.fixture
def auth_headers(seed):
    def build(profile_key: str) -> Dict[str, str]:
        company_key = TestDataLoader.get_copy("profiles")[profile_key]["company"]
        token = generate_jwt(
            seed.profile_ids[profile_key],
            seed.company_ids[company_key],
            seed.roles[profile_key],
        )
        return {"Authorization": f"Bearer {token}"}

    return build


@pytest.fixture
def service_headers():
    return {"X-Service-API-Key": ApplicationConfig.SERVICE_API_KEY}
