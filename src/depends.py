from datetime import timedelta
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.logging_notification_sender import LoggingNotificationSender
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import raise_for_error
from src.api.utils.jwt import verify_jwt
from src.app.services.notification_sender import NotificationSender
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.actors import LoadActorUseCase
from src.domain.actor import Actor

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_notification_sender() -> NotificationSender:
    return LoggingNotificationSender(ApplicationConfig.APP_BASE_URL)


def get_invitation_ttl() -> timedelta:
    return timedelta(days=ApplicationConfig.INVITATION_TTL_DAYS)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing user_id, company_id, role

    Raises:
        HTTPException: 401 if token is invalid or expired
    """
    token = credentials.credentials
    payload = verify_jwt(token)

    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    return payload


async def get_current_actor(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> Actor:
    """
    Dependency resolving the verified token to an Actor context.

    Raises:
        ClientError: 401 if the profile is missing or belongs to another company
    """
    try:
        user_id = UUID(current_user["user_id"])
        company_id = UUID(current_user["company_id"])
    except (ValueError, TypeError, AttributeError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    result = await LoadActorUseCase(uow).execute(user_id, company_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
