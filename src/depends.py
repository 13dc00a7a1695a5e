from uuid import UUID

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import user_id_from_token
from src.app.services.email_sender import EmailSender
from src.app.services.notification_dispatcher import NotificationDispatcher
from src.app.services.realtime_publisher import RealtimePublisher
from src.app.services.unit_of_work import UnitOfWork

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def init_models() -> None:
    """Create missing tables"""
    # Entities must be imported so their tables are registered on the metadata
    import src.domain.entities  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> UUID:
    """
    Dependency to extract and verify the JWT from the Authorization header.

    Returns:
        The user id carried by the token

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized, no token",
        )

    user_id = user_id_from_token(credentials.credentials)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    return user_id


def get_email_sender(request: Request) -> EmailSender:
    return request.app.state.email_sender


def get_realtime_publisher(request: Request) -> RealtimePublisher:
    return request.app.state.realtime_hub


def get_notification_dispatcher(
    uow: UnitOfWork = Depends(get_unit_of_work),
    publisher: RealtimePublisher = Depends(get_realtime_publisher),
    email_sender: EmailSender = Depends(get_email_sender),
) -> NotificationDispatcher:
    # Shares the request's unit of work with the use case (dependency cache)
    return NotificationDispatcher(uow, publisher, email_sender)
