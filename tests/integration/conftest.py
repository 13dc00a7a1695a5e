from types import SimpleNamespace

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import generate_jwt
from src.depends import get_email_sender, get_realtime_publisher, get_unit_of_work
from src.domain.entities import User, UserRole
from tests.fixtures.fakes import FakeEmailSender, FakePublisher

SEED_USERS = {
    "admin": ("Ada Admin", "admin@taskflow.test", UserRole.admin),
    "owner": ("Olivia Owner", "owner@taskflow.test", UserRole.user),
    "member": ("Max Member", "member@taskflow.test", UserRole.user),
    "outsider": ("Otto Outsider", "outsider@taskflow.test", UserRole.user),
}


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


@pytest_asyncio.fixture
async def users(db_session):
    """
    Seeded accounts keyed by their part in the tests.

    Plain snapshots: the shared session expires its instances whenever a
    request rolls back.
    """
    seeded = {}
    for key, (name, email, role) in SEED_USERS.items():
        user = User(name=name, email=email, role=role)
        db_session.add(user)
        seeded[key] = user
    await db_session.commit()
    return {
        key: SimpleNamespace(id=user.id, name=user.name, email=user.email)
        for key, user in seeded.items()
    }


@pytest.fixture
def auth(users):
    """Authorization headers per seeded user"""
    return {
        key: {"Authorization": f"Bearer {generate_jwt(user.id)}"}
        for key, user in users.items()
    }


@pytest.fixture
def email_sender():
    return FakeEmailSender()


@pytest.fixture
def publisher():
    return FakePublisher()


@pytest_asyncio.fixture
async def client(db_session, email_sender, publisher):
    from src.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_email_sender] = lambda: email_sender
    app.dependency_overrides[get_realtime_publisher] = lambda: publisher

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def api():
    return ApplicationConfig.API_PREFIX
