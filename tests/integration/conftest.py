import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import access_control.domain.entities  # noqa: F401  registers the tables
from access_control.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from access_control.app.services.notification_sender import INotificationSender
from access_control.depends import get_notification_sender, get_unit_of_work


class RecordingNotificationSender(INotificationSender):
    def __init__(self):
        self.sent = []
        self.resets = []
        self.fail = False

    async def notify_invited(self, email: str, tenant_name: str, accept_url: str) -> None:
        if self.fail:
            raise ConnectionError("notification backend unreachable")
        self.sent.append((email, tenant_name, accept_url))

    async def notify_password_reset(self, email: str, reset_url: str) -> None:
        if self.fail:
            raise ConnectionError("notification backend unreachable")
        self.resets.append((email, reset_url))


@pytest.fixture
def notifier():
    return RecordingNotificationSender()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
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
async def client(db_session, notifier):
    from access_control.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_notification_sender] = lambda: notifier

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
