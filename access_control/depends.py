from datetime import timedelta

from fastapi import Depends
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from access_control.adapter.services.jwt_auth_provider import JwtAuthProvider
from access_control.adapter.services.notification_sender import (
    LoggingNotificationSender,
    WebhookNotificationSender,
)
from access_control.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from access_control.app.services.auth_provider import IAuthProvider
from access_control.app.services.notification_sender import INotificationSender
from access_control.app.services.unit_of_work import UnitOfWork

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_auth_provider(uow: UnitOfWork = Depends(get_unit_of_work)) -> IAuthProvider:
    return JwtAuthProvider(
        uow,
        secret=ApplicationConfig.JWT_SECRET,
        session_ttl=timedelta(hours=ApplicationConfig.SESSION_TTL_HOURS),
        reset_ttl=timedelta(minutes=ApplicationConfig.PASSWORD_RESET_TTL_MINUTES),
    )


def get_notification_sender() -> INotificationSender:
    if ApplicationConfig.NOTIFICATION_WEBHOOK_URL:
        return WebhookNotificationSender(
            ApplicationConfig.NOTIFICATION_WEBHOOK_URL,
            timeout=ApplicationConfig.NOTIFICATION_TIMEOUT_SECONDS,
        )
    return LoggingNotificationSender()


def get_invitation_ttl() -> timedelta:
    return timedelta(days=ApplicationConfig.INVITATION_TTL_DAYS)


def get_accept_url_base() -> str:
    return ApplicationConfig.SITE_URL.rstrip("/") + "/invitations/accept"


def get_reset_url_base() -> str:
    return ApplicationConfig.SITE_URL.rstrip("/") + "/auth/reset-password"
