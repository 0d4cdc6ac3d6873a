from sqlmodel.ext.asyncio.session import AsyncSession

from access_control.adapter.repositories.auth_account_repository import AuthAccountRepository
from access_control.adapter.repositories.base import storage_call
from access_control.adapter.repositories.invitation_repository import InvitationRepository
from access_control.adapter.repositories.password_reset_token_repository import (
    PasswordResetTokenRepository,
)
from access_control.adapter.repositories.session_repository import SessionRepository
from access_control.adapter.repositories.tenant_repository import TenantRepository
from access_control.adapter.repositories.user_profile_repository import UserProfileRepository
from access_control.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        self.profiles = UserProfileRepository(self.session)
        self.tenants = TenantRepository(self.session)
        self.invitations = InvitationRepository(self.session)
        self.accounts = AuthAccountRepository(self.session)
        self.sessions = SessionRepository(self.session)
        self.reset_tokens = PasswordResetTokenRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Anything not committed by the use case is discarded
        await self.rollback()

    @storage_call
    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
