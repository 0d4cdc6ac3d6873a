from typing import Optional
from uuid import UUID

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from access_control.adapter.repositories.base import storage_call
from access_control.app.repositories.auth_account_repository import IAuthAccountRepository
from access_control.domain.entities import AuthAccount


class AuthAccountRepository(IAuthAccountRepository):
    """AuthAccount repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @storage_call
    async def get_by_id(self, account_id: UUID) -> Optional[AuthAccount]:
        """Get account by ID"""
        stmt = select(AuthAccount).where(AuthAccount.id == account_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @storage_call
    async def get_by_email(self, email: str) -> Optional[AuthAccount]:
        """Get account by email address"""
        stmt = select(AuthAccount).where(AuthAccount.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @storage_call
    async def create(self, account: AuthAccount) -> AuthAccount:
        """Create a new account"""
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    @storage_call
    async def update_password_hash(self, account_id: UUID, password_hash: str) -> bool:
        stmt = (
            update(AuthAccount)
            .where(AuthAccount.id == account_id)
            .values(password_hash=password_hash)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1
