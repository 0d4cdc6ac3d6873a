from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import insert, literal, update
from sqlalchemy import select as sa_select
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from access_control.adapter.repositories.base import storage_call
from access_control.app.repositories.invitation_repository import IInvitationRepository
from access_control.domain.entities import Invitation

_INSERT_COLUMNS = (
    "id",
    "tenant_id",
    "invited_by",
    "email",
    "role",
    "token",
    "created_at",
    "expires_at",
)


def _pending(now: datetime):
    return (
        col(Invitation.accepted_at).is_(None),
        col(Invitation.expires_at) > now,
    )


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @storage_call
    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        stmt = select(Invitation).where(Invitation.id == invitation_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @storage_call
    async def get_by_token(self, token: str) -> Optional[Invitation]:
        """Get invitation by token"""
        stmt = select(Invitation).where(Invitation.token == token)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @storage_call
    async def get_pending_by_tenant_and_email(
        self, tenant_id: UUID, email: str, now: datetime
    ) -> Optional[Invitation]:
        """Get the pending invitation for (tenant, email) at `now`"""
        stmt = select(Invitation).where(
            Invitation.tenant_id == tenant_id,
            Invitation.email == email,
            *_pending(now),
        )
        result = await self.session.exec(stmt)
        return result.first()

    @storage_call
    async def list_pending_by_tenant(self, tenant_id: UUID, now: datetime) -> List[Invitation]:
        """Pending invitations for a tenant, newest first"""
        stmt = (
            select(Invitation)
            .where(Invitation.tenant_id == tenant_id, *_pending(now))
            .order_by(col(Invitation.created_at).desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    @storage_call
    async def create_if_no_pending(self, invitation: Invitation, now: datetime) -> bool:
        """
        Insert only if (tenant, email) has no pending invitation.

        A single INSERT ... SELECT ... WHERE NOT EXISTS, so the check and the
        write cannot interleave with another request's insert.
        """
        table = Invitation.__table__
        pending = sa_select(table.c.id).where(
            table.c.tenant_id == invitation.tenant_id,
            table.c.email == invitation.email,
            table.c.accepted_at.is_(None),
            table.c.expires_at > now,
        )
        row = sa_select(
            *[literal(getattr(invitation, name), type_=table.c[name].type) for name in _INSERT_COLUMNS]
        ).where(~pending.exists())

        result = await self.session.execute(insert(table).from_select(list(_INSERT_COLUMNS), row))
        await self.session.flush()
        return result.rowcount == 1

    @storage_call
    async def mark_accepted(self, invitation_id: UUID, now: datetime) -> bool:
        """Set accepted_at only while still pending"""
        stmt = (
            update(Invitation)
            .where(Invitation.id == invitation_id, *_pending(now))
            .values(accepted_at=now)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    @storage_call
    async def expire(self, invitation_id: UUID, tenant_id: UUID, now: datetime) -> bool:
        """Set expires_at to now only while still pending"""
        stmt = (
            update(Invitation)
            .where(
                Invitation.id == invitation_id,
                Invitation.tenant_id == tenant_id,
                *_pending(now),
            )
            .values(expires_at=now)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1
