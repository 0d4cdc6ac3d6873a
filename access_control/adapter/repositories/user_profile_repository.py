from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func, or_, update
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from access_control.adapter.repositories.base import storage_call
from access_control.app.repositories.user_profile_repository import IUserProfileRepository
from access_control.domain.base import utcnow
from access_control.domain.entities import UserProfile, UserRole


class UserProfileRepository(IUserProfileRepository):
    """UserProfile repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @storage_call
    async def get_by_id(self, user_id: UUID) -> Optional[UserProfile]:
        """Get profile by ID"""
        stmt = select(UserProfile).where(UserProfile.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @storage_call
    async def get_by_email_and_tenant(
        self, email: str, tenant_id: UUID
    ) -> Optional[UserProfile]:
        """Get profile with this email inside a tenant, active or not"""
        stmt = select(UserProfile).where(
            func.lower(UserProfile.email) == email.lower(),
            UserProfile.tenant_id == tenant_id,
        )
        result = await self.session.exec(stmt)
        return result.first()

    @storage_call
    async def count_active_by_tenant(
        self, tenant_id: UUID, exclude_user_id: Optional[UUID] = None
    ) -> int:
        """Number of active profiles in a tenant"""
        conditions = [
            UserProfile.tenant_id == tenant_id,
            UserProfile.is_active == True,  # noqa: E712
        ]
        if exclude_user_id is not None:
            conditions.append(UserProfile.id != exclude_user_id)

        stmt = select(func.count()).select_from(UserProfile).where(*conditions)
        return (await self.session.exec(stmt)).one()

    @storage_call
    async def list_by_tenant(
        self, tenant_id: UUID, search: Optional[str], offset: int, limit: int
    ) -> Tuple[List[UserProfile], int]:
        """Page of a tenant's profiles (newest first) and the total match count"""
        conditions = [UserProfile.tenant_id == tenant_id]
        if search:
            pattern = f"%{search}%"
            conditions.append(
                or_(
                    col(UserProfile.first_name).ilike(pattern),
                    col(UserProfile.last_name).ilike(pattern),
                    col(UserProfile.email).ilike(pattern),
                )
            )

        count_stmt = select(func.count()).select_from(UserProfile).where(*conditions)
        total = (await self.session.exec(count_stmt)).one()

        stmt = (
            select(UserProfile)
            .where(*conditions)
            .order_by(col(UserProfile.created_at).desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all()), total

    @storage_call
    async def create(self, profile: UserProfile) -> UserProfile:
        """Create a new profile"""
        self.session.add(profile)
        await self.session.flush()
        await self.session.refresh(profile)
        return profile

    @storage_call
    async def update(self, profile: UserProfile) -> UserProfile:
        """Update existing profile"""
        self.session.add(profile)
        await self.session.flush()
        await self.session.refresh(profile)
        return profile

    @storage_call
    async def assign_tenant(self, user_id: UUID, tenant_id: UUID, role: UserRole) -> bool:
        """Move a profile into a tenant with a role"""
        stmt = (
            update(UserProfile)
            .where(UserProfile.id == user_id)
            .values(tenant_id=tenant_id, role=role, updated_at=utcnow())
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    @storage_call
    async def update_membership(
        self,
        user_id: UUID,
        tenant_id: UUID,
        role: Optional[UserRole] = None,
        is_active: Optional[bool] = None,
    ) -> bool:
        """Conditional update scoped to tenant_id"""
        values = {"updated_at": utcnow()}
        if role is not None:
            values["role"] = role
        if is_active is not None:
            values["is_active"] = is_active

        stmt = (
            update(UserProfile)
            .where(UserProfile.id == user_id, UserProfile.tenant_id == tenant_id)
            .values(**values)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    @storage_call
    async def touch_last_login(self, user_id: UUID, at: datetime) -> None:
        """Stamp last_login_at"""
        stmt = (
            update(UserProfile)
            .where(UserProfile.id == user_id)
            .values(last_login_at=at)
            .execution_options(synchronize_session="fetch")
        )
        await self.session.execute(stmt)
        await self.session.flush()
