from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from access_control.domain.entities import UserProfile, UserRole


class IUserProfileRepository(ABC):
    """UserProfile repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[UserProfile]:
        """Get profile by ID"""
        pass

    @abstractmethod
    async def get_by_email_and_tenant(
        self, email: str, tenant_id: UUID
    ) -> Optional[UserProfile]:
        """Get profile with this email inside a tenant, active or not"""
        pass

    @abstractmethod
    async def count_active_by_tenant(
        self, tenant_id: UUID, exclude_user_id: Optional[UUID] = None
    ) -> int:
        """Number of active profiles in a tenant, optionally excluding one user"""
        pass

    @abstractmethod
    async def list_by_tenant(
        self, tenant_id: UUID, search: Optional[str], offset: int, limit: int
    ) -> Tuple[List[UserProfile], int]:
        """Page of a tenant's profiles (newest first) and the total match count"""
        pass

    @abstractmethod
    async def create(self, profile: UserProfile) -> UserProfile:
        """Create a new profile"""
        pass

    @abstractmethod
    async def update(self, profile: UserProfile) -> UserProfile:
        """Update existing profile"""
        pass

    @abstractmethod
    async def assign_tenant(self, user_id: UUID, tenant_id: UUID, role: UserRole) -> bool:
        """Move a profile into a tenant with a role. Returns False if no row matched."""
        pass

    @abstractmethod
    async def update_membership(
        self,
        user_id: UUID,
        tenant_id: UUID,
        role: Optional[UserRole] = None,
        is_active: Optional[bool] = None,
    ) -> bool:
        """Conditional update scoped to tenant_id. Returns False if no row matched."""
        pass

    @abstractmethod
    async def touch_last_login(self, user_id: UUID, at: datetime) -> None:
        """Stamp last_login_at"""
        pass
