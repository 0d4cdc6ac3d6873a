from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from access_control.domain.entities import Invitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[Invitation]:
        """Get invitation by token"""
        pass

    @abstractmethod
    async def get_pending_by_tenant_and_email(
        self, tenant_id: UUID, email: str, now: datetime
    ) -> Optional[Invitation]:
        """Get the pending invitation for (tenant, email) at `now`"""
        pass

    @abstractmethod
    async def list_pending_by_tenant(self, tenant_id: UUID, now: datetime) -> List[Invitation]:
        """Pending invitations for a tenant, newest first"""
        pass

    @abstractmethod
    async def create_if_no_pending(self, invitation: Invitation, now: datetime) -> bool:
        """Insert only if (tenant, email) has no pending invitation. Returns False otherwise."""
        pass

    @abstractmethod
    async def mark_accepted(self, invitation_id: UUID, now: datetime) -> bool:
        """Set accepted_at only while still pending. Returns False if no row matched."""
        pass

    @abstractmethod
    async def expire(self, invitation_id: UUID, tenant_id: UUID, now: datetime) -> bool:
        """Set expires_at to now only while still pending. Returns False if no row matched."""
        pass
