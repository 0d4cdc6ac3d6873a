from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from access_control.domain.entities import Session


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, session_id: UUID) -> Optional[Session]:
        """Get session by ID"""
        pass

    @abstractmethod
    async def create(self, session: Session) -> Session:
        """Create a new session"""
        pass

    @abstractmethod
    async def revoke_by_id(self, session_id: UUID, now: datetime) -> bool:
        """Revoke a specific session. Returns True if it was active."""
        pass

    @abstractmethod
    async def revoke_all_by_user_id(self, user_id: UUID, now: datetime) -> int:
        """Revoke all active sessions for a user. Returns count of revoked sessions."""
        pass
