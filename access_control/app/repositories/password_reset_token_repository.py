from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from access_control.domain.entities import PasswordResetToken


class IPasswordResetTokenRepository(ABC):
    """PasswordResetToken repository interface - application layer"""

    @abstractmethod
    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        """Create a new reset token"""
        pass

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[PasswordResetToken]:
        """Get reset token by the hash of its plain value"""
        pass

    @abstractmethod
    async def mark_used(self, token_id: UUID, now: datetime) -> bool:
        """Set used_at only while unused and unexpired. Returns False if no row matched."""
        pass
