from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from access_control.domain.entities import AuthAccount


class IAuthAccountRepository(ABC):
    """AuthAccount repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, account_id: UUID) -> Optional[AuthAccount]:
        """Get account by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[AuthAccount]:
        """Get account by email address"""
        pass

    @abstractmethod
    async def create(self, account: AuthAccount) -> AuthAccount:
        """Create a new account"""
        pass

    @abstractmethod
    async def update_password_hash(self, account_id: UUID, password_hash: str) -> bool:
        """Replace the stored hash. Returns False if no row matched."""
        pass
