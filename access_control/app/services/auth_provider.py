from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class AuthIdentity(BaseModel):
    """Raw identity vouched for by the auth provider"""

    external_id: UUID
    email: str


class IssuedSession(BaseModel):
    """Credential handed to the client after a successful sign-in"""

    identity: AuthIdentity
    credential: str
    expires_at: datetime


class IAuthProvider(ABC):
    """
    Session/auth provider contract.

    Credentials are opaque strings to the rest of the application; only the
    provider knows how to read them.
    """

    @abstractmethod
    async def validate_credential(self, credential: Optional[str]) -> Optional[AuthIdentity]:
        """Return the identity behind a live credential, or None"""
        pass

    @abstractmethod
    async def invalidate(self, credential: Optional[str]) -> None:
        """Sign out: the credential stops authenticating"""
        pass

    @abstractmethod
    async def register(self, email: str, password: str) -> AuthIdentity:
        """Create a login identity. Does not commit."""
        pass

    @abstractmethod
    async def sign_in(self, email: str, password: str) -> Optional[IssuedSession]:
        """Verify a password and open a session. Does not commit."""
        pass

    @abstractmethod
    async def refresh(self, credential: Optional[str]) -> Optional[IssuedSession]:
        """Rotate a live credential: the old one stops authenticating. Does not commit."""
        pass

    @abstractmethod
    async def issue_password_reset(self, email: str) -> Optional[str]:
        """Return a single-use reset token, or None for unknown emails. Does not commit."""
        pass

    @abstractmethod
    async def reset_password(self, token: str, new_password: str) -> Optional[UUID]:
        """Spend a reset token and set the password; returns the account id. Does not commit."""
        pass
