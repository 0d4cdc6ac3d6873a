"""
PasswordResetToken Entity

Single-use tokens behind the forgot-password link.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from access_control.domain.base import utcnow


class PasswordResetToken(SQLModel, table=True):
    """
    PasswordResetToken entity - a pending password reset.

    Business Rules:
    - Only the SHA-256 hash of the token is stored
    - Expires after PASSWORD_RESET_TTL_MINUTES (default 60)
    - Single-use: used_at is set when the password changes
    """

    __tablename__ = "password_reset_tokens"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    account_id: UUID = Field(foreign_key="auth_accounts.id", index=True)
    token_hash: str = Field(unique=True, max_length=64)  # SHA-256 hex digest

    used_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))

    __table_args__ = (Index("idx_password_reset_expires_at", "expires_at"),)

    def is_usable(self, now: datetime) -> bool:
        return self.used_at is None and self.expires_at > now
