"""
Invitation Entity

Time-bounded, single-use offer for an email address to join a company.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from access_control.domain.base import utcnow

from .enums import InvitationState, UserRole


class Invitation(SQLModel, table=True):
    """
    Invitation entity - pending offer to join a tenant at a given role.

    Business Rules:
    - Created by admin/owner, expires after a fixed TTL
    - Token is unguessable and unique
    - At most one pending invitation per (tenant_id, email)
    - accepted_at is set once and never cleared
    - Cancelling sets expires_at to now; rows are never deleted
    """

    __tablename__ = "invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)
    invited_by: UUID = Field(foreign_key="user_profiles.id", nullable=False)
    email: str = Field(max_length=255, nullable=False, index=True)

    role: UserRole = Field(nullable=False)
    token: str = Field(unique=True, index=True, max_length=64)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    accepted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_invitation_expires_at", "expires_at"),
        Index("idx_invitation_tenant_email", "tenant_id", "email"),
    )

    def state_at(self, now: datetime) -> InvitationState:
        if self.accepted_at is not None:
            return InvitationState.accepted
        if self.expires_at <= now:
            return InvitationState.expired
        return InvitationState.pending

    def is_pending(self, now: datetime) -> bool:
        return self.state_at(now) == InvitationState.pending
