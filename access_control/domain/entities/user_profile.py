"""
UserProfile Entity

Durable record backing a Principal. Its id equals the auth account id.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from access_control.domain.base import utcnow

from .enums import UserRole


class UserProfile(SQLModel, table=True):
    """
    UserProfile entity - a person's role and company membership.

    Business Rules:
    - A profile belongs to at most one company (tenant_id)
    - Removal is a soft delete: is_active=False
    - Only active profiles with a company resolve to a Principal
    """

    __tablename__ = "user_profiles"

    id: UUID = Field(primary_key=True)
    email: str = Field(index=True, max_length=255)

    first_name: Optional[str] = Field(default=None, max_length=50)
    last_name: Optional[str] = Field(default=None, max_length=50)
    avatar_url: Optional[str] = Field(default=None, max_length=2048)

    role: UserRole = Field(default=UserRole.operator)
    tenant_id: Optional[UUID] = Field(default=None, foreign_key="tenants.id", index=True)
    is_active: bool = Field(default=True)

    # Timestamps
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_profile_tenant_email", "tenant_id", "email"),
        Index("idx_profile_is_active", "is_active"),
    )
