"""
Tenant Entity

Represents a customer company; every tenant-scoped record carries its id.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from access_control.domain.base import utcnow


class Tenant(SQLModel, table=True):
    """
    Tenant entity - an isolated customer company.

    Business Rules:
    - slug is globally unique and URL-safe
    - Never hard-deleted: is_active=False deactivates the company
    """

    __tablename__ = "tenants"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100)
    slug: str = Field(unique=True, index=True, max_length=120)

    # Contact and display metadata
    domain: Optional[str] = Field(default=None, max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    logo_url: Optional[str] = Field(default=None, max_length=2048)

    is_active: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_tenant_is_active", "is_active"),)
