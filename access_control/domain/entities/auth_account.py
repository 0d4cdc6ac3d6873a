"""
AuthAccount Entity

Login credentials owned by the local auth provider.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from access_control.domain.base import utcnow


class AuthAccount(SQLModel, table=True):
    """
    AuthAccount entity - email and password hash of a login identity.

    Business Rules:
    - Email must be unique across all accounts
    - Password stored as bcrypt hash (cost factor 12)
    - The matching UserProfile shares the same id
    """

    __tablename__ = "auth_accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
