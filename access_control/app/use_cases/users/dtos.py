"""
User Use Case DTOs (Data Transfer Objects)

Command and Response classes for member and profile management.
"""

from typing import List, Optional

from pydantic import BaseModel

from access_control.domain.entities import UserProfile


class MemberResponse(BaseModel):
    """A company member as listed to supervisors and admins"""

    id: str
    email: str
    first_name: Optional[str]
    last_name: Optional[str]
    role: str
    is_active: bool
    last_login_at: Optional[str]
    created_at: str

    @classmethod
    def from_entity(cls, profile: UserProfile) -> "MemberResponse":
        return cls(
            id=str(profile.id),
            email=profile.email,
            first_name=profile.first_name,
            last_name=profile.last_name,
            role=profile.role.value,
            is_active=profile.is_active,
            last_login_at=profile.last_login_at.isoformat() if profile.last_login_at else None,
            created_at=profile.created_at.isoformat(),
        )


class MemberListResponse(BaseModel):
    data: List[MemberResponse]
    total: int
    page: int
    limit: int
    has_more: bool


class UpdateUserRoleResponse(BaseModel):
    status: str
    member: MemberResponse


class RemoveUserResponse(BaseModel):
    status: str


class UpdateProfileCommand(BaseModel):
    """
    Self-service profile changes.

    Only fields explicitly set are applied; avatar_url may be set to None.
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    avatar_url: Optional[str] = None


class ProfileResponse(BaseModel):
    id: str
    email: str
    first_name: Optional[str]
    last_name: Optional[str]
    avatar_url: Optional[str]
    role: str
    tenant_id: Optional[str]
    is_active: bool

    @classmethod
    def from_entity(cls, profile: UserProfile) -> "ProfileResponse":
        return cls(
            id=str(profile.id),
            email=profile.email,
            first_name=profile.first_name,
            last_name=profile.last_name,
            avatar_url=profile.avatar_url,
            role=profile.role.value,
            tenant_id=str(profile.tenant_id) if profile.tenant_id else None,
            is_active=profile.is_active,
        )
