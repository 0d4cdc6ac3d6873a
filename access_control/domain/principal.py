"""
Principal value object and tenant isolation rules.

A Principal is the resolved actor of one request. It is built fresh from the
stored profile on every request and never mutated afterwards.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from access_control.domain.entities import Tenant, UserProfile, UserRole


class TenantSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    slug: str


class Principal(BaseModel):
    """
    Authenticated actor for a single request.

    Only constructible from an active profile that belongs to a company;
    anything else is not a partially valid principal, it is no principal.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID
    email: str
    role: UserRole
    is_active: bool
    tenant_id: UUID
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    avatar_url: Optional[str] = None
    tenant: TenantSummary

    @classmethod
    def from_profile(cls, profile: UserProfile, tenant: Tenant) -> "Principal":
        if not profile.is_active:
            raise ValueError("Principal requires an active profile")
        if profile.tenant_id is None or profile.tenant_id != tenant.id:
            raise ValueError("Principal requires a profile bound to the given tenant")

        return cls(
            id=profile.id,
            email=profile.email,
            role=profile.role,
            is_active=profile.is_active,
            tenant_id=profile.tenant_id,
            first_name=profile.first_name,
            last_name=profile.last_name,
            avatar_url=profile.avatar_url,
            tenant=TenantSummary(id=tenant.id, name=tenant.name, slug=tenant.slug),
        )


def same_tenant(principal: Principal, resource_tenant_id: Optional[UUID]) -> bool:
    """Tenant isolation: authority never crosses company boundaries"""
    return resource_tenant_id is not None and principal.tenant_id == resource_tenant_id
