"""
Company Use Case DTOs (Data Transfer Objects)
"""

from typing import Optional

from pydantic import BaseModel

from access_control.domain.entities import Tenant


class UpdateCompanyCommand(BaseModel):
    """Only fields explicitly set are applied; email and logo_url may be cleared"""

    name: Optional[str] = None
    email: Optional[str] = None
    logo_url: Optional[str] = None


class CompanyResponse(BaseModel):
    id: str
    name: str
    slug: str
    domain: Optional[str]
    email: Optional[str]
    logo_url: Optional[str]
    is_active: bool
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, tenant: Tenant) -> "CompanyResponse":
        return cls(
            id=str(tenant.id),
            name=tenant.name,
            slug=tenant.slug,
            domain=tenant.domain,
            email=tenant.email,
            logo_url=tenant.logo_url,
            is_active=tenant.is_active,
            created_at=tenant.created_at.isoformat(),
            updated_at=tenant.updated_at.isoformat(),
        )
