"""
Authorization checks shared by the use cases.

Each helper returns None when the check passes, or the AppError the use
case should return. Role rank comes from access_control.domain.roles only.
"""

from typing import Optional
from uuid import UUID

from access_control.app.errors import AppError, bad_request, forbidden
from access_control.domain.entities import UserRole
from access_control.domain.principal import Principal, same_tenant
from access_control.domain.roles import dominates


def check_min_role(principal: Principal, min_role: UserRole) -> Optional[AppError]:
    if not dominates(principal.role, min_role):
        return forbidden(
            "INSUFFICIENT_ROLE", f"Requires {min_role.value} role or higher"
        )
    return None


def check_same_tenant(principal: Principal, tenant_id: Optional[UUID]) -> Optional[AppError]:
    if not same_tenant(principal, tenant_id):
        return forbidden("TENANT_MISMATCH", "Access denied to company resources")
    return None


def check_not_self(
    principal: Principal, target_user_id: UUID, code: str, message: str
) -> Optional[AppError]:
    if principal.id == target_user_id:
        return bad_request(code, message)
    return None


def check_tenant_admin(principal: Principal, tenant_id: UUID) -> Optional[AppError]:
    """admin-or-above on the given tenant"""
    return check_same_tenant(principal, tenant_id) or check_min_role(
        principal, UserRole.admin
    )
