"""
Update User Role Use Case

Handles changing a member's role or active flag within a company.
"""

import logging
from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from access_control.app.errors import bad_request, forbidden, not_found
from access_control.app.services.authorization import check_not_self, check_tenant_admin
from access_control.app.services.unit_of_work import UnitOfWork
from access_control.domain.base import utcnow
from access_control.domain.principal import Principal
from access_control.domain.roles import dominates, is_assignable, parse_role, role_choices

from .dtos import MemberResponse, UpdateUserRoleResponse

logger = logging.getLogger(__name__)


class UpdateUserRoleUseCase:
    """
    Use case for changing a member's role or active flag.

    Business Rules:
    - Input is validated before any lookup; owner is not assignable
    - Nobody can modify their own role, owners included
    - Only admin/owner of the same company
    - Target must belong to that company
    - The actor must dominate both the target's current role and the new role
    - Deactivating a member revokes their sessions
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        tenant_id: UUID,
        target_user_id: UUID,
        role: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> Result[UpdateUserRoleResponse]:
        """
        Execute update user role use case.

        Args:
            principal: Acting principal
            tenant_id: Company of the target member
            target_user_id: Member being changed
            role: New role (admin/supervisor/operator), optional
            is_active: New active flag, optional

        Returns:
            Result with UpdateUserRoleResponse DTO, or Error
        """
        if role is None and is_active is None:
            return Return.err(bad_request("NO_CHANGES", "Provide role or is_active"))

        new_role = None
        if role is not None:
            new_role = parse_role(role)
            if new_role is None or not is_assignable(new_role):
                return Return.err(
                    bad_request(
                        "INVALID_ROLE",
                        f"Invalid role: {role}. Must be one of: {role_choices()}",
                    )
                )

        error = check_not_self(
            principal, target_user_id, "CANNOT_MODIFY_OWN_ROLE", "Cannot modify your own role"
        ) or check_tenant_admin(principal, tenant_id)
        if error:
            return Return.err(error)

        async with self.uow:
            target = await self.uow.profiles.get_by_id(target_user_id)
            if target is None:
                return Return.err(not_found("USER_NOT_FOUND", "User not found"))

            if target.tenant_id != tenant_id:
                return Return.err(forbidden("TENANT_MISMATCH", "User belongs to another company"))

            if not dominates(principal.role, target.role) or (
                new_role is not None and not dominates(principal.role, new_role)
            ):
                return Return.err(
                    forbidden("INSUFFICIENT_ROLE", "Cannot manage a role above your own")
                )

            old_role = target.role
            updated = await self.uow.profiles.update_membership(
                target_user_id, tenant_id, role=new_role, is_active=is_active
            )
            if not updated:
                return Return.err(not_found("USER_NOT_FOUND", "User not found"))

            if is_active is False:
                await self.uow.sessions.revoke_all_by_user_id(target_user_id, utcnow())

            await self.uow.commit()

            logger.info(
                f"User {principal.id} updated member {target_user_id} in tenant {tenant_id}: "
                f"role {old_role.value} -> {(new_role or old_role).value}, is_active={is_active}"
            )

            member = MemberResponse.from_entity(target).model_copy(
                update={
                    "role": (new_role or old_role).value,
                    "is_active": target.is_active if is_active is None else is_active,
                }
            )
            return Return.ok(UpdateUserRoleResponse(status="updated", member=member))
