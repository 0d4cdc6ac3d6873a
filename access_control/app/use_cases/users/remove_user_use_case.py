"""
Remove User from Company Use Case

Handles removing (soft delete) members from a company.
"""

import logging
from uuid import UUID

from libs.result import Result, Return
from access_control.app.errors import forbidden, not_found
from access_control.app.services.authorization import check_not_self, check_tenant_admin
from access_control.app.services.unit_of_work import UnitOfWork
from access_control.domain.base import utcnow
from access_control.domain.principal import Principal
from access_control.domain.roles import dominates

from .dtos import RemoveUserResponse

logger = logging.getLogger(__name__)


class RemoveUserUseCase:
    """
    Use case for removing members from a company.

    Business Rules:
    - Nobody can remove themselves
    - Only admin/owner of the same company; admins cannot remove owners
    - Soft delete: is_active=False, all sessions revoked
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, tenant_id: UUID, target_user_id: UUID
    ) -> Result[RemoveUserResponse]:
        error = check_not_self(
            principal,
            target_user_id,
            "CANNOT_REMOVE_SELF",
            "Cannot remove yourself from the company",
        ) or check_tenant_admin(principal, tenant_id)
        if error:
            return Return.err(error)

        async with self.uow:
            target = await self.uow.profiles.get_by_id(target_user_id)
            if target is None:
                return Return.err(not_found("USER_NOT_FOUND", "User not found"))

            if target.tenant_id != tenant_id:
                return Return.err(forbidden("TENANT_MISMATCH", "User belongs to another company"))

            if not dominates(principal.role, target.role):
                return Return.err(
                    forbidden("INSUFFICIENT_ROLE", "Cannot remove a member above your own role")
                )

            removed = await self.uow.profiles.update_membership(
                target_user_id, tenant_id, is_active=False
            )
            if not removed:
                return Return.err(not_found("USER_NOT_FOUND", "User not found"))

            revoked = await self.uow.sessions.revoke_all_by_user_id(target_user_id, utcnow())

            await self.uow.commit()

            logger.info(
                f"User {principal.id} removed member {target_user_id} from tenant {tenant_id}, "
                f"{revoked} session(s) revoked"
            )

            return Return.ok(RemoveUserResponse(status="removed"))
