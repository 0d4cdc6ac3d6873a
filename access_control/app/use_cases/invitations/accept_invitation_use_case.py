"""
Accept Invitation Use Case

Moves the acting user into the inviting company with the invited role.
"""

import logging

from libs.result import Result, Return
from access_control.app.errors import bad_request, conflict, forbidden, not_found
from access_control.app.services.unit_of_work import UnitOfWork
from access_control.domain.base import utcnow
from access_control.domain.entities import UserRole
from access_control.domain.principal import Principal

from .dtos import AcceptInvitationResponse, CompanyPreview
from .validate_invitation_token_use_case import invitation_not_found

logger = logging.getLogger(__name__)


class AcceptInvitationUseCase:
    """
    Use case for accepting invitations.

    Business Rules:
    - Pending state is checked at the instant of the call
    - Only the invited email can accept
    - An owner cannot leave a company that still has other active members,
      since ownership is never handed out again
    - accepted_at and the profile's tenant/role change commit together;
      the accept itself is a conditional update, so a token that expired
      or was accepted concurrently leaves the profile untouched
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal, token: str) -> Result[AcceptInvitationResponse]:
        """
        Execute accept invitation use case.

        Args:
            principal: The user being onboarded
            token: Invitation token

        Returns:
            Result with AcceptInvitationResponse DTO, or Error
        """
        if not token:
            return Return.err(bad_request("TOKEN_REQUIRED", "Invitation token is required"))

        async with self.uow:
            now = utcnow()
            invitation = await self.uow.invitations.get_by_token(token)
            if invitation is None or not invitation.is_pending(now):
                return Return.err(invitation_not_found())

            if invitation.email.lower() != principal.email.lower():
                return Return.err(
                    forbidden(
                        "INVITATION_EMAIL_MISMATCH",
                        "Invitation was issued to a different email address",
                    )
                )

            tenant = await self.uow.tenants.get_by_id(invitation.tenant_id)
            if tenant is None or not tenant.is_active:
                return Return.err(invitation_not_found())

            if principal.role == UserRole.owner and principal.tenant_id != invitation.tenant_id:
                others = await self.uow.profiles.count_active_by_tenant(
                    principal.tenant_id, exclude_user_id=principal.id
                )
                if others:
                    return Return.err(
                        conflict(
                            "OWNER_HAS_MEMBERS",
                            "Owner cannot leave a company that still has active members",
                        )
                    )

            if not await self.uow.invitations.mark_accepted(invitation.id, now):
                logger.info(f"Invitation {invitation.id} stopped being pending before accept")
                return Return.err(invitation_not_found())

            moved = await self.uow.profiles.assign_tenant(
                principal.id, invitation.tenant_id, invitation.role
            )
            if not moved:
                return Return.err(not_found("USER_NOT_FOUND", "User profile not found"))

            await self.uow.commit()

            logger.info(
                f"User {principal.id} joined tenant {tenant.id} as {invitation.role.value}"
            )

            return Return.ok(
                AcceptInvitationResponse(
                    invitation_id=str(invitation.id),
                    company=CompanyPreview(id=str(tenant.id), name=tenant.name, slug=tenant.slug),
                    role=invitation.role.value,
                    accepted_at=now.isoformat(),
                )
            )
