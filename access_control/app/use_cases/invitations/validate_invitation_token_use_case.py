from libs.result import Result, Return
from access_control.app.errors import bad_request, not_found
from access_control.app.services.unit_of_work import UnitOfWork
from access_control.domain.base import utcnow

from .dtos import CompanyPreview, InvitationPreview


def invitation_not_found():
    return not_found("INVITATION_NOT_FOUND", "Invalid or expired invitation")


class ValidateInvitationTokenUseCase:
    """
    Unauthenticated token lookup.

    Expired, accepted and unknown tokens all return the same NOT_FOUND so
    probing reveals nothing about an invitation's lifecycle.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[InvitationPreview]:
        if not token:
            return Return.err(bad_request("TOKEN_REQUIRED", "Invitation token is required"))

        async with self.uow:
            invitation = await self.uow.invitations.get_by_token(token)
            if invitation is None or not invitation.is_pending(utcnow()):
                return Return.err(invitation_not_found())

            tenant = await self.uow.tenants.get_by_id(invitation.tenant_id)
            if tenant is None or not tenant.is_active:
                return Return.err(invitation_not_found())

            return Return.ok(
                InvitationPreview(
                    email=invitation.email,
                    role=invitation.role.value,
                    company=CompanyPreview(id=str(tenant.id), name=tenant.name, slug=tenant.slug),
                    expires_at=invitation.expires_at.isoformat(),
                )
            )
