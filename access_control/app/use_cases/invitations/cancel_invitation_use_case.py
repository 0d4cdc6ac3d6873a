"""
Cancel Invitation Use Case

Soft-expires a pending invitation.
"""

from uuid import UUID

from libs.result import Result, Return
from access_control.app.errors import forbidden, not_found
from access_control.app.services.authorization import check_tenant_admin
from access_control.app.services.unit_of_work import UnitOfWork
from access_control.domain.base import utcnow
from access_control.domain.principal import Principal

from .dtos import CancelInvitationResponse


class CancelInvitationUseCase:
    """
    Use case for cancelling invitations.

    Business Rules:
    - Only admin/owner of the invitation's company can cancel
    - Another company's invitation is forbidden, not "not found"
    - Sets expires_at to now; the row is kept
    - Idempotent: expired or accepted invitations are left as they are
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, tenant_id: UUID, invitation_id: UUID
    ) -> Result[CancelInvitationResponse]:
        error = check_tenant_admin(principal, tenant_id)
        if error:
            return Return.err(error)

        async with self.uow:
            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if invitation is None:
                return Return.err(not_found("INVITATION_NOT_FOUND", "Invitation not found"))

            if invitation.tenant_id != tenant_id:
                return Return.err(
                    forbidden("TENANT_MISMATCH", "Invitation belongs to another company")
                )

            if await self.uow.invitations.expire(invitation.id, tenant_id, utcnow()):
                await self.uow.commit()

            return Return.ok(
                CancelInvitationResponse(status="cancelled", invitation_id=str(invitation.id))
            )
