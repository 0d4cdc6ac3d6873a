from uuid import UUID

from libs.result import Result, Return
from access_control.app.services.authorization import check_tenant_admin
from access_control.app.services.unit_of_work import UnitOfWork
from access_control.domain.base import utcnow
from access_control.domain.principal import Principal

from .dtos import InvitationResponse, PendingInvitationsResponse


class ListPendingInvitationsUseCase:
    """Pending invitations of a company, newest first. Admin/owner only."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, tenant_id: UUID
    ) -> Result[PendingInvitationsResponse]:
        error = check_tenant_admin(principal, tenant_id)
        if error:
            return Return.err(error)

        async with self.uow:
            now = utcnow()
            invitations = await self.uow.invitations.list_pending_by_tenant(tenant_id, now)

            return Return.ok(
                PendingInvitationsResponse(
                    data=[InvitationResponse.from_entity(inv, now) for inv in invitations]
                )
            )
