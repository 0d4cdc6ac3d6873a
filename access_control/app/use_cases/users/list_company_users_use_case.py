from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from access_control.app.errors import bad_request
from access_control.app.services.authorization import check_min_role, check_same_tenant
from access_control.app.services.unit_of_work import UnitOfWork
from access_control.domain.entities import UserRole
from access_control.domain.principal import Principal

from .dtos import MemberListResponse, MemberResponse

MAX_PAGE_SIZE = 100


class ListCompanyUsersUseCase:
    """
    Lists a company's members, newest first.

    Supervisor or above, same company only. `search` matches first name,
    last name or email, case-insensitively.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        tenant_id: UUID,
        search: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> Result[MemberListResponse]:
        if page < 1 or not 1 <= limit <= MAX_PAGE_SIZE:
            return Return.err(
                bad_request(
                    "INVALID_PAGINATION",
                    f"page must be >= 1 and limit between 1 and {MAX_PAGE_SIZE}",
                )
            )

        error = check_same_tenant(principal, tenant_id) or check_min_role(
            principal, UserRole.supervisor
        )
        if error:
            return Return.err(error)

        async with self.uow:
            offset = (page - 1) * limit
            profiles, total = await self.uow.profiles.list_by_tenant(
                tenant_id, search.strip() if search else None, offset, limit
            )

            return Return.ok(
                MemberListResponse(
                    data=[MemberResponse.from_entity(p) for p in profiles],
                    total=total,
                    page=page,
                    limit=limit,
                    has_more=offset + len(profiles) < total,
                )
            )
