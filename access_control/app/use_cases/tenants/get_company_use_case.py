from uuid import UUID

from libs.result import Result, Return
from access_control.app.errors import not_found
from access_control.app.services.authorization import check_same_tenant
from access_control.app.services.unit_of_work import UnitOfWork
from access_control.domain.principal import Principal

from .dtos import CompanyResponse


class GetCompanyUseCase:
    """Any member may view their own company"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal, tenant_id: UUID) -> Result[CompanyResponse]:
        error = check_same_tenant(principal, tenant_id)
        if error:
            return Return.err(error)

        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if tenant is None:
                return Return.err(not_found("COMPANY_NOT_FOUND", "Company not found"))

            return Return.ok(CompanyResponse.from_entity(tenant))
