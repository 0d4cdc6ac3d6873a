"""
Update Company Use Case

Handles editing company display and contact details.
"""

from uuid import UUID

from libs.result import Result, Return
from access_control.app.errors import bad_request, not_found
from access_control.app.services.authorization import check_tenant_admin
from access_control.app.services.unit_of_work import UnitOfWork
from access_control.domain.base import utcnow
from access_control.domain.principal import Principal

from .dtos import CompanyResponse, UpdateCompanyCommand


class UpdateCompanyUseCase:
    """
    Use case for updating company details.

    Business Rules:
    - Only admin/owner of the same company
    - name cannot be cleared; slug never changes
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, tenant_id: UUID, command: UpdateCompanyCommand
    ) -> Result[CompanyResponse]:
        changes = command.model_dump(exclude_unset=True)
        if "name" in changes and not (changes["name"] or "").strip():
            return Return.err(bad_request("INVALID_COMPANY_NAME", "Company name is required"))

        error = check_tenant_admin(principal, tenant_id)
        if error:
            return Return.err(error)

        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if tenant is None:
                return Return.err(not_found("COMPANY_NOT_FOUND", "Company not found"))

            for field, value in changes.items():
                setattr(tenant, field, value.strip() if field == "name" else value)
            tenant.updated_at = utcnow()

            tenant = await self.uow.tenants.update(tenant)

            await self.uow.commit()

            return Return.ok(CompanyResponse.from_entity(tenant))
