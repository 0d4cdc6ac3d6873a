"""
Resolve Principal Use Case

Turns an opaque session credential into the Principal for one request.
"""

import logging
from typing import Optional

from libs.result import Result, Return
from access_control.app.errors import bad_request, forbidden, unauthenticated
from access_control.app.services.auth_provider import IAuthProvider
from access_control.app.services.unit_of_work import UnitOfWork
from access_control.domain.principal import Principal

logger = logging.getLogger(__name__)


def _not_authenticated():
    return unauthenticated("NOT_AUTHENTICATED", "Authentication required")


class ResolvePrincipalUseCase:
    """
    Use case for resolving the acting Principal.

    Business Rules:
    - The auth provider must vouch for the credential
    - Missing, inactive and company-less profiles are all NOT_AUTHENTICATED
      to the caller; the log line records which one it was
    - A profile pointing at a missing company is a data fault (bad request)
    - Deactivated companies are forbidden
    - Nothing is cached; every request resolves again
    """

    def __init__(self, uow: UnitOfWork, auth_provider: IAuthProvider):
        self.uow = uow
        self.auth_provider = auth_provider

    async def execute(self, credential: Optional[str]) -> Result[Principal]:
        """
        Execute resolve principal use case.

        Args:
            credential: Opaque credential taken from the request, if any

        Returns:
            Result with the Principal, or Error
        """
        if not credential:
            return Return.err(_not_authenticated())

        async with self.uow:
            identity = await self.auth_provider.validate_credential(credential)
            if identity is None:
                logger.info("Principal rejected: credential_invalid")
                return Return.err(_not_authenticated())

            profile = await self.uow.profiles.get_by_id(identity.external_id)

            reason = None
            if profile is None:
                reason = "profile_missing"
            elif not profile.is_active:
                reason = "profile_inactive"
            elif profile.tenant_id is None:
                reason = "profile_without_tenant"

            if reason is not None:
                logger.info(f"Principal rejected for user {identity.external_id}: {reason}")
                return Return.err(_not_authenticated())

            tenant = await self.uow.tenants.get_by_id(profile.tenant_id)
            if tenant is None:
                logger.error(
                    f"Profile {profile.id} references missing tenant {profile.tenant_id}"
                )
                return Return.err(
                    bad_request("TENANT_NOT_FOUND", "User must belong to a company")
                )

            if not tenant.is_active:
                logger.info(f"Principal rejected for user {profile.id}: tenant_inactive")
                return Return.err(forbidden("COMPANY_INACTIVE", "Company has been deactivated"))

            return Return.ok(Principal.from_profile(profile, tenant))
