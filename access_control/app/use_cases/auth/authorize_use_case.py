"""
Authorize Use Case

Resolves the Principal and enforces an optional minimum role.
"""

import logging
from typing import Optional

from libs.result import Result, Return
from access_control.app.services.auth_provider import IAuthProvider
from access_control.app.services.authorization import check_min_role
from access_control.app.services.unit_of_work import UnitOfWork
from access_control.domain.entities import UserRole
from access_control.domain.principal import Principal

from .resolve_principal_use_case import ResolvePrincipalUseCase

logger = logging.getLogger(__name__)


class AuthorizeUseCase:
    """
    Authorization gate.

    Unknown callers get NOT_AUTHENTICATED, known callers below min_role get
    INSUFFICIENT_ROLE. Runs before any handler logic.
    """

    def __init__(self, uow: UnitOfWork, auth_provider: IAuthProvider):
        self.resolver = ResolvePrincipalUseCase(uow, auth_provider)

    async def execute(
        self, credential: Optional[str], min_role: Optional[UserRole] = None
    ) -> Result[Principal]:
        result = await self.resolver.execute(credential)
        if result.is_err() or min_role is None:
            return result

        principal = result.value
        error = check_min_role(principal, min_role)
        if error:
            logger.info(
                f"User {principal.id} with role {principal.role.value} "
                f"denied, requires {min_role.value}"
            )
            return Return.err(error)

        return result
