"""
Authorization gate for routes.

Each dependency resolves the Principal and checks the minimum role before
the route body runs; a failure short-circuits the request.
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from config import ApplicationConfig
from access_control.api.error import raise_for_error
from access_control.app.services.auth_provider import IAuthProvider
from access_control.app.services.unit_of_work import UnitOfWork
from access_control.app.use_cases.auth import AuthorizeUseCase
from access_control.depends import get_auth_provider, get_unit_of_work
from access_control.domain.entities import UserRole
from access_control.domain.principal import Principal

bearer = HTTPBearer(auto_error=False)


async def get_credential(
    request: Request,
    authorization: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
) -> Optional[str]:
    """Bearer header first, then the session cookie. Passed on untouched."""
    if authorization is not None:
        return authorization.credentials
    return request.cookies.get(ApplicationConfig.SESSION_COOKIE_NAME)


def require_role(min_role: Optional[UserRole] = None):
    async def authorize(
        credential: Optional[str] = Depends(get_credential),
        uow: UnitOfWork = Depends(get_unit_of_work),
        auth_provider: IAuthProvider = Depends(get_auth_provider),
    ) -> Principal:
        result = await AuthorizeUseCase(uow, auth_provider).execute(credential, min_role)
        if result.is_err():
            raise_for_error(result.error)
        return result.value

    return authorize


authorize_any = require_role()
authorize_supervisor = require_role(UserRole.supervisor)
authorize_admin = require_role(UserRole.admin)
