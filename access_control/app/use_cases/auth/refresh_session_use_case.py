"""
Refresh Session Use Case

Rotates the caller's session credential.
"""

import logging
from typing import Optional

from libs.result import Result, Return
from access_control.app.errors import unauthenticated
from access_control.app.services.auth_provider import IAuthProvider
from access_control.app.services.unit_of_work import UnitOfWork

from .dtos import SignInResponse

logger = logging.getLogger(__name__)


def session_invalid():
    return unauthenticated("SESSION_INVALID", "Session is invalid or has expired")


class RefreshSessionUseCase:
    """
    Use case for refreshing a session.

    Business Rules:
    - Session rotation: the old credential is revoked, a new one issued
    - The credential must still be live (not revoked, not expired)
    - The profile behind it must still be active
    """

    def __init__(self, uow: UnitOfWork, auth_provider: IAuthProvider):
        self.uow = uow
        self.auth_provider = auth_provider

    async def execute(self, credential: Optional[str]) -> Result[SignInResponse]:
        async with self.uow:
            identity = await self.auth_provider.validate_credential(credential)
            if identity is None:
                return Return.err(session_invalid())

            profile = await self.uow.profiles.get_by_id(identity.external_id)
            if profile is None or not profile.is_active:
                return Return.err(session_invalid())

            issued = await self.auth_provider.refresh(credential)
            if issued is None:
                return Return.err(session_invalid())

            await self.uow.commit()

            logger.info(f"Session refreshed for user {identity.external_id}")

            return Return.ok(
                SignInResponse(
                    access_token=issued.credential,
                    expires_at=issued.expires_at.isoformat(),
                    user_id=str(issued.identity.external_id),
                )
            )
