"""
Sign-in Use Case

Opens a session through the auth provider.
"""

from libs.result import Result, Return
from access_control.app.errors import unauthenticated
from access_control.app.services.auth_provider import IAuthProvider
from access_control.app.services.unit_of_work import UnitOfWork
from access_control.domain.base import utcnow

from .dtos import SignInResponse


class SignInUseCase:
    """
    Use case for signing in.

    Business Rules:
    - Wrong email and wrong password are indistinguishable
    - Updates profile.last_login_at
    """

    def __init__(self, uow: UnitOfWork, auth_provider: IAuthProvider):
        self.uow = uow
        self.auth_provider = auth_provider

    async def execute(self, email: str, password: str) -> Result[SignInResponse]:
        async with self.uow:
            issued = await self.auth_provider.sign_in(email.strip().lower(), password)
            if issued is None:
                return Return.err(
                    unauthenticated("INVALID_CREDENTIALS", "Invalid email or password")
                )

            await self.uow.profiles.touch_last_login(issued.identity.external_id, utcnow())

            await self.uow.commit()

            return Return.ok(
                SignInResponse(
                    access_token=issued.credential,
                    expires_at=issued.expires_at.isoformat(),
                    user_id=str(issued.identity.external_id),
                )
            )
