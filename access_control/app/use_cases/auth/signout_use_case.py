from typing import Optional

from libs.result import Result, Return
from access_control.app.services.auth_provider import IAuthProvider
from access_control.app.services.unit_of_work import UnitOfWork

from .dtos import SignOutResponse


class SignOutUseCase:
    """Invalidates the caller's credential. Unknown credentials are a no-op."""

    def __init__(self, uow: UnitOfWork, auth_provider: IAuthProvider):
        self.uow = uow
        self.auth_provider = auth_provider

    async def execute(self, credential: Optional[str]) -> Result[SignOutResponse]:
        async with self.uow:
            await self.auth_provider.invalidate(credential)
            await self.uow.commit()

        return Return.ok(SignOutResponse(status="signed_out"))
