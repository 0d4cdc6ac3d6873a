"""
Reset Password Use Case

Sets a new password from a reset token.
"""

import logging

from libs.result import Result, Return
from access_control.app.errors import bad_request
from access_control.app.services.auth_provider import IAuthProvider
from access_control.app.services.unit_of_work import UnitOfWork
from access_control.domain.base import utcnow

from .dtos import PasswordResetResponse

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


class ResetPasswordUseCase:
    """
    Use case for confirming a password reset.

    Business Rules:
    - New password must be at least 8 characters
    - Token must be unused and unexpired; it is spent by a conditional update
    - Unknown, expired and used tokens are indistinguishable
    - All of the account's sessions are revoked
    """

    def __init__(self, uow: UnitOfWork, auth_provider: IAuthProvider):
        self.uow = uow
        self.auth_provider = auth_provider

    async def execute(self, token: str, new_password: str) -> Result[PasswordResetResponse]:
        if len(new_password or "") < MIN_PASSWORD_LENGTH:
            return Return.err(
                bad_request(
                    "INVALID_PASSWORD",
                    f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
                )
            )

        async with self.uow:
            account_id = await self.auth_provider.reset_password(token, new_password)
            if account_id is None:
                return Return.err(
                    bad_request("INVALID_RESET_TOKEN", "Invalid or expired password reset token")
                )

            revoked = await self.uow.sessions.revoke_all_by_user_id(account_id, utcnow())

            await self.uow.commit()

            logger.info(f"Password reset for user {account_id}, {revoked} session(s) revoked")

            return Return.ok(
                PasswordResetResponse(
                    status="success",
                    message="Password has been reset successfully",
                    sessions_revoked=revoked,
                )
            )
