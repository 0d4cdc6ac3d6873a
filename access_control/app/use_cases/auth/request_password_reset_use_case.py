"""
Request Password Reset Use Case

Issues a reset token and sends the reset link.
"""

import logging

from libs.result import Result, Return
from access_control.app.services.auth_provider import IAuthProvider
from access_control.app.services.notification_sender import INotificationSender
from access_control.app.services.unit_of_work import UnitOfWork

from .dtos import PasswordResetRequestedResponse

logger = logging.getLogger(__name__)

RESET_REQUESTED_MESSAGE = "If the email exists, a password reset link has been sent"


class RequestPasswordResetUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - No email enumeration: the response is the same for unknown emails
    - The token is committed before the link is sent
    - Delivery failures are logged only, so they do not reveal the account
    """

    def __init__(
        self,
        uow: UnitOfWork,
        auth_provider: IAuthProvider,
        notifier: INotificationSender,
        reset_url_base: str,
    ):
        self.uow = uow
        self.auth_provider = auth_provider
        self.notifier = notifier
        self.reset_url_base = reset_url_base

    async def execute(self, email: str) -> Result[PasswordResetRequestedResponse]:
        email = (email or "").strip().lower()

        async with self.uow:
            token = await self.auth_provider.issue_password_reset(email)
            if token is not None:
                await self.uow.commit()

        if token is not None:
            reset_url = f"{self.reset_url_base}?token={token}"
            try:
                await self.notifier.notify_password_reset(email, reset_url)
            except Exception:
                logger.warning(f"Password reset notification for {email} failed", exc_info=True)

        return Return.ok(
            PasswordResetRequestedResponse(status="sent", message=RESET_REQUESTED_MESSAGE)
        )
