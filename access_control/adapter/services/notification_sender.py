import logging
from typing import Optional

import httpx

from access_control.app.services.notification_sender import INotificationSender

logger = logging.getLogger(__name__)


class LoggingNotificationSender(INotificationSender):
    """Writes links to the log; used when no webhook is configured"""

    async def notify_invited(self, email: str, tenant_name: str, accept_url: str) -> None:
        logger.info(f"Invitation for {email} to join {tenant_name}: {accept_url}")

    async def notify_password_reset(self, email: str, reset_url: str) -> None:
        logger.info(f"Password reset for {email}: {reset_url}")


class WebhookNotificationSender(INotificationSender):
    """POSTs notices to an external delivery service"""

    def __init__(
        self,
        url: str,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout
        self.transport = transport

    async def _post(self, payload: dict) -> None:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(self.url, json=payload)
            response.raise_for_status()

    async def notify_invited(self, email: str, tenant_name: str, accept_url: str) -> None:
        await self._post(
            {
                "type": "invitation",
                "email": email,
                "company": tenant_name,
                "accept_url": accept_url,
            }
        )
        logger.info(f"Invitation notice for {email} delivered to webhook")

    async def notify_password_reset(self, email: str, reset_url: str) -> None:
        await self._post({"type": "password_reset", "email": email, "reset_url": reset_url})
        logger.info(f"Password reset notice for {email} delivered to webhook")
