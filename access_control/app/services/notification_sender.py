from abc import ABC, abstractmethod


class INotificationSender(ABC):
    """Fire-and-forget delivery of invitation and password reset notices"""

    @abstractmethod
    async def notify_invited(self, email: str, tenant_name: str, accept_url: str) -> None:
        pass

    @abstractmethod
    async def notify_password_reset(self, email: str, reset_url: str) -> None:
        pass
