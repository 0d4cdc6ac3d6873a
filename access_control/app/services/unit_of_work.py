from abc import ABC, abstractmethod

from access_control.app.repositories.auth_account_repository import IAuthAccountRepository
from access_control.app.repositories.invitation_repository import IInvitationRepository
from access_control.app.repositories.password_reset_token_repository import (
    IPasswordResetTokenRepository,
)
from access_control.app.repositories.session_repository import ISessionRepository
from access_control.app.repositories.tenant_repository import ITenantRepository
from access_control.app.repositories.user_profile_repository import IUserProfileRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    profiles: IUserProfileRepository
    tenants: ITenantRepository
    invitations: IInvitationRepository
    accounts: IAuthAccountRepository
    sessions: ISessionRepository
    reset_tokens: IPasswordResetTokenRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
