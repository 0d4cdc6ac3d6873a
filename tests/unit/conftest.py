from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from access_control.domain.entities import UserRole
from access_control.domain.principal import Principal, TenantSummary


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.profiles = MagicMock()
    uow.profiles.get_by_id = AsyncMock()
    uow.profiles.get_by_email_and_tenant = AsyncMock(return_value=None)
    uow.profiles.count_active_by_tenant = AsyncMock(return_value=0)
    uow.profiles.list_by_tenant = AsyncMock()
    uow.profiles.create = AsyncMock(side_effect=lambda profile: profile)
    uow.profiles.update = AsyncMock(side_effect=lambda profile: profile)
    uow.profiles.assign_tenant = AsyncMock(return_value=True)
    uow.profiles.update_membership = AsyncMock(return_value=True)
    uow.profiles.touch_last_login = AsyncMock()

    uow.tenants = MagicMock()
    uow.tenants.get_by_id = AsyncMock()
    uow.tenants.get_by_slug = AsyncMock(return_value=None)
    uow.tenants.create = AsyncMock(side_effect=lambda tenant: tenant)
    uow.tenants.update = AsyncMock(side_effect=lambda tenant: tenant)

    uow.invitations = MagicMock()
    uow.invitations.get_by_id = AsyncMock()
    uow.invitations.get_by_token = AsyncMock()
    uow.invitations.get_pending_by_tenant_and_email = AsyncMock(return_value=None)
    uow.invitations.list_pending_by_tenant = AsyncMock(return_value=[])
    uow.invitations.create_if_no_pending = AsyncMock(return_value=True)
    uow.invitations.mark_accepted = AsyncMock(return_value=True)
    uow.invitations.expire = AsyncMock(return_value=True)

    uow.accounts = MagicMock()
    uow.accounts.get_by_id = AsyncMock()
    uow.accounts.get_by_email = AsyncMock(return_value=None)
    uow.accounts.create = AsyncMock(side_effect=lambda account: account)
    uow.accounts.update_password_hash = AsyncMock(return_value=True)

    uow.sessions = MagicMock()
    uow.sessions.get_by_id = AsyncMock()
    uow.sessions.create = AsyncMock(side_effect=lambda session: session)
    uow.sessions.revoke_by_id = AsyncMock(return_value=True)
    uow.sessions.revoke_all_by_user_id = AsyncMock(return_value=0)

    uow.reset_tokens = MagicMock()
    uow.reset_tokens.create = AsyncMock(side_effect=lambda token: token)
    uow.reset_tokens.get_by_token_hash = AsyncMock(return_value=None)
    uow.reset_tokens.mark_used = AsyncMock(return_value=True)
    return uow


@pytest.fixture
def tenant_id():
    return uuid4()


@pytest.fixture
def make_principal(tenant_id):
    """Build a Principal in `tenant_id` (or another company) with the given role"""

    def _make(role=UserRole.admin, tenant=None, email="actor@acme.com"):
        company_id = tenant or tenant_id
        return Principal(
            id=uuid4(),
            email=email,
            role=role,
            is_active=True,
            tenant_id=company_id,
            first_name="Ada",
            last_name="Actor",
            tenant=TenantSummary(id=company_id, name="Acme", slug="acme"),
        )

    return _make
