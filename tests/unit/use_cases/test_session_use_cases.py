from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from access_control.app.errors import ErrorKind
from access_control.app.services.auth_provider import AuthIdentity, IssuedSession
from access_control.app.use_cases.auth import (
    SignInUseCase,
    SignOutUseCase,
    SignUpCommand,
    SignUpUseCase,
)
from access_control.app.use_cases.auth.signup_use_case import make_slug
from access_control.domain.base import utcnow
from access_control.domain.entities import Tenant, UserRole


@pytest.fixture
def identity():
    return AuthIdentity(external_id=uuid4(), email="owner@acme.com")


@pytest.fixture
def auth_provider(identity):
    provider = MagicMock()
    provider.register = AsyncMock(return_value=identity)
    provider.sign_in = AsyncMock(
        return_value=IssuedSession(
            identity=identity, credential="jwt", expires_at=utcnow() + timedelta(hours=1)
        )
    )
    provider.invalidate = AsyncMock()
    return provider


def _command(**overrides):
    fields = dict(
        email="Owner@Acme.com",
        password="SecurePass123!",
        first_name="Olive",
        last_name="Owner",
        company_name="Acme Corp",
    )
    fields.update(overrides)
    return SignUpCommand(**fields)


def test_make_slug():
    assert make_slug("Acme Corp") == "acme-corp"
    assert make_slug("  Olive Owner's company!! ") == "olive-owner-s-company"
    assert make_slug("!!!") == ""


@pytest.mark.asyncio
async def test_signup_creates_company_and_owner(mock_uow, auth_provider, identity):
    result = await SignUpUseCase(mock_uow, auth_provider).execute(_command())

    assert result.is_ok()
    assert result.value.user.id == str(identity.external_id)
    assert result.value.user.role == "owner"
    assert result.value.company.slug == "acme-corp"
    auth_provider.register.assert_called_once_with("owner@acme.com", "SecurePass123!")
    profile = mock_uow.profiles.create.call_args.args[0]
    assert profile.role == UserRole.owner
    assert profile.tenant_id == mock_uow.tenants.create.call_args.args[0].id
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_signup_default_company_name(mock_uow, auth_provider):
    result = await SignUpUseCase(mock_uow, auth_provider).execute(_command(company_name=None))

    assert result.is_ok()
    assert result.value.company.name == "Olive Owner's company"


@pytest.mark.asyncio
async def test_signup_duplicate_email(mock_uow, auth_provider):
    mock_uow.accounts.get_by_email.return_value = MagicMock()

    result = await SignUpUseCase(mock_uow, auth_provider).execute(_command())

    assert result.is_err()
    assert result.error.code == "EMAIL_ALREADY_REGISTERED"
    assert result.error.kind == ErrorKind.conflict
    auth_provider.register.assert_not_called()


@pytest.mark.asyncio
async def test_signup_slug_taken(mock_uow, auth_provider):
    mock_uow.tenants.get_by_slug.return_value = Tenant(id=uuid4(), name="Acme Corp", slug="acme-corp")

    result = await SignUpUseCase(mock_uow, auth_provider).execute(_command())

    assert result.is_err()
    assert result.error.code == "COMPANY_SLUG_TAKEN"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_signin_stamps_last_login(mock_uow, auth_provider, identity):
    result = await SignInUseCase(mock_uow, auth_provider).execute(" Owner@Acme.com ", "pw")

    assert result.is_ok()
    assert result.value.access_token == "jwt"
    assert result.value.token_type == "bearer"
    auth_provider.sign_in.assert_called_once_with("owner@acme.com", "pw")
    assert mock_uow.profiles.touch_last_login.call_args.args[0] == identity.external_id
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_signin_bad_credentials(mock_uow, auth_provider):
    auth_provider.sign_in.return_value = None

    result = await SignInUseCase(mock_uow, auth_provider).execute("owner@acme.com", "wrong")

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.kind == ErrorKind.unauthenticated
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_signout(mock_uow, auth_provider):
    result = await SignOutUseCase(mock_uow, auth_provider).execute("jwt")

    assert result.is_ok()
    assert result.value.status == "signed_out"
    auth_provider.invalidate.assert_called_once_with("jwt")
    mock_uow.commit.assert_called_once()
