from datetime import timedelta
from uuid import uuid4

import pytest

from access_control.app.errors import ErrorKind
from access_control.app.use_cases.invitations import (
    CancelInvitationUseCase,
    ListPendingInvitationsUseCase,
)
from access_control.domain.base import utcnow
from access_control.domain.entities import Invitation, UserRole


def _invitation(tenant_id, email="new@acme.com"):
    now = utcnow()
    return Invitation(
        id=uuid4(),
        tenant_id=tenant_id,
        invited_by=uuid4(),
        email=email,
        role=UserRole.operator,
        token=f"tok-{email}",
        created_at=now,
        expires_at=now + timedelta(days=7),
    )


@pytest.mark.asyncio
async def test_cancel_pending_invitation(mock_uow, make_principal, tenant_id):
    invitation = _invitation(tenant_id)
    mock_uow.invitations.get_by_id.return_value = invitation

    result = await CancelInvitationUseCase(mock_uow).execute(
        make_principal(UserRole.admin), tenant_id, invitation.id
    )

    assert result.is_ok()
    assert result.value.status == "cancelled"
    assert result.value.invitation_id == str(invitation.id)
    mock_uow.invitations.expire.assert_called_once()
    assert mock_uow.invitations.expire.call_args.args[:2] == (invitation.id, tenant_id)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_cancel_is_idempotent(mock_uow, make_principal, tenant_id):
    """Second cancel matches no pending row: success without a write"""
    invitation = _invitation(tenant_id)
    mock_uow.invitations.get_by_id.return_value = invitation
    mock_uow.invitations.expire.return_value = False

    result = await CancelInvitationUseCase(mock_uow).execute(
        make_principal(UserRole.owner), tenant_id, invitation.id
    )

    assert result.is_ok()
    assert result.value.status == "cancelled"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_cancel_unknown_invitation(mock_uow, make_principal, tenant_id):
    mock_uow.invitations.get_by_id.return_value = None

    result = await CancelInvitationUseCase(mock_uow).execute(
        make_principal(), tenant_id, uuid4()
    )

    assert result.is_err()
    assert result.error.code == "INVITATION_NOT_FOUND"
    assert result.error.kind == ErrorKind.not_found


@pytest.mark.asyncio
async def test_cancel_invitation_of_other_company(mock_uow, make_principal, tenant_id):
    """Invitation id guessed from another company"""
    mock_uow.invitations.get_by_id.return_value = _invitation(uuid4())

    result = await CancelInvitationUseCase(mock_uow).execute(
        make_principal(UserRole.owner), tenant_id, uuid4()
    )

    assert result.is_err()
    assert result.error.code == "TENANT_MISMATCH"
    assert result.error.kind == ErrorKind.forbidden
    mock_uow.invitations.expire.assert_not_called()


@pytest.mark.asyncio
async def test_cancel_requires_admin(mock_uow, make_principal, tenant_id):
    result = await CancelInvitationUseCase(mock_uow).execute(
        make_principal(UserRole.supervisor), tenant_id, uuid4()
    )

    assert result.is_err()
    assert result.error.code == "INSUFFICIENT_ROLE"
    mock_uow.invitations.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_list_pending_invitations(mock_uow, make_principal, tenant_id):
    pending = [_invitation(tenant_id, "b@acme.com"), _invitation(tenant_id, "a@acme.com")]
    mock_uow.invitations.list_pending_by_tenant.return_value = pending

    result = await ListPendingInvitationsUseCase(mock_uow).execute(
        make_principal(UserRole.admin), tenant_id
    )

    assert result.is_ok()
    assert [item.email for item in result.value.data] == ["b@acme.com", "a@acme.com"]
    assert all(item.status == "pending" for item in result.value.data)


@pytest.mark.asyncio
async def test_list_pending_other_company_forbidden(mock_uow, make_principal):
    result = await ListPendingInvitationsUseCase(mock_uow).execute(
        make_principal(UserRole.owner), uuid4()
    )

    assert result.is_err()
    assert result.error.code == "TENANT_MISMATCH"
    mock_uow.invitations.list_pending_by_tenant.assert_not_called()
