from uuid import uuid4

import pytest

from access_control.app.errors import ErrorKind
from access_control.app.use_cases.users import RemoveUserUseCase, UpdateUserRoleUseCase
from access_control.domain.entities import UserProfile, UserRole


def _member(tenant_id, role=UserRole.operator):
    return UserProfile(id=uuid4(), email="member@acme.com", role=role, tenant_id=tenant_id)


@pytest.mark.asyncio
async def test_admin_promotes_operator(mock_uow, make_principal, tenant_id):
    """Admin changes an operator to supervisor"""
    # Arrange
    target = _member(tenant_id)
    mock_uow.profiles.get_by_id.return_value = target

    # Act
    result = await UpdateUserRoleUseCase(mock_uow).execute(
        make_principal(UserRole.admin), tenant_id, target.id, role="supervisor"
    )

    # Assert
    assert result.is_ok()
    assert result.value.member.role == "supervisor"
    assert result.value.member.is_active is True
    mock_uow.profiles.update_membership.assert_called_once_with(
        target.id, tenant_id, role=UserRole.supervisor, is_active=None
    )
    mock_uow.sessions.revoke_all_by_user_id.assert_not_called()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_deactivation_revokes_sessions(mock_uow, make_principal, tenant_id):
    target = _member(tenant_id)
    mock_uow.profiles.get_by_id.return_value = target

    result = await UpdateUserRoleUseCase(mock_uow).execute(
        make_principal(UserRole.owner), tenant_id, target.id, is_active=False
    )

    assert result.is_ok()
    assert result.value.member.is_active is False
    mock_uow.sessions.revoke_all_by_user_id.assert_called_once()
    assert mock_uow.sessions.revoke_all_by_user_id.call_args.args[0] == target.id


@pytest.mark.asyncio
@pytest.mark.parametrize("role", list(UserRole))
async def test_nobody_modifies_own_role(mock_uow, make_principal, tenant_id, role):
    """Self-targeting is a bad request for every role, owner included"""
    principal = make_principal(role)

    result = await UpdateUserRoleUseCase(mock_uow).execute(
        principal, tenant_id, principal.id, role="operator"
    )

    assert result.is_err()
    assert result.error.code == "CANNOT_MODIFY_OWN_ROLE"
    assert result.error.kind == ErrorKind.bad_request
    mock_uow.profiles.update_membership.assert_not_called()


@pytest.mark.asyncio
async def test_requires_a_change(mock_uow, make_principal, tenant_id):
    result = await UpdateUserRoleUseCase(mock_uow).execute(
        make_principal(UserRole.owner), tenant_id, uuid4()
    )

    assert result.is_err()
    assert result.error.code == "NO_CHANGES"


@pytest.mark.asyncio
@pytest.mark.parametrize("role", ["owner", "member"])
async def test_invalid_role(mock_uow, make_principal, tenant_id, role):
    result = await UpdateUserRoleUseCase(mock_uow).execute(
        make_principal(UserRole.owner), tenant_id, uuid4(), role=role
    )

    assert result.is_err()
    assert result.error.code == "INVALID_ROLE"
    mock_uow.profiles.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_supervisor_cannot_change_roles(mock_uow, make_principal, tenant_id):
    result = await UpdateUserRoleUseCase(mock_uow).execute(
        make_principal(UserRole.supervisor), tenant_id, uuid4(), role="operator"
    )

    assert result.is_err()
    assert result.error.code == "INSUFFICIENT_ROLE"
    mock_uow.profiles.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_admin_cannot_touch_owner(mock_uow, make_principal, tenant_id):
    target = _member(tenant_id, role=UserRole.owner)
    mock_uow.profiles.get_by_id.return_value = target

    result = await UpdateUserRoleUseCase(mock_uow).execute(
        make_principal(UserRole.admin), tenant_id, target.id, role="operator"
    )

    assert result.is_err()
    assert result.error.code == "INSUFFICIENT_ROLE"
    mock_uow.profiles.update_membership.assert_not_called()


@pytest.mark.asyncio
async def test_target_missing(mock_uow, make_principal, tenant_id):
    mock_uow.profiles.get_by_id.return_value = None

    result = await UpdateUserRoleUseCase(mock_uow).execute(
        make_principal(UserRole.admin), tenant_id, uuid4(), role="operator"
    )

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"
    assert result.error.kind == ErrorKind.not_found


@pytest.mark.asyncio
async def test_target_in_other_company(mock_uow, make_principal, tenant_id):
    target = _member(uuid4())
    mock_uow.profiles.get_by_id.return_value = target

    result = await UpdateUserRoleUseCase(mock_uow).execute(
        make_principal(UserRole.owner), tenant_id, target.id, role="admin"
    )

    assert result.is_err()
    assert result.error.code == "TENANT_MISMATCH"
    mock_uow.profiles.update_membership.assert_not_called()


@pytest.mark.asyncio
async def test_remove_member(mock_uow, make_principal, tenant_id):
    """Removal is a soft delete plus session revocation"""
    target = _member(tenant_id, role=UserRole.supervisor)
    mock_uow.profiles.get_by_id.return_value = target
    mock_uow.sessions.revoke_all_by_user_id.return_value = 2

    result = await RemoveUserUseCase(mock_uow).execute(
        make_principal(UserRole.admin), tenant_id, target.id
    )

    assert result.is_ok()
    assert result.value.status == "removed"
    mock_uow.profiles.update_membership.assert_called_once_with(
        target.id, tenant_id, is_active=False
    )
    mock_uow.sessions.revoke_all_by_user_id.assert_called_once()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_owner_cannot_remove_self(mock_uow, make_principal, tenant_id):
    principal = make_principal(UserRole.owner)

    result = await RemoveUserUseCase(mock_uow).execute(principal, tenant_id, principal.id)

    assert result.is_err()
    assert result.error.code == "CANNOT_REMOVE_SELF"
    mock_uow.profiles.update_membership.assert_not_called()


@pytest.mark.asyncio
async def test_remove_member_of_other_company(mock_uow, make_principal, tenant_id):
    target = _member(uuid4())
    mock_uow.profiles.get_by_id.return_value = target

    result = await RemoveUserUseCase(mock_uow).execute(
        make_principal(UserRole.owner), tenant_id, target.id
    )

    assert result.is_err()
    assert result.error.code == "TENANT_MISMATCH"
    mock_uow.sessions.revoke_all_by_user_id.assert_not_called()
