import pytest
from httpx import AsyncClient

from tests.integration.helpers import API, bearer, create_company, invite, join_company


@pytest.mark.asyncio
async def test_operator_cannot_use_admin_routes(client: AsyncClient):
    """
    Given an operator of company A
    When they call an admin-only route of their own company
    Then the request is forbidden before any handler logic runs
    """
    owner_token, company_id, _ = await create_company(client, "owner@acme.com", "Acme Corp")
    operator_token, _ = await join_company(client, owner_token, company_id, "op@example.com", "operator")

    response = await client.put(
        f"{API}/companies/{company_id}", json={"name": "Hijacked"}, headers=bearer(operator_token)
    )
    assert response.status_code == 403
    assert response.json()["error"]["code"] == "INSUFFICIENT_ROLE"
    assert response.json()["error"]["message"] == "Access denied"

    response = await client.post(
        f"{API}/companies/{company_id}/invitations",
        json={"email": "friend@example.com", "role": "operator"},
        headers=bearer(operator_token),
    )
    assert response.status_code == 403

    company = await client.get(f"{API}/companies/{company_id}", headers=bearer(operator_token))
    assert company.status_code == 200
    assert company.json()["name"] == "Acme Corp"


@pytest.mark.asyncio
async def test_cross_tenant_cancel_is_forbidden(client: AsyncClient):
    """
    Given admins of companies A and B
    When B's admin cancels an invitation of A
    Then the request is forbidden and the invitation stays pending
    """
    a_token, a_id, _ = await create_company(client, "owner@acme.com", "Acme Corp")
    b_token, b_id, _ = await create_company(client, "owner@globex.com", "Globex")
    invitation = await invite(client, a_token, a_id, "bob@example.com", "operator")
    invitation_id = invitation["invitation"]["id"]

    response = await client.delete(
        f"{API}/companies/{a_id}/invitations/{invitation_id}", headers=bearer(b_token)
    )
    assert response.status_code == 403

    response = await client.delete(
        f"{API}/companies/{b_id}/invitations/{invitation_id}", headers=bearer(b_token)
    )
    assert response.status_code == 403

    pending = await client.get(f"{API}/companies/{a_id}/invitations", headers=bearer(a_token))
    assert [item["id"] for item in pending.json()["data"]] == [invitation_id]


@pytest.mark.asyncio
async def test_other_company_is_invisible(client: AsyncClient):
    a_token, _, _ = await create_company(client, "owner@acme.com", "Acme Corp")
    _, b_id, _ = await create_company(client, "owner@globex.com", "Globex")

    response = await client.get(f"{API}/companies/{b_id}", headers=bearer(a_token))
    assert response.status_code == 403

    response = await client.get(f"{API}/companies/{b_id}/users", headers=bearer(a_token))
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_owner_cannot_change_own_role(client: AsyncClient):
    owner_token, company_id, owner_id = await create_company(client, "owner@acme.com", "Acme Corp")

    response = await client.put(
        f"{API}/companies/{company_id}/users/{owner_id}",
        json={"role": "admin"},
        headers=bearer(owner_token),
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "CANNOT_MODIFY_OWN_ROLE"

    response = await client.delete(
        f"{API}/companies/{company_id}/users/{owner_id}", headers=bearer(owner_token)
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "CANNOT_REMOVE_SELF"


@pytest.mark.asyncio
async def test_admin_changes_member_role(client: AsyncClient):
    owner_token, company_id, _ = await create_company(client, "owner@acme.com", "Acme Corp")
    member_token, member_id = await join_company(client, owner_token, company_id, "op@example.com", "operator")

    response = await client.put(
        f"{API}/companies/{company_id}/users/{member_id}",
        json={"role": "supervisor"},
        headers=bearer(owner_token),
    )

    assert response.status_code == 200
    assert response.json()["member"]["role"] == "supervisor"
    session = await client.get(f"{API}/auth/session", headers=bearer(member_token))
    assert session.json()["role"] == "supervisor"


@pytest.mark.asyncio
async def test_admin_cannot_promote_to_owner_or_touch_owner(client: AsyncClient):
    owner_token, company_id, owner_id = await create_company(client, "owner@acme.com", "Acme Corp")
    admin_token, _ = await join_company(client, owner_token, company_id, "adm@example.com", "admin")
    _, op_id = await join_company(client, owner_token, company_id, "op@example.com", "operator")

    response = await client.put(
        f"{API}/companies/{company_id}/users/{op_id}",
        json={"role": "owner"},
        headers=bearer(admin_token),
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_ROLE"

    response = await client.delete(
        f"{API}/companies/{company_id}/users/{owner_id}", headers=bearer(admin_token)
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_removed_member_loses_access(client: AsyncClient):
    """
    Given an operator of company A
    When the owner removes them
    Then their existing credential stops authenticating
    """
    owner_token, company_id, _ = await create_company(client, "owner@acme.com", "Acme Corp")
    member_token, member_id = await join_company(client, owner_token, company_id, "op@example.com", "operator")

    response = await client.delete(
        f"{API}/companies/{company_id}/users/{member_id}", headers=bearer(owner_token)
    )
    assert response.status_code == 200
    assert response.json()["status"] == "removed"

    response = await client.get(f"{API}/auth/session", headers=bearer(member_token))
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_supervisor_lists_members(client: AsyncClient):
    owner_token, company_id, _ = await create_company(client, "owner@acme.com", "Acme Corp")
    sup_token, _ = await join_company(client, owner_token, company_id, "sup@example.com", "supervisor")
    op_token, _ = await join_company(client, owner_token, company_id, "op@example.com", "operator")

    response = await client.get(
        f"{API}/companies/{company_id}/users", headers=bearer(sup_token)
    )
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 3
    assert {member["email"] for member in data["data"]} == {
        "owner@acme.com",
        "sup@example.com",
        "op@example.com",
    }

    response = await client.get(
        f"{API}/companies/{company_id}/users",
        params={"search": "SUP", "limit": 1},
        headers=bearer(sup_token),
    )
    assert response.json()["total"] == 1
    assert response.json()["has_more"] is False

    response = await client.get(f"{API}/companies/{company_id}/users", headers=bearer(op_token))
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_admin_updates_company(client: AsyncClient):
    owner_token, company_id, _ = await create_company(client, "owner@acme.com", "Acme Corp")

    response = await client.put(
        f"{API}/companies/{company_id}",
        json={"name": "Acme Industries", "logo_url": "https://cdn.acme.com/logo.png"},
        headers=bearer(owner_token),
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Acme Industries"
    assert response.json()["slug"] == "acme-corp"


@pytest.mark.asyncio
async def test_malformed_company_id(client: AsyncClient):
    owner_token, _, _ = await create_company(client, "owner@acme.com", "Acme Corp")

    response = await client.get(f"{API}/companies/not-a-uuid", headers=bearer(owner_token))

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_COMPANY_ID"
