"""Request helpers shared by the API tests"""

from httpx import AsyncClient

API = "/api"
PASSWORD = "SecurePass123!"


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


async def signup(client: AsyncClient, email: str, company_name=None, first_name="Test", last_name="User") -> dict:
    payload = {
        "email": email,
        "password": PASSWORD,
        "first_name": first_name,
        "last_name": last_name,
    }
    if company_name:
        payload["company_name"] = company_name
    response = await client.post(f"{API}/auth/signup", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


async def signin(client: AsyncClient, email: str, password: str = PASSWORD) -> str:
    response = await client.post(
        f"{API}/auth/signin", json={"email": email, "password": password}
    )
    assert response.status_code == 200, response.text
    # Tests authenticate explicitly with the bearer header
    client.cookies.clear()
    return response.json()["access_token"]


async def create_company(client: AsyncClient, email: str, company_name: str):
    """Sign up an owner; returns (owner token, company id, owner id)"""
    data = await signup(client, email, company_name=company_name)
    token = await signin(client, email)
    return token, data["company"]["id"], data["user"]["id"]


async def invite(client: AsyncClient, token: str, company_id: str, email: str, role: str) -> dict:
    response = await client.post(
        f"{API}/companies/{company_id}/invitations",
        json={"email": email, "role": role},
        headers=bearer(token),
    )
    assert response.status_code == 201, response.text
    return response.json()


async def join_company(client: AsyncClient, owner_token: str, company_id: str, email: str, role: str):
    """Invite, sign up and accept; returns (member token, member id)"""
    invitation = await invite(client, owner_token, company_id, email, role)
    data = await signup(client, email, company_name=f"{email} workspace")
    token = await signin(client, email)
    response = await client.post(
        f"{API}/invitations/accept",
        json={"token": invitation["token"]},
        headers=bearer(token),
    )
    assert response.status_code == 200, response.text
    return token, data["user"]["id"]
