import pytest
from httpx import AsyncClient

from src.api.utils.jwt import generate_jwt


async def create_account(client, api, auth, email_sender):
    """Admin-created account; returns its bearer headers and temporary password"""
    response = await client.post(
        f"{api}/admin/users",
        json={"name": "Fresh Face", "email": "fresh@taskflow.test"},
        headers=auth["admin"],
    )
    assert response.status_code == 201
    user_id = response.json()["data"]["id"]
    welcome = email_sender.sent[-1]
    password = welcome.text.split("Temporary password: ")[1].split(" ")[0]
    return {"Authorization": f"Bearer {generate_jwt(user_id)}"}, password


@pytest.mark.asyncio
async def test_me_returns_profile(client: AsyncClient, api, auth, users):
    response = await client.get(f"{api}/auth/me", headers=auth["member"])

    assert response.status_code == 200
    me = response.json()["data"]
    assert me["id"] == str(users["member"].id)
    assert me["email"] == users["member"].email
    assert "passwordHash" not in me


@pytest.mark.asyncio
async def test_me_requires_token(client: AsyncClient, api):
    response = await client.get(f"{api}/auth/me")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_first_login_password_change(
    client: AsyncClient, api, auth, users, email_sender
):
    headers, temporary = await create_account(client, api, auth, email_sender)

    response = await client.get(f"{api}/auth/me", headers=headers)
    assert response.json()["data"]["isFirstLogin"] is True

    response = await client.post(
        f"{api}/auth/change-password-first-login",
        json={"currentPassword": "not-it", "newPassword": "chosen-secret"},
        headers=headers,
    )
    assert response.status_code == 401
    assert response.json()["error"] == "INVALID_PASSWORD"

    response = await client.post(
        f"{api}/auth/change-password-first-login",
        json={"currentPassword": temporary, "newPassword": "abc"},
        headers=headers,
    )
    assert response.status_code == 400
    assert response.json()["error"] == "PASSWORD_TOO_SHORT"

    response = await client.post(
        f"{api}/auth/change-password-first-login",
        json={"currentPassword": temporary, "newPassword": "chosen-secret"},
        headers=headers,
    )
    assert response.status_code == 200
    assert response.json()["message"] == "Password changed successfully"
    assert response.json()["data"]["isFirstLogin"] is False

    response = await client.get(f"{api}/auth/me", headers=headers)
    assert response.json()["data"]["isFirstLogin"] is False

    response = await client.post(
        f"{api}/auth/change-password-first-login",
        json={"currentPassword": "chosen-secret", "newPassword": "another-one"},
        headers=headers,
    )
    assert response.status_code == 400
    assert response.json()["error"] == "NOT_FIRST_LOGIN"
