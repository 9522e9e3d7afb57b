"""
API tests for registration, login, logout, token refresh and password change
"""

import pytest

ADA = {
    "fullName": "Ada Lovelace",
    "username": "ada",
    "email": "ada@example.com",
    "password": "analytical",
    "company": "Engines Ltd",
    "phone": "111",
}


async def _register_and_login(client, user=ADA):
    await client.post("/auth/register", json=user)
    response = await client.post("/auth/login", json={"email": user["email"], "password": user["password"]})
    return response.json()["token"]


def _bearer(token):
    return {"Authorization": f"Bearer {token}"}


class TestRegister:

    @pytest.mark.asyncio
    async def test_register_returns_user_without_password(self, client):
        response = await client.post("/auth/register", json=ADA)

        assert response.status_code == 201
        body = response.json()
        assert body["fullName"] == "Ada Lovelace"
        assert body["email"] == "ada@example.com"
        assert "password" not in body
        assert "createdAt" in body

    @pytest.mark.asyncio
    async def test_duplicate_email_is_409(self, client):
        await client.post("/auth/register", json=ADA)

        response = await client.post("/auth/register", json={**ADA, "username": "ada2"})

        assert response.status_code == 409
        assert response.json()["error"] == "User with this email already exists"

    @pytest.mark.asyncio
    async def test_invalid_email_is_400(self, client):
        response = await client.post("/auth/register", json={**ADA, "email": "not-an-email"})

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request"


class TestLogin:

    @pytest.mark.asyncio
    async def test_login_returns_token_and_user(self, client):
        await client.post("/auth/register", json=ADA)

        response = await client.post("/auth/login", json={"email": ADA["email"], "password": ADA["password"]})

        assert response.status_code == 200
        body = response.json()
        assert body["token"]
        assert body["user"]["username"] == "ada"
        assert "password" not in body["user"]

    @pytest.mark.asyncio
    async def test_wrong_password_is_401(self, client):
        await client.post("/auth/register", json=ADA)

        response = await client.post("/auth/login", json={"email": ADA["email"], "password": "nope"})

        assert response.status_code == 401
        assert response.json()["error"] == "Invalid email or password"


class TestTokens:

    @pytest.mark.asyncio
    async def test_logout_revokes_token_and_is_idempotent(self, client):
        token = await _register_and_login(client)

        first = await client.post("/auth/logout", headers=_bearer(token))
        second = await client.post("/auth/logout", headers=_bearer(token))

        assert first.status_code == 200
        assert first.json() == {"message": "Logged out successfully"}
        assert second.status_code == 200

        response = await client.post(
            "/users/change-password",
            json={"currentPassword": "analytical", "newPassword": "other"},
            headers=_bearer(token),
        )
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_logout_without_token_is_401(self, client):
        response = await client.post("/auth/logout")

        assert response.status_code == 401
        assert response.json()["error"] == "Authorization token missing"

    @pytest.mark.asyncio
    async def test_refresh_returns_new_usable_token(self, client):
        token = await _register_and_login(client)

        response = await client.post("/auth/token", json={"token": token})

        assert response.status_code == 200
        refreshed = response.json()["token"]
        assert refreshed != token
        change = await client.post(
            "/users/change-password",
            json={"currentPassword": "analytical", "newPassword": "difference"},
            headers=_bearer(refreshed),
        )
        assert change.status_code == 200

    @pytest.mark.asyncio
    async def test_refresh_of_tampered_token_is_401(self, client):
        token = await _register_and_login(client)
        header, payload, signature = token.split(".")

        response = await client.post("/auth/token", json={"token": ".".join([header, payload, signature[::-1]])})

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_two_logins_get_independent_sessions(self, client):
        await client.post("/auth/register", json=ADA)
        credentials = {"email": ADA["email"], "password": ADA["password"]}
        first = (await client.post("/auth/login", json=credentials)).json()["token"]
        second = (await client.post("/auth/login", json=credentials)).json()["token"]

        assert first != second
        await client.post("/auth/logout", headers=_bearer(first))

        response = await client.post(
            "/users/change-password",
            json={"currentPassword": "analytical", "newPassword": "difference"},
            headers=_bearer(second),
        )
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_deleting_logged_in_user_revokes_their_token(self, client):
        user_id = (await client.post("/auth/register", json=ADA)).json()["id"]
        login = await client.post("/auth/login", json={"email": ADA["email"], "password": ADA["password"]})
        token = login.json()["token"]

        deleted = await client.delete(f"/users/{user_id}")

        assert deleted.status_code == 204
        response = await client.post(
            "/users/change-password",
            json={"currentPassword": "analytical", "newPassword": "difference"},
            headers=_bearer(token),
        )
        assert response.status_code == 401
        assert (await client.post("/auth/token", json={"token": token})).status_code == 401


class TestChangePassword:

    @pytest.mark.asyncio
    async def test_change_password_switches_login_credentials(self, client):
        token = await _register_and_login(client)

        response = await client.post(
            "/users/change-password",
            json={"currentPassword": "analytical", "newPassword": "difference"},
            headers=_bearer(token),
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Password updated successfully"}
        old = await client.post("/auth/login", json={"email": ADA["email"], "password": "analytical"})
        new = await client.post("/auth/login", json={"email": ADA["email"], "password": "difference"})
        assert old.status_code == 401
        assert new.status_code == 200

    @pytest.mark.asyncio
    async def test_wrong_current_password_is_401(self, client):
        token = await _register_and_login(client)

        response = await client.post(
            "/users/change-password",
            json={"currentPassword": "wrong", "newPassword": "difference"},
            headers=_bearer(token),
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_requires_bearer_token(self, client):
        response = await client.post(
            "/users/change-password",
            json={"currentPassword": "analytical", "newPassword": "difference"},
        )

        assert response.status_code == 401
