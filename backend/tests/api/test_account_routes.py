"""Tests for account endpoints under /api/auth."""

import pytest

from api.dependencies import get_account_service
from modules.auth.strategies import SelfIssuedTokenStrategy
from modules.users.service import AccountService

from tests.conftest import TEST_JWT_SECRET, create_test_token
from tests.modules.users.conftest import (
    FakeDirectory,
    InMemoryUserRepository,
    RecordingDispatcher,
)


@pytest.fixture
def dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher()


@pytest.fixture
def accounts_app(app, dispatcher):
    accounts = AccountService(
        directory=FakeDirectory(),
        repository=InMemoryUserRepository(),
        tokens=SelfIssuedTokenStrategy(secret=TEST_JWT_SECRET),
        notifications=dispatcher,
        check_deliverability=False,
    )
    app.dependency_overrides[get_account_service] = lambda: accounts
    return app


def signup(client, email="asha@example.com", password="secret123", display_name="Asha") -> dict:
    response = client.post(
        "/api/auth/signup",
        json={"email": email, "password": password, "displayName": display_name},
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestSignupAndLogin:
    def test_signup_returns_token_and_camel_case_profile(self, accounts_app, client, dispatcher):
        data = signup(client)

        assert data["token"]
        assert data["user"]["email"] == "asha@example.com"
        assert data["user"]["displayName"] == "Asha"
        assert data["user"]["membershipStatus"] == "none"
        assert data["message"] == "Please check your email to verify your account"
        assert len(dispatcher.sent) == 1

    def test_signup_token_authenticates(self, accounts_app, client):
        data = signup(client)
        uid = data["user"]["id"]

        response = client.get(f"/api/auth/users/{uid}", headers={"Authorization": f"Bearer {data['token']}"})

        assert response.status_code == 200
        assert response.json()["id"] == uid

    def test_duplicate_signup(self, accounts_app, client):
        signup(client)

        response = client.post("/api/auth/signup", json={"email": "asha@example.com", "password": "secret123"})

        assert response.status_code == 400
        assert response.json()["code"] == "EMAIL_ALREADY_EXISTS"

    def test_invalid_email(self, accounts_app, client):
        response = client.post("/api/auth/signup", json={"email": "asha@", "password": "secret123"})

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_EMAIL_FORMAT"

    def test_short_password(self, accounts_app, client):
        response = client.post("/api/auth/signup", json={"email": "asha@example.com", "password": "123"})
        assert response.status_code == 400

    def test_login(self, accounts_app, client):
        signup(client)

        response = client.post("/api/auth/login", json={"email": "asha@example.com", "password": "secret123"})

        assert response.status_code == 200
        assert response.json()["user"]["email"] == "asha@example.com"

    def test_login_wrong_password(self, accounts_app, client):
        signup(client)

        response = client.post("/api/auth/login", json={"email": "asha@example.com", "password": "nope"})

        assert response.status_code == 401
        assert response.json()["error"] == "Invalid email or password"


class TestProfileRoutes:
    def test_update_own_profile(self, accounts_app, client):
        data = signup(client)
        uid = data["user"]["id"]

        response = client.put(
            f"/api/auth/users/{uid}",
            json={"displayName": "Asha K"},
            headers={"Authorization": f"Bearer {data['token']}"},
        )

        assert response.status_code == 200
        assert response.json()["displayName"] == "Asha K"

    @pytest.mark.parametrize("method", ["get", "put", "delete"])
    def test_other_users_profile_is_403(self, accounts_app, client, method):
        uid = signup(client)["user"]["id"]
        intruder = {"Authorization": f"Bearer {create_test_token(user_id='intruder')}"}

        kwargs = {"json": {"displayName": "x"}} if method == "put" else {}
        response = getattr(client, method)(f"/api/auth/users/{uid}", headers=intruder, **kwargs)

        assert response.status_code == 403
        assert response.json()["code"] == "FORBIDDEN"

    def test_delete_own_account(self, accounts_app, client):
        data = signup(client)
        uid = data["user"]["id"]
        headers = {"Authorization": f"Bearer {data['token']}"}

        deleted = client.delete(f"/api/auth/users/{uid}", headers=headers)
        after = client.get(f"/api/auth/users/{uid}", headers=headers)

        assert deleted.status_code == 200
        assert after.status_code == 404

    def test_profile_requires_auth(self, accounts_app, client):
        assert client.get("/api/auth/users/user-1").status_code == 401


class TestPasswordReset:
    def test_same_response_for_known_and_unknown(self, accounts_app, client):
        signup(client)

        known = client.post("/api/auth/reset-password", json={"email": "asha@example.com"})
        unknown = client.post("/api/auth/reset-password", json={"email": "nobody@example.com"})

        assert known.status_code == unknown.status_code == 200
        assert known.json() == unknown.json()
