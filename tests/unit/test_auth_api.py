"""HTTP tests for /auth/signup and /auth/login."""

import pytest

from helpers import bearer, signup


@pytest.mark.unit
class TestSignupEndpoint:
    """POST /auth/signup"""

    def test_signup_returns_token_and_default_role(self, client):
        response = client.post("/auth/signup", json={"username": "alice", "password": "pw123"})

        assert response.status_code == 200
        body = response.json()
        assert body["roles"] == ["USER"]
        assert body["token"].count(".") == 2

    def test_signup_token_is_usable(self, client):
        token = signup(client, "alice")["token"]

        assert client.get("/cases", headers=bearer(token)).status_code == 200

    def test_signup_with_admin_role(self, client):
        body = signup(client, "root", roles=["ADMIN"])

        assert body["roles"] == ["ADMIN"]

    def test_duplicate_username_is_409(self, client):
        signup(client, "alice")

        response = client.post("/auth/signup", json={"username": "alice", "password": "pw456"})

        assert response.status_code == 409
        assert response.json()["message"] == "Username already exists: alice"
        assert response.json()["path"] == "/auth/signup"

    def test_blank_password_is_400(self, client):
        response = client.post("/auth/signup", json={"username": "alice", "password": " "})

        assert response.status_code == 400
        assert response.json()["message"] == "Password is required"

    def test_missing_field_is_validation_failure(self, client):
        response = client.post("/auth/signup", json={"username": "alice"})

        assert response.status_code == 400
        assert response.json()["error"] == "Validation Failed"
        assert "password" in response.json()["message"]


@pytest.mark.unit
class TestLoginEndpoint:
    """POST /auth/login"""

    def test_login_returns_roles(self, client):
        signup(client, "root", "rootpw", roles=["ADMIN", "USER"])

        response = client.post("/auth/login", json={"username": "root", "password": "rootpw"})

        assert response.status_code == 200
        assert response.json()["roles"] == ["ADMIN", "USER"]

    def test_wrong_password_is_401(self, client):
        signup(client, "alice", "pw123")

        response = client.post("/auth/login", json={"username": "alice", "password": "nope"})

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid username or password"

    def test_unknown_user_is_401(self, client):
        response = client.post("/auth/login", json={"username": "ghost", "password": "pw123"})

        assert response.status_code == 401
        assert response.json()["error"] == "Unauthorized"
