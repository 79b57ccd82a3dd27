"""HTTP tests for /cases: role checks, status codes and error bodies."""

from datetime import timedelta

import pytest

from helpers import bearer, case_payload, signup

ERROR_KEYS = {"timestamp", "status", "error", "message", "path"}


@pytest.mark.unit
class TestCaseLifecycle:
    """End-to-end case management as an ADMIN"""

    def test_admin_full_lifecycle(self, client):
        signup(client, "functest_admin", "adminpass", roles=["ADMIN"])
        login = client.post("/auth/login", json={"username": "functest_admin", "password": "adminpass"})
        assert login.status_code == 200
        headers = bearer(login.json()["token"])

        created = client.post(
            "/cases",
            json=case_payload("FUNC123", "Functional test case", "Created by the functional test"),
            headers=headers,
        )
        assert created.status_code == 200
        case = created.json()
        assert case["caseNumber"] == "FUNC123"
        assert case["status"] == "NEW"
        assert "createdDate" in case
        case_id = case["id"]

        updated = client.put(
            f"/cases/{case_id}",
            json=case_payload("FUNC123", "Functional test case", "Now in progress", "IN_PROGRESS"),
            headers=headers,
        )
        assert updated.status_code == 200
        assert updated.json()["status"] == "IN_PROGRESS"
        assert updated.json()["createdDate"] == case["createdDate"]

        fetched = client.get(f"/cases/{case_id}", headers=headers)
        assert fetched.status_code == 200
        assert fetched.json()["status"] == "IN_PROGRESS"

        deleted = client.delete(f"/cases/{case_id}", headers=headers)
        assert deleted.status_code == 204
        assert deleted.content == b""

        missing = client.get(f"/cases/{case_id}", headers=headers)
        assert missing.status_code == 404
        assert missing.json()["message"] == f"Case not found with id: {case_id}"

    def test_list_cases_with_status_filter(self, client, user_headers):
        client.post("/cases", json=case_payload("LIST1"), headers=user_headers)
        client.post("/cases", json=case_payload("LIST2", status="CLOSED"), headers=user_headers)

        everything = client.get("/cases", headers=user_headers)
        closed = client.get("/cases", params={"status": "CLOSED"}, headers=user_headers)

        assert [c["caseNumber"] for c in everything.json()] == ["LIST1", "LIST2"]
        assert [c["caseNumber"] for c in closed.json()] == ["LIST2"]

    def test_list_empty(self, client, user_headers):
        response = client.get("/cases", headers=user_headers)

        assert response.status_code == 200
        assert response.json() == []


@pytest.mark.unit
class TestAccessControl:
    """Authentication and role enforcement"""

    def test_missing_token_is_401_with_error_body(self, client):
        response = client.get("/cases")

        assert response.status_code == 401
        assert set(response.json()) == ERROR_KEYS
        assert response.json()["path"] == "/cases"
        assert response.headers["www-authenticate"] == "Bearer"

    def test_invalid_token_is_401(self, client):
        response = client.get("/cases", headers=bearer("garbage"))

        assert response.status_code == 401
        assert response.json()["error"] == "Unauthorized"

    def test_expired_token_is_401(self, client, user_headers):
        token = client.app.state.token_issuer.issue("alice", ["USER"], expires_delta=timedelta(seconds=-30))

        response = client.get("/cases", headers=bearer(token))

        assert response.status_code == 401

    @pytest.mark.parametrize(
        "method,path",
        [("get", "/cases/1"), ("put", "/cases/1"), ("delete", "/cases/1")],
    )
    def test_user_role_forbidden_on_admin_routes(self, client, user_headers, method, path):
        kwargs = {"headers": user_headers}
        if method == "put":
            kwargs["json"] = case_payload()

        response = getattr(client, method)(path, **kwargs)

        assert response.status_code == 403
        assert response.json()["message"] == "Access denied"
        assert response.json()["path"] == path

    def test_user_may_create_and_list(self, client, user_headers):
        created = client.post("/cases", json=case_payload("USER1"), headers=user_headers)
        listed = client.get("/cases", headers=user_headers)

        assert created.status_code == 200
        assert listed.status_code == 200
        assert len(listed.json()) == 1

    def test_admin_may_create_and_list(self, client, admin_headers):
        assert client.post("/cases", json=case_payload("ADM1"), headers=admin_headers).status_code == 200
        assert client.get("/cases", headers=admin_headers).status_code == 200


@pytest.mark.unit
class TestCaseErrors:
    """Validation, conflict and not-found responses"""

    def test_duplicate_case_number_is_409(self, client, user_headers):
        client.post("/cases", json=case_payload("DUP1"), headers=user_headers)

        response = client.post("/cases", json=case_payload("DUP1"), headers=user_headers)

        assert response.status_code == 409
        body = response.json()
        assert set(body) == ERROR_KEYS
        assert body["status"] == 409
        assert body["message"] == "Case number already exists: DUP1"

    def test_missing_status_is_400(self, client, user_headers):
        response = client.post("/cases", json=case_payload(status=None), headers=user_headers)

        assert response.status_code == 400
        assert response.json()["message"] == "Case status is required"

    def test_unknown_status_is_validation_failure(self, client, user_headers):
        response = client.post("/cases", json=case_payload(status="ARCHIVED"), headers=user_headers)

        assert response.status_code == 400
        assert response.json()["error"] == "Validation Failed"
        assert "status" in response.json()["message"]

    def test_bad_case_number_is_400(self, client, user_headers):
        response = client.post("/cases", json=case_payload("ab-1"), headers=user_headers)

        assert response.status_code == 400
        assert response.json()["error"] == "Bad Request"

    def test_malformed_json_is_400(self, client, user_headers):
        response = client.post(
            "/cases",
            content=b'{"caseNumber": "BAD1", ',
            headers={**user_headers, "Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["message"].startswith("Invalid JSON format")

    def test_update_unknown_case_is_404(self, client, admin_headers):
        response = client.put("/cases/999", json=case_payload(), headers=admin_headers)

        assert response.status_code == 404

    def test_delete_unknown_case_is_404(self, client, admin_headers):
        response = client.delete("/cases/999", headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["path"] == "/cases/999"

    def test_update_to_taken_number_is_409(self, client, admin_headers):
        client.post("/cases", json=case_payload("TAKEN1"), headers=admin_headers)
        other = client.post("/cases", json=case_payload("OTHER1"), headers=admin_headers).json()

        response = client.put(f"/cases/{other['id']}", json=case_payload("TAKEN1"), headers=admin_headers)

        assert response.status_code == 409
        assert client.get(f"/cases/{other['id']}", headers=admin_headers).json()["caseNumber"] == "OTHER1"

    def test_non_numeric_id_is_400(self, client, admin_headers):
        response = client.get("/cases/abc", headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["error"] == "Validation Failed"
