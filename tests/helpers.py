"""Request builders shared by the unit tests."""

from typing import Dict, List, Optional

from fastapi.testclient import TestClient

from legal_case_service.models import CaseRequest, CaseStatus

TEST_SECRET = "test-secret-key"


def make_request(
    case_number: str = "CASE001",
    title: str = "Contract dispute",
    description: Optional[str] = "Breach of supply agreement",
    status: Optional[CaseStatus] = CaseStatus.NEW,
) -> CaseRequest:
    return CaseRequest(case_number=case_number, title=title, description=description, status=status)


def case_payload(
    case_number: str = "CASE001",
    title: str = "Contract dispute",
    description: Optional[str] = "Breach of supply agreement",
    status: Optional[str] = "NEW",
) -> Dict:
    payload = {"caseNumber": case_number, "title": title, "description": description}
    if status is not None:
        payload["status"] = status
    return payload


def signup(client: TestClient, username: str, password: str = "secret123", roles: Optional[List[str]] = None) -> Dict:
    body = {"username": username, "password": password}
    if roles is not None:
        body["roles"] = roles
    response = client.post("/auth/signup", json=body)
    assert response.status_code == 200, response.text
    return response.json()


def bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
