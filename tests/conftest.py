"""Shared fixtures for the legal-case-service test suite."""

from typing import Dict, Iterator

import pytest
from fastapi.testclient import TestClient

from legal_case_service.config import Settings
from legal_case_service.core import AuthManager, CaseManager
from legal_case_service.infrastructure.persistence import (
    InMemoryCaseRepository,
    InMemoryUserRepository,
)
from legal_case_service.infrastructure.security import PasswordHasher, TokenIssuer
from legal_case_service.main import create_app

from helpers import TEST_SECRET, bearer, signup


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings backed by a throwaway SQLite file."""
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        storage_type="sql",
        jwt_secret_key=TEST_SECRET,
        bootstrap_admin_username=None,
        bootstrap_admin_password=None,
    )


@pytest.fixture
def token_issuer() -> TokenIssuer:
    return TokenIssuer(TEST_SECRET, expire_minutes=5)


@pytest.fixture
def password_hasher() -> PasswordHasher:
    return PasswordHasher()


@pytest.fixture
def case_repository() -> InMemoryCaseRepository:
    return InMemoryCaseRepository()


@pytest.fixture
def case_manager(case_repository) -> CaseManager:
    return CaseManager(case_repository)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def auth_manager(user_repository, password_hasher, token_issuer) -> AuthManager:
    return AuthManager(user_repository, password_hasher, token_issuer)


@pytest.fixture
def client(settings) -> Iterator[TestClient]:
    """Test client running startup and shutdown hooks against a fresh database."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def admin_headers(client) -> Dict[str, str]:
    return bearer(signup(client, "admin", roles=["ADMIN"])["token"])


@pytest.fixture
def user_headers(client) -> Dict[str, str]:
    return bearer(signup(client, "alice")["token"])
