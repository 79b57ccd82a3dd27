"""Persistence layer - Repository Pattern implementation."""

from legal_case_service.infrastructure.persistence.case_repository import (
    CaseRepository,
    InMemoryCaseRepository,
    SQLAlchemyCaseRepository,
)
from legal_case_service.infrastructure.persistence.user_repository import (
    InMemoryUserRepository,
    SQLAlchemyUserRepository,
    UserRepository,
)

__all__ = [
    "CaseRepository",
    "InMemoryCaseRepository",
    "SQLAlchemyCaseRepository",
    "UserRepository",
    "InMemoryUserRepository",
    "SQLAlchemyUserRepository",
]
