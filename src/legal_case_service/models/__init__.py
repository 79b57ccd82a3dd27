"""Models package."""

from .case import Case, CaseStatus, User
from .requests import (
    AuthRequest,
    AuthResponse,
    CaseRequest,
    CaseResponse,
    ErrorResponse,
    HealthResponse,
    SignupRequest,
)

__all__ = [
    "Case",
    "CaseStatus",
    "User",
    "AuthRequest",
    "AuthResponse",
    "CaseRequest",
    "CaseResponse",
    "ErrorResponse",
    "HealthResponse",
    "SignupRequest",
]
