"""API request and response models."""

from datetime import datetime
from typing import List, Optional, Set

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .case import Case, CaseStatus


class ApiModel(BaseModel):
    """Base for wire models: camelCase on the wire, snake_case accepted."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CaseRequest(ApiModel):
    """Request to create or fully replace a case.

    Fields are optional at the deserialization layer so that missing or
    blank values reach the explicit validation in core.validation and come
    back with a specific message. Unknown status values are still rejected
    here, before any service code runs.
    """

    case_number: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[CaseStatus] = None


class CaseResponse(ApiModel):
    """Response containing a single case."""

    id: int
    case_number: str
    title: str
    description: Optional[str] = None
    status: CaseStatus
    created_date: datetime

    @classmethod
    def from_case(cls, case: Case) -> "CaseResponse":
        """Convert Case model to response."""
        return cls(
            id=case.id,
            case_number=case.case_number,
            title=case.title,
            description=case.description,
            status=case.status,
            created_date=case.created_date,
        )


class SignupRequest(ApiModel):
    """Request to register a new user."""

    username: str
    password: str
    roles: Optional[Set[str]] = None


class AuthRequest(ApiModel):
    """Username and password login request."""

    username: str
    password: str


class AuthResponse(ApiModel):
    """Issued bearer token and the roles it carries."""

    token: str
    roles: List[str]


class ErrorResponse(ApiModel):
    """Structured error body returned for every failed request."""

    timestamp: datetime
    status: int
    error: str
    message: str
    path: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str
    database: str
