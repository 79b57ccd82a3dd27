"""Domain models for legal cases and users."""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Set

from pydantic import BaseModel, ConfigDict, Field


class CaseStatus(str, Enum):
    """Case lifecycle status.

    Any status may follow any other; no transition graph is enforced.
    """

    NEW = "NEW"
    IN_PROGRESS = "IN_PROGRESS"
    ON_HOLD = "ON_HOLD"
    RESOLVED = "RESOLVED"
    CLOSED = "CLOSED"


class Case(BaseModel):
    """Case domain model."""

    id: Optional[int] = None
    case_number: str
    title: str
    description: Optional[str] = None
    status: CaseStatus
    created_date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = ConfigDict(from_attributes=True)


class User(BaseModel):
    """Registered user with its role names."""

    id: Optional[int] = None
    username: str
    password_hash: str
    roles: Set[str] = Field(default_factory=lambda: {"USER"})

    model_config = ConfigDict(from_attributes=True)
