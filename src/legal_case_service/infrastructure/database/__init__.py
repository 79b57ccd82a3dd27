"""Database infrastructure package."""

from .client import DatabaseClient
from .models import Base, CaseDB, UserDB, UserRoleDB

__all__ = ["DatabaseClient", "Base", "CaseDB", "UserDB", "UserRoleDB"]
