"""Service layer."""

from .auth_manager import AuthenticatedUser, AuthManager
from .case_manager import CaseManager
from .validation import validate_case_request

__all__ = ["AuthenticatedUser", "AuthManager", "CaseManager", "validate_case_request"]
