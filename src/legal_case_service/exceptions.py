"""Domain error taxonomy for the legal case service.

Every condition the service layer raises on purpose derives from
CaseServiceError. The API boundary maps each one to its status code and
error label; anything else is treated as an internal failure.
"""

from typing import Optional


class CaseServiceError(Exception):
    """Base class for classified domain errors."""

    status_code: int = 500
    error: str = "Internal Server Error"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class CaseNotFoundError(CaseServiceError):
    """No case exists with the requested id."""

    status_code = 404
    error = "Not Found"

    def __init__(self, case_id: int):
        super().__init__(f"Case not found with id: {case_id}")
        self.case_id = case_id


class DuplicateCaseError(CaseServiceError):
    """Another case already uses the requested case number."""

    status_code = 409
    error = "Conflict"

    def __init__(self, case_number: str):
        super().__init__(f"Case number already exists: {case_number}")
        self.case_number = case_number


class InvalidArgumentError(CaseServiceError):
    """A request failed a semantic field check."""

    status_code = 400
    error = "Bad Request"


class CaseOperationError(CaseServiceError):
    """Wraps an unexpected lower-layer failure without leaking its detail."""

    status_code = 400
    error = "Bad Request"


class UnauthorizedError(CaseServiceError):
    """Credentials are missing, wrong, expired or otherwise unusable."""

    status_code = 401
    error = "Unauthorized"


class ForbiddenError(CaseServiceError):
    """The caller is authenticated but lacks the required role."""

    status_code = 403
    error = "Forbidden"


class UserAlreadyExistsError(CaseServiceError):
    """Signup attempted with a username that is already registered."""

    status_code = 409
    error = "Conflict"

    def __init__(self, username: str):
        super().__init__(f"Username already exists: {username}")
        self.username = username
