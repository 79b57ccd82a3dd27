"""Field-level checks applied to case requests before any store access."""

import re
from typing import Optional

from legal_case_service.exceptions import InvalidArgumentError
from legal_case_service.models import CaseRequest

CASE_NUMBER_PATTERN = re.compile(r"^[A-Z0-9]{2,20}$")
TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_case_request(request: Optional[CaseRequest]) -> None:
    """Check a case request, raising on the first rule it breaks.

    Raises:
        InvalidArgumentError: With a message naming the failed rule
    """
    if request is None:
        raise InvalidArgumentError("Case request cannot be null")

    if _is_blank(request.case_number):
        raise InvalidArgumentError("Case number is required")
    if not CASE_NUMBER_PATTERN.fullmatch(request.case_number):
        raise InvalidArgumentError(
            "Case number must be 2-20 characters long and "
            "contain only uppercase letters and numbers"
        )

    if _is_blank(request.title):
        raise InvalidArgumentError("Case title is required")
    if not TITLE_MIN_LENGTH <= len(request.title) <= TITLE_MAX_LENGTH:
        raise InvalidArgumentError(
            f"Title must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters"
        )

    if request.status is None:
        raise InvalidArgumentError("Case status is required")

    if request.description is not None and len(request.description) > DESCRIPTION_MAX_LENGTH:
        raise InvalidArgumentError(
            f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters"
        )
