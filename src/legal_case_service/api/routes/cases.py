"""Case API routes.

Each route names the roles it admits through require_roles(); the check runs
before the request body is handed to the case manager.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from legal_case_service.api.dependencies import get_case_manager, require_roles
from legal_case_service.core import AuthenticatedUser, CaseManager
from legal_case_service.models import CaseRequest, CaseResponse, CaseStatus, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cases", tags=["Case Management"])

ADMIN_ONLY = require_roles("ADMIN")
USER_OR_ADMIN = require_roles("USER", "ADMIN")

_AUTH_ERRORS = {
    401: {"model": ErrorResponse, "description": "Missing, invalid or expired bearer token"},
    403: {"model": ErrorResponse, "description": "Not authorized"},
}


# =============================================================================
# Core CRUD Endpoints
# =============================================================================

@router.get(
    "/{case_id}",
    response_model=CaseResponse,
    summary="Get case by ID",
    description="""
Retrieves a specific case by its numeric ID.

**Authorization**: ADMIN role required
    """,
    responses={
        200: {"description": "Case found"},
        404: {"model": ErrorResponse, "description": "Case not found"},
        **_AUTH_ERRORS,
    },
)
async def get_case(
    case_id: int,
    current_user: AuthenticatedUser = Depends(ADMIN_ONLY),
    case_manager: CaseManager = Depends(get_case_manager),
):
    """Get a case by ID."""
    logger.debug(f"Received request to get case with id: {case_id}")
    return await case_manager.get_case(case_id)


@router.get(
    "",
    response_model=List[CaseResponse],
    summary="Get all cases",
    description="""
Retrieves all cases, ordered by ID. Pass `status` to return only cases in
that status.

**Authorization**: USER or ADMIN role required
    """,
    responses={
        200: {"description": "Cases returned"},
        **_AUTH_ERRORS,
    },
)
async def list_cases(
    status_filter: Optional[CaseStatus] = Query(None, alias="status"),
    current_user: AuthenticatedUser = Depends(USER_OR_ADMIN),
    case_manager: CaseManager = Depends(get_case_manager),
):
    """List cases."""
    logger.debug("Received request to get all cases")
    return await case_manager.list_cases(status=status_filter)


@router.post(
    "",
    response_model=CaseResponse,
    summary="Create new case",
    description="""
Creates a new case. The ID and `createdDate` are assigned by the server.

**Request Body Example**:
```json
{
  "caseNumber": "ABC123",
  "title": "Property Dispute Case",
  "description": "Property dispute between tenant and landlord",
  "status": "NEW"
}
```

**Validation**:
- `caseNumber`: 2-20 uppercase letters or digits, unique across cases
- `title`: 3-100 characters
- `description`: optional, at most 500 characters
- `status`: one of NEW, IN_PROGRESS, ON_HOLD, RESOLVED, CLOSED

**Authorization**: USER or ADMIN role required
    """,
    responses={
        200: {"description": "Case created successfully"},
        400: {"model": ErrorResponse, "description": "Invalid input"},
        409: {"model": ErrorResponse, "description": "Case number already exists"},
        **_AUTH_ERRORS,
    },
)
async def create_case(
    request: Optional[CaseRequest] = None,
    current_user: AuthenticatedUser = Depends(USER_OR_ADMIN),
    case_manager: CaseManager = Depends(get_case_manager),
):
    """Create a new case."""
    logger.debug(f"Received request to create case with number: {request.case_number if request else None}")
    return await case_manager.create_case(request)


@router.put(
    "/{case_id}",
    response_model=CaseResponse,
    summary="Update case",
    description="""
Replaces every field of an existing case: case number, title, description
and status. `createdDate` is never changed. Any status may follow any other.

**Authorization**: ADMIN role required
    """,
    responses={
        200: {"description": "Case updated successfully"},
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Case not found"},
        409: {"model": ErrorResponse, "description": "Case number already exists"},
        **_AUTH_ERRORS,
    },
)
async def update_case(
    case_id: int,
    request: Optional[CaseRequest] = None,
    current_user: AuthenticatedUser = Depends(ADMIN_ONLY),
    case_manager: CaseManager = Depends(get_case_manager),
):
    """Update a case."""
    logger.debug(f"Received request to update case with id: {case_id}")
    return await case_manager.update_case(case_id, request)


@router.delete(
    "/{case_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete case",
    description="""
Permanently deletes a case. There is no soft delete; deleting the same ID a
second time returns 404.

**Authorization**: ADMIN role required
    """,
    responses={
        204: {"description": "Case deleted successfully"},
        404: {"model": ErrorResponse, "description": "Case not found"},
        **_AUTH_ERRORS,
    },
)
async def delete_case(
    case_id: int,
    current_user: AuthenticatedUser = Depends(ADMIN_ONLY),
    case_manager: CaseManager = Depends(get_case_manager),
):
    """Delete a case."""
    logger.debug(f"Received request to delete case with id: {case_id}")
    await case_manager.delete_case(case_id)
