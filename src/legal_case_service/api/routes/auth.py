"""Authentication API routes."""

import logging

from fastapi import APIRouter, Depends

from legal_case_service.api.dependencies import get_auth_manager
from legal_case_service.core import AuthManager
from legal_case_service.models import AuthRequest, AuthResponse, ErrorResponse, SignupRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/signup",
    response_model=AuthResponse,
    summary="Register new user",
    description="""
Creates a new user account and returns a bearer token for it.

**Request Body Example**:
```json
{"username": "clerk", "password": "s3cret", "roles": ["USER"]}
```

`roles` is optional and defaults to `["USER"]`.
    """,
    responses={
        200: {"description": "User registered successfully"},
        400: {"model": ErrorResponse, "description": "Invalid input"},
        409: {"model": ErrorResponse, "description": "Username already exists"},
    },
)
async def signup(
    request: SignupRequest,
    auth_manager: AuthManager = Depends(get_auth_manager),
):
    """Register a user."""
    return await auth_manager.signup(request)


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="User login",
    description="Authenticates a user and returns a JWT bearer token with the user's roles.",
    responses={
        200: {"description": "Login successful"},
        400: {"model": ErrorResponse, "description": "Invalid input"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(
    request: AuthRequest,
    auth_manager: AuthManager = Depends(get_auth_manager),
):
    """Authenticate and issue a token."""
    return await auth_manager.login(request)
