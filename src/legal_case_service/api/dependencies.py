"""Request-scoped wiring of repositories, managers and the caller's identity.

Everything is resolved from app.state, which create_app() populates; there
are no module-level singletons.
"""

import logging
from typing import AsyncGenerator, Callable, Optional

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from legal_case_service.core import AuthenticatedUser, AuthManager, CaseManager
from legal_case_service.exceptions import ForbiddenError
from legal_case_service.infrastructure.persistence import (
    CaseRepository,
    SQLAlchemyCaseRepository,
    SQLAlchemyUserRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)

# auto_error=False so a missing header reaches authenticate_token and gets
# the structured 401 body
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)


async def get_session(request: Request) -> AsyncGenerator[Optional[AsyncSession], None]:
    """One database session per request, or None with in-memory storage."""
    db_client = request.app.state.db_client
    if db_client is None:
        yield None
        return
    async with db_client.session_scope() as session:
        yield session


async def get_case_repository(
    request: Request,
    session: Optional[AsyncSession] = Depends(get_session),
) -> CaseRepository:
    """Dependency to get case repository for the configured storage type."""
    if session is None:
        return request.app.state.case_repository
    return SQLAlchemyCaseRepository(session)


async def get_user_repository(
    request: Request,
    session: Optional[AsyncSession] = Depends(get_session),
) -> UserRepository:
    """Dependency to get user repository for the configured storage type."""
    if session is None:
        return request.app.state.user_repository
    return SQLAlchemyUserRepository(session)


async def get_case_manager(
    repository: CaseRepository = Depends(get_case_repository),
) -> CaseManager:
    """Dependency to get case manager with repository."""
    return CaseManager(repository)


async def get_auth_manager(
    request: Request,
    repository: UserRepository = Depends(get_user_repository),
) -> AuthManager:
    """Dependency to get auth manager with repository and security primitives."""
    state = request.app.state
    return AuthManager(repository, state.password_hasher, state.token_issuer)


async def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    auth_manager: AuthManager = Depends(get_auth_manager),
) -> AuthenticatedUser:
    """Resolve the bearer token on the request to an authenticated user.

    Raises:
        UnauthorizedError: If the token is missing or invalid
    """
    return await auth_manager.authenticate_token(token)


def require_roles(*roles: str) -> Callable:
    """Build a dependency admitting only callers holding one of the roles.

    Raises:
        ForbiddenError: If the authenticated user has none of the roles
    """

    async def check_roles(
        current_user: AuthenticatedUser = Depends(get_current_user),
    ) -> AuthenticatedUser:
        if not current_user.has_any_role(*roles):
            logger.warning(
                f"User {current_user.username} lacks required role (one of {', '.join(roles)})"
            )
            raise ForbiddenError("Access denied")
        return current_user

    return check_roles
