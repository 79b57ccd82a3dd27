"""Signup, login and token authentication."""

import logging
from typing import Optional, Set

from legal_case_service.exceptions import (
    InvalidArgumentError,
    UnauthorizedError,
    UserAlreadyExistsError,
)
from legal_case_service.infrastructure.persistence import UserRepository
from legal_case_service.infrastructure.security import PasswordHasher, TokenIssuer
from legal_case_service.models import AuthRequest, AuthResponse, SignupRequest, User

logger = logging.getLogger(__name__)

DEFAULT_ROLES = frozenset({"USER"})


class AuthenticatedUser:
    """Principal resolved from a bearer token."""

    def __init__(self, username: str, roles: Set[str]):
        self.username = username
        self.roles = roles

    def has_any_role(self, *roles: str) -> bool:
        return bool(self.roles.intersection(roles))

    def __repr__(self) -> str:
        return f"AuthenticatedUser(username={self.username!r}, roles={sorted(self.roles)!r})"


class AuthManager:
    """Orchestrates user registration and credential checks."""

    def __init__(self, repository: UserRepository, password_hasher: PasswordHasher, token_issuer: TokenIssuer):
        self.repository = repository
        self.password_hasher = password_hasher
        self.token_issuer = token_issuer

    def _response_for(self, user: User) -> AuthResponse:
        token = self.token_issuer.issue(user.username, user.roles)
        return AuthResponse(token=token, roles=sorted(user.roles))

    async def signup(self, request: SignupRequest) -> AuthResponse:
        """Register a user and return a token for it.

        Raises:
            InvalidArgumentError: If username or password is blank
            UserAlreadyExistsError: If the username is taken
        """
        logger.debug(f"Received signup request for username: {request.username}")
        if not request.username or not request.username.strip():
            raise InvalidArgumentError("Username is required")
        if not request.password or not request.password.strip():
            raise InvalidArgumentError("Password is required")

        async with self.repository.begin_transaction():
            if await self.repository.exists_by_username(request.username):
                logger.warning(f"Username already exists: {request.username}")
                raise UserAlreadyExistsError(request.username)

            roles = set(request.roles) if request.roles else set(DEFAULT_ROLES)
            user = await self.repository.create(
                User(
                    username=request.username,
                    password_hash=self.password_hasher.hash(request.password),
                    roles=roles,
                )
            )

        logger.info(f"User registered successfully: {user.username}")
        return self._response_for(user)

    async def login(self, request: AuthRequest) -> AuthResponse:
        """Check credentials and issue a token.

        Raises:
            UnauthorizedError: If the username is unknown or the password is wrong
        """
        logger.debug(f"Received login request for username: {request.username}")
        user = await self.repository.get_by_username(request.username)
        if user is None or not self.password_hasher.verify(request.password, user.password_hash):
            logger.warning(f"Failed login attempt for username: {request.username}")
            raise UnauthorizedError("Invalid username or password")

        logger.info(f"User logged in successfully: {user.username}")
        return self._response_for(user)

    async def authenticate_token(self, token: Optional[str]) -> AuthenticatedUser:
        """Resolve a bearer token to the user it names.

        Roles come from the stored user, so a token outliving a deleted
        account is rejected.

        Raises:
            UnauthorizedError: If the token is missing, invalid, expired or names no user
        """
        if not token:
            raise UnauthorizedError("Not authenticated")

        token_data = self.token_issuer.decode(token)
        user = await self.repository.get_by_username(token_data.username)
        if user is None:
            logger.warning(f"Token subject no longer exists: {token_data.username}")
            raise UnauthorizedError("Could not validate credentials")

        return AuthenticatedUser(user.username, set(user.roles))

    async def ensure_admin(self, username: str, password: str) -> bool:
        """Create an ADMIN account unless the username is already registered.

        Returns:
            True if the account was created
        """
        if await self.repository.exists_by_username(username):
            return False
        await self.signup(SignupRequest(username=username, password=password, roles={"ADMIN"}))
        logger.info(f"Seeded admin account: {username}")
        return True
