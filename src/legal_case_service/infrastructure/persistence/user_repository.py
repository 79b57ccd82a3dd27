"""User Repository: lookup and creation of user records with their roles."""

from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from itertools import count
from typing import AsyncIterator, Dict, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from legal_case_service.exceptions import UserAlreadyExistsError
from legal_case_service.infrastructure.database.models import UserDB, UserRoleDB
from legal_case_service.models.case import User


class UserRepository(ABC):
    """Abstract repository interface for User persistence."""

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Return the user with this username, or None."""

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Persist a new user and its roles.

        Raises:
            UserAlreadyExistsError: If the username is taken
        """

    async def exists_by_username(self, username: str) -> bool:
        return await self.get_by_username(username) is not None

    @asynccontextmanager
    async def begin_transaction(self) -> AsyncIterator[None]:
        yield


class InMemoryUserRepository(UserRepository):
    """In-memory user repository for testing and development."""

    def __init__(self):
        self._users: Dict[str, User] = {}
        self._ids = count(1)

    async def get_by_username(self, username: str) -> Optional[User]:
        user = self._users.get(username)
        return user.model_copy(deep=True) if user else None

    async def create(self, user: User) -> User:
        if user.username in self._users:
            raise UserAlreadyExistsError(user.username)
        stored = user.model_copy(update={"id": next(self._ids)}, deep=True)
        self._users[stored.username] = stored
        return stored.model_copy(deep=True)


class SQLAlchemyUserRepository(UserRepository):
    """User repository over the user and user_roles tables."""

    def __init__(self, db_session: AsyncSession):
        self.db = db_session

    @staticmethod
    def _to_domain(row: UserDB) -> User:
        return User(
            id=row.id,
            username=row.username,
            password_hash=row.password,
            roles={r.role for r in row.roles},
        )

    async def get_by_username(self, username: str) -> Optional[User]:
        result = await self.db.execute(select(UserDB).where(UserDB.username == username))
        row = result.scalar_one_or_none()
        return self._to_domain(row) if row else None

    async def create(self, user: User) -> User:
        row = UserDB(
            username=user.username,
            password=user.password_hash,
            roles=[UserRoleDB(role=role) for role in sorted(user.roles)],
        )
        self.db.add(row)
        try:
            await self.db.flush()
        except IntegrityError as e:
            raise UserAlreadyExistsError(user.username) from e
        return self._to_domain(row)

    @asynccontextmanager
    async def begin_transaction(self) -> AsyncIterator[None]:
        """Commit on success, roll back on any exception."""
        try:
            yield
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
