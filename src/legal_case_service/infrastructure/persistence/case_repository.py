"""Case Repository.

This module provides the repository pattern for Case domain model persistence.
It abstracts database operations and provides clean interfaces for the service layer.
"""

from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from datetime import timezone
from itertools import count
from typing import AsyncIterator, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from legal_case_service.exceptions import CaseNotFoundError, DuplicateCaseError
from legal_case_service.infrastructure.database.models import CaseDB
from legal_case_service.models.case import Case, CaseStatus


# ============================================================
# Repository Interface
# ============================================================

class CaseRepository(ABC):
    """
    Abstract repository interface for Case persistence.

    Implementations:
    - SQLAlchemyCaseRepository: Production database
    - InMemoryCaseRepository: Testing and development
    """

    @abstractmethod
    async def save(self, case: Case) -> Case:
        """
        Insert a new case (id is None) or overwrite an existing one.

        Args:
            case: Case domain object

        Returns:
            Saved case with its assigned id

        Raises:
            DuplicateCaseError: If the store rejects the case number as taken
            CaseNotFoundError: If an existing id no longer exists
        """

    @abstractmethod
    async def get(self, case_id: int) -> Optional[Case]:
        """
        Retrieve case by ID.

        Returns:
            Case if found, None otherwise
        """

    @abstractmethod
    async def list(self, status: Optional[CaseStatus] = None) -> List[Case]:
        """
        List cases ordered by id, optionally only those with the given status.
        """

    @abstractmethod
    async def delete(self, case_id: int) -> bool:
        """
        Delete case by ID.

        Returns:
            True if deleted, False if not found
        """

    @abstractmethod
    async def exists(self, case_id: int) -> bool:
        """Return True if a case with this id exists."""

    @abstractmethod
    async def exists_by_case_number(self, case_number: str) -> bool:
        """Return True if any case uses this case number."""

    @asynccontextmanager
    async def begin_transaction(self) -> AsyncIterator[None]:
        """
        Unit of work around a service operation.

        Default implementation is a no-op. Stores that support transactions
        commit on normal exit and roll back when the block raises.
        """
        yield


# ============================================================
# In-Memory Implementation (for Testing)
# ============================================================

class InMemoryCaseRepository(CaseRepository):
    """
    In-memory case repository for testing and development.

    Data stored in dictionary, not persistent across restarts.
    """

    def __init__(self):
        """Initialize empty in-memory store."""
        self._cases: Dict[int, Case] = {}
        self._ids = count(1)

    async def save(self, case: Case) -> Case:
        """Save case to memory, enforcing case number uniqueness."""
        for other in self._cases.values():
            if other.case_number == case.case_number and other.id != case.id:
                raise DuplicateCaseError(case.case_number)

        if case.id is None:
            stored = case.model_copy(update={"id": next(self._ids)})
        elif case.id in self._cases:
            stored = case.model_copy()
        else:
            raise CaseNotFoundError(case.id)

        self._cases[stored.id] = stored
        return stored.model_copy()

    async def get(self, case_id: int) -> Optional[Case]:
        """Get case from memory."""
        case = self._cases.get(case_id)
        return case.model_copy() if case else None

    async def list(self, status: Optional[CaseStatus] = None) -> List[Case]:
        """List cases, optionally filtered by status."""
        cases = sorted(self._cases.values(), key=lambda c: c.id)
        if status:
            cases = [c for c in cases if c.status == status]
        return [c.model_copy() for c in cases]

    async def delete(self, case_id: int) -> bool:
        """Delete case from memory."""
        if case_id in self._cases:
            del self._cases[case_id]
            return True
        return False

    async def exists(self, case_id: int) -> bool:
        return case_id in self._cases

    async def exists_by_case_number(self, case_number: str) -> bool:
        return any(c.case_number == case_number for c in self._cases.values())

    @asynccontextmanager
    async def begin_transaction(self) -> AsyncIterator[None]:
        """Restore the previous contents if the block raises."""
        snapshot = dict(self._cases)
        try:
            yield
        except Exception:
            self._cases = snapshot
            raise


# ============================================================
# SQLAlchemy Implementation (Production)
# ============================================================

class SQLAlchemyCaseRepository(CaseRepository):
    """
    Case repository over the legal_case table.

    Writes are flushed, not committed; begin_transaction() owns the commit.
    """

    def __init__(self, db_session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            db_session: SQLAlchemy async session
        """
        self.db = db_session

    @staticmethod
    def _to_domain(row: CaseDB) -> Case:
        case = Case.model_validate(row)
        # SQLite hands back naive datetimes; stored values are always UTC
        if case.created_date.tzinfo is None:
            case.created_date = case.created_date.replace(tzinfo=timezone.utc)
        return case

    async def save(self, case: Case) -> Case:
        if case.id is None:
            row = CaseDB(
                case_number=case.case_number,
                title=case.title,
                description=case.description,
                status=case.status,
                created_date=case.created_date,
            )
            self.db.add(row)
        else:
            row = await self.db.get(CaseDB, case.id)
            if row is None:
                raise CaseNotFoundError(case.id)
            row.case_number = case.case_number
            row.title = case.title
            row.description = case.description
            row.status = case.status

        try:
            await self.db.flush()
        except IntegrityError as e:
            raise DuplicateCaseError(case.case_number) from e

        return self._to_domain(row)

    async def get(self, case_id: int) -> Optional[Case]:
        row = await self.db.get(CaseDB, case_id)
        return self._to_domain(row) if row else None

    async def list(self, status: Optional[CaseStatus] = None) -> List[Case]:
        query = select(CaseDB).order_by(CaseDB.id)
        if status:
            query = query.where(CaseDB.status == status)
        result = await self.db.execute(query)
        return [self._to_domain(row) for row in result.scalars().all()]

    async def delete(self, case_id: int) -> bool:
        row = await self.db.get(CaseDB, case_id)
        if row is None:
            return False
        await self.db.delete(row)
        await self.db.flush()
        return True

    async def exists(self, case_id: int) -> bool:
        result = await self.db.execute(select(CaseDB.id).where(CaseDB.id == case_id))
        return result.scalar_one_or_none() is not None

    async def exists_by_case_number(self, case_number: str) -> bool:
        result = await self.db.execute(
            select(CaseDB.id).where(CaseDB.case_number == case_number).limit(1)
        )
        return result.scalar_one_or_none() is not None

    @asynccontextmanager
    async def begin_transaction(self) -> AsyncIterator[None]:
        """Commit on success, roll back on any exception."""
        try:
            yield
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
