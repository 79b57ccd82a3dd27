"""Case business logic manager - Repository Pattern."""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from legal_case_service.core.validation import validate_case_request
from legal_case_service.exceptions import (
    CaseNotFoundError,
    CaseOperationError,
    CaseServiceError,
    DuplicateCaseError,
)
from legal_case_service.infrastructure.persistence import CaseRepository
from legal_case_service.models import Case, CaseRequest, CaseResponse, CaseStatus

logger = logging.getLogger(__name__)


class CaseManager:
    """Business logic for case management operations.

    This class implements the service layer using the Repository pattern.
    It validates requests, checks existence and case number uniqueness, and
    delegates persistence to a CaseRepository. Classified domain errors pass
    through unchanged; anything else is wrapped in CaseOperationError.
    """

    def __init__(self, repository: CaseRepository):
        """Initialize case manager with repository.

        Args:
            repository: CaseRepository implementation (InMemory or SQLAlchemy)
        """
        self.repository = repository

    async def list_cases(self, status: Optional[CaseStatus] = None) -> List[CaseResponse]:
        """List all cases, optionally only those in one status.

        Raises:
            CaseOperationError: With status 500 if the store fails
        """
        logger.info("Retrieving all cases" if status is None else f"Retrieving cases with status {status.value}")
        try:
            cases = await self.repository.list(status=status)
        except Exception as e:
            logger.error(f"Error retrieving all cases: {e}")
            raise CaseOperationError("Failed to retrieve cases", status_code=500) from e

        logger.info(f"Retrieved {len(cases)} cases")
        return [CaseResponse.from_case(case) for case in cases]

    async def get_case(self, case_id: int) -> CaseResponse:
        """Get a case by ID.

        Raises:
            CaseNotFoundError: If no case has this id
        """
        logger.info(f"Retrieving case with id: {case_id}")
        try:
            case = await self.repository.get(case_id)
        except Exception as e:
            logger.error(f"Error retrieving case with id {case_id}: {e}")
            raise CaseOperationError("Failed to retrieve case") from e

        if case is None:
            logger.error(f"Case not found with id: {case_id}")
            raise CaseNotFoundError(case_id)

        return CaseResponse.from_case(case)

    async def create_case(self, request: Optional[CaseRequest]) -> CaseResponse:
        """Create a new case.

        Raises:
            InvalidArgumentError: If a field check fails
            DuplicateCaseError: If the case number is already used
        """
        logger.info(f"Creating new case with case number: {request.case_number if request else None}")
        try:
            validate_case_request(request)

            async with self.repository.begin_transaction():
                if await self.repository.exists_by_case_number(request.case_number):
                    logger.error(f"Case number already exists: {request.case_number}")
                    raise DuplicateCaseError(request.case_number)

                case = Case(
                    case_number=request.case_number,
                    title=request.title,
                    description=request.description,
                    status=request.status,
                    created_date=datetime.now(timezone.utc),
                )
                saved = await self.repository.save(case)
        except CaseServiceError:
            raise
        except Exception as e:
            logger.error(f"Error creating case: {e}")
            raise CaseOperationError("Failed to create case") from e

        logger.info(f"Successfully created case with id: {saved.id}")
        return CaseResponse.from_case(saved)

    async def update_case(self, case_id: int, request: Optional[CaseRequest]) -> CaseResponse:
        """Replace every mutable field of a case.

        created_date is left untouched. Keeping the case's own number never
        counts as a duplicate.

        Raises:
            InvalidArgumentError: If a field check fails
            CaseNotFoundError: If no case has this id
            DuplicateCaseError: If the new case number belongs to another case
        """
        logger.info(f"Updating case with id: {case_id}")
        try:
            validate_case_request(request)

            async with self.repository.begin_transaction():
                existing = await self.repository.get(case_id)
                if existing is None:
                    logger.error(f"Case not found with id: {case_id}")
                    raise CaseNotFoundError(case_id)

                if (
                    existing.case_number != request.case_number
                    and await self.repository.exists_by_case_number(request.case_number)
                ):
                    logger.error(f"Cannot update case. Case number already exists: {request.case_number}")
                    raise DuplicateCaseError(request.case_number)

                existing.case_number = request.case_number
                existing.title = request.title
                existing.description = request.description
                existing.status = request.status
                updated = await self.repository.save(existing)
        except CaseServiceError:
            raise
        except Exception as e:
            logger.error(f"Error updating case with id {case_id}: {e}")
            raise CaseOperationError("Failed to update case") from e

        logger.info(f"Successfully updated case with id: {case_id}")
        return CaseResponse.from_case(updated)

    async def delete_case(self, case_id: int) -> None:
        """Delete a case permanently.

        Raises:
            CaseNotFoundError: If no case has this id
        """
        logger.info(f"Deleting case with id: {case_id}")
        try:
            async with self.repository.begin_transaction():
                if not await self.repository.exists(case_id):
                    logger.error(f"Case not found with id: {case_id}")
                    raise CaseNotFoundError(case_id)
                await self.repository.delete(case_id)
        except CaseServiceError:
            raise
        except Exception as e:
            logger.error(f"Error deleting case with id {case_id}: {e}")
            raise CaseOperationError("Failed to delete case") from e

        logger.info(f"Successfully deleted case with id: {case_id}")
