"""Application service (use case) for Assignment operations."""

import logging

from assignment_tracker.application.interfaces import AssignmentRepository
from assignment_tracker.application.schemas import AssignmentCreate, AssignmentUpdate
from assignment_tracker.domain.entities import Assignment
from assignment_tracker.domain.exceptions import EntityNotFoundError, MissingFieldError

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("name", "due_date")
_WIRE_NAMES = {"name": "name", "due_date": "dueDate"}


class AssignmentService:
    """Orchestrates assignment business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: AssignmentRepository):
        self._repository = repository

    async def get_assignment(self, assignment_id: int) -> Assignment:
        assignment = await self._repository.get_by_id(assignment_id)
        if assignment is None:
            raise EntityNotFoundError("Assignment", assignment_id)
        return assignment

    async def list_assignments(self, page: int | None = 1, limit: int | None = 10) -> list[Assignment]:
        """Return one page of assignments.

        ``None`` stands for a value that could not be parsed as a number and
        always produces an empty page. No other bounds checking is done:
        ``start = (page - 1) * limit`` and ``end = start + limit`` are used as
        slice bounds directly, so negative values count from the end.
        """
        if page is None or limit is None:
            return []
        start = (page - 1) * limit
        end = start + limit
        return await self._repository.get_slice(start, end)

    async def count_assignments(self) -> int:
        return await self._repository.count()

    async def create_assignment(self, data: AssignmentCreate) -> Assignment:
        for field in _REQUIRED_FIELDS:
            if not getattr(data, field):
                raise MissingFieldError(_WIRE_NAMES[field])

        assignment = await self._repository.create(
            name=data.name,
            due_date=data.due_date,
            submitted=data.submitted or False,
        )
        logger.info("Created assignment %d (%s)", assignment.id, assignment.name)
        return assignment

    async def update_assignment(self, assignment_id: int, data: AssignmentUpdate) -> Assignment:
        assignment = await self.get_assignment(assignment_id)
        assignment.update(
            name=data.name,
            due_date=data.due_date,
            submitted=data.submitted,
        )
        return await self._repository.update(assignment)

    async def delete_assignment(self, assignment_id: int) -> bool:
        deleted = await self._repository.delete(assignment_id)
        if not deleted:
            raise EntityNotFoundError("Assignment", assignment_id)
        return deleted
