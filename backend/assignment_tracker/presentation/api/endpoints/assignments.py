"""Assignment CRUD endpoints."""

import logging
import re

from fastapi import APIRouter, Depends, Query, status

from assignment_tracker.application.schemas import (
    AssignmentCount,
    AssignmentCreate,
    AssignmentResponse,
    AssignmentUpdate,
)
from assignment_tracker.application.services import AssignmentService
from assignment_tracker.config import get_settings
from assignment_tracker.domain.exceptions import EntityNotFoundError
from assignment_tracker.infrastructure.dependencies import get_assignment_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/assignments", tags=["Assignments"])

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int(raw: str) -> int | None:
    """Parse the leading integer of ``raw``; ``None`` when there is none.

    ``"2"`` and ``"2abc"`` both give 2, ``"abc"`` and ``""`` give ``None``.
    """
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Past the interpreter's integer string length limit.
        return None


def _assignment_id(assignment_id: str) -> int:
    parsed = parse_int(assignment_id)
    if parsed is None:
        raise EntityNotFoundError("Assignment", assignment_id)
    return parsed


@router.get("", response_model=list[AssignmentResponse])
async def list_assignments(
    page: str | None = Query(None, description="The page number (default is 1)."),
    limit: str | None = Query(None, description="Number of assignments per page (default is 10)."),
    service: AssignmentService = Depends(get_assignment_service),
) -> list[AssignmentResponse]:
    """Retrieve a paginated list of assignments."""
    page_number = parse_int(page) if page is not None else 1
    page_size = parse_int(limit) if limit is not None else get_settings().default_page_limit
    assignments = await service.list_assignments(page=page_number, limit=page_size)
    return [AssignmentResponse.model_validate(a, from_attributes=True) for a in assignments]


@router.get("/count", response_model=AssignmentCount)
async def count_assignments(
    service: AssignmentService = Depends(get_assignment_service),
) -> AssignmentCount:
    """Return the total number of assignments."""
    return AssignmentCount(count=await service.count_assignments())


@router.get("/{assignment_id}", response_model=AssignmentResponse)
async def get_assignment(
    assignment_id: int = Depends(_assignment_id),
    service: AssignmentService = Depends(get_assignment_service),
) -> AssignmentResponse:
    """Retrieve a single assignment by ID."""
    assignment = await service.get_assignment(assignment_id)
    return AssignmentResponse.model_validate(assignment, from_attributes=True)


@router.post("", response_model=AssignmentResponse, status_code=status.HTTP_201_CREATED)
async def create_assignment(
    data: AssignmentCreate | None = None,
    service: AssignmentService = Depends(get_assignment_service),
) -> AssignmentResponse:
    """Create a new assignment."""
    if data is None:
        data = AssignmentCreate()
    logger.debug("POST /api/assignments body: %s", data.model_dump(by_alias=True))
    assignment = await service.create_assignment(data)
    return AssignmentResponse.model_validate(assignment, from_attributes=True)


@router.put("/{assignment_id}", response_model=AssignmentResponse)
async def update_assignment(
    data: AssignmentUpdate | None = None,
    assignment_id: int = Depends(_assignment_id),
    service: AssignmentService = Depends(get_assignment_service),
) -> AssignmentResponse:
    """Update an existing assignment. Every field is overwritten."""
    if data is None:
        data = AssignmentUpdate()
    assignment = await service.update_assignment(assignment_id, data)
    return AssignmentResponse.model_validate(assignment, from_attributes=True)


@router.delete("/{assignment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_assignment(
    assignment_id: int = Depends(_assignment_id),
    service: AssignmentService = Depends(get_assignment_service),
) -> None:
    """Delete an assignment by ID."""
    await service.delete_assignment(assignment_id)
