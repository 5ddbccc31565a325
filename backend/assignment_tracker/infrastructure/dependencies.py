"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from assignment_tracker.application.services import AssignmentService
from assignment_tracker.infrastructure.storage.json_assignment_store import JsonAssignmentStore


def get_assignment_store(request: Request) -> JsonAssignmentStore:
    """Return the store created for this application instance."""
    return request.app.state.store


async def get_assignment_service(
    store: JsonAssignmentStore = Depends(get_assignment_store),
) -> AsyncGenerator[AssignmentService, None]:
    """Provides an AssignmentService bound to the application's store."""
    yield AssignmentService(store)
