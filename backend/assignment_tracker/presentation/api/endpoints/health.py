"""Liveness endpoint reporting the build and the state of the store."""

from fastapi import APIRouter, Depends

from assignment_tracker.config import get_settings
from assignment_tracker.infrastructure.dependencies import get_assignment_store
from assignment_tracker.infrastructure.storage.json_assignment_store import JsonAssignmentStore

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(store: JsonAssignmentStore = Depends(get_assignment_store)) -> dict:
    """Report version, environment and how many assignments the store holds."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "assignments": await store.count(),
        "storeFileExists": store.path.is_file(),
    }
