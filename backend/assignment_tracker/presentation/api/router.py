"""Top-level API router — includes the endpoint routers."""

from fastapi import APIRouter

from assignment_tracker.presentation.api.endpoints.assignments import router as assignments_router
from assignment_tracker.presentation.api.endpoints.health import router as health_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(assignments_router)
