from .assignment import (
    AssignmentCount,
    AssignmentCreate,
    AssignmentResponse,
    AssignmentUpdate,
)

__all__ = [
    "AssignmentCount",
    "AssignmentCreate",
    "AssignmentResponse",
    "AssignmentUpdate",
]
