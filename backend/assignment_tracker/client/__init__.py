"""Client for the assignment API: HTTP adapter, board controller and HTML rendering."""

from .api_client import AssignmentApiClient
from .board import AssignmentBoard, AssignmentForm, BoardState
from .render import render_board

__all__ = [
    "AssignmentApiClient",
    "AssignmentBoard",
    "AssignmentForm",
    "BoardState",
    "render_board",
]
