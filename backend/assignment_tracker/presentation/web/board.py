"""Server-rendered assignment board and the plain-text welcome route.

The board page is a plain HTML form round-trip: the add/edit form and the
per-row delete buttons post form-encoded bodies back here, and every post
answers with a 303 redirect to the page it came from.
"""

import logging

from fastapi import APIRouter, Depends, Form, Query, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from assignment_tracker.application.schemas import AssignmentCreate, AssignmentUpdate
from assignment_tracker.application.services import AssignmentService
from assignment_tracker.client.board import AssignmentForm, BoardState
from assignment_tracker.client.render import render_board
from assignment_tracker.domain.exceptions import EntityNotFoundError
from assignment_tracker.infrastructure.dependencies import get_assignment_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Web"])

BOARD_PATH = "/board"


def _back_to_board(page: int, **params: int) -> RedirectResponse:
    query = "&".join(f"{key}={value}" for key, value in {"page": page, **params}.items())
    return RedirectResponse(f"{BOARD_PATH}?{query}", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/", response_class=PlainTextResponse)
async def welcome() -> str:
    """Returns a welcome message."""
    return "Welcome to the REST API"


@router.get(BOARD_PATH, response_class=HTMLResponse)
async def show_board(
    page: int = Query(1, ge=1),
    edit: int | None = Query(None, description="ID of the assignment to load into the form."),
    deleted: int | None = Query(None, description="ID of the assignment just deleted."),
    service: AssignmentService = Depends(get_assignment_service),
) -> HTMLResponse:
    """Render one page of the board straight from the store."""
    state = BoardState(current_page=page, total=await service.count_assignments())
    assignments = await service.list_assignments(page=page, limit=state.limit)

    form = AssignmentForm()
    if edit is not None:
        try:
            editing = await service.get_assignment(edit)
        except EntityNotFoundError:
            editing = None
        if editing is not None:
            state.editing_id = editing.id
            form = AssignmentForm(
                name=editing.name or "",
                due_date=editing.due_date or "",
                submitted=bool(editing.submitted),
            )

    notice = f"Assignment {deleted} deleted" if deleted is not None else None
    html = render_board([a.to_record() for a in assignments], state, form, notice=notice, base_path=BOARD_PATH)
    return HTMLResponse(html)


@router.post(BOARD_PATH, response_class=RedirectResponse)
async def submit_board_form(
    name: str | None = Form(None),
    due_date: str | None = Form(None, alias="dueDate"),
    submitted: bool = Form(False),
    editing_id: int | None = Form(None, alias="editingId"),
    page: int = Form(1, ge=1),
    service: AssignmentService = Depends(get_assignment_service),
) -> RedirectResponse:
    """Create an assignment, or update ``editingId`` when the form carries one."""
    if editing_id is not None:
        data = AssignmentUpdate(name=name, due_date=due_date, submitted=submitted)
        await service.update_assignment(editing_id, data)
        logger.info("Assignment %d updated from the board", editing_id)
    else:
        data = AssignmentCreate(name=name, due_date=due_date, submitted=submitted)
        created = await service.create_assignment(data)
        logger.info("Assignment %d added from the board", created.id)
    return _back_to_board(page)


@router.post(BOARD_PATH + "/{assignment_id}/delete", response_class=RedirectResponse)
async def delete_from_board(
    assignment_id: int,
    page: int = Form(1, ge=1),
    service: AssignmentService = Depends(get_assignment_service),
) -> RedirectResponse:
    """Delete one assignment and return to the board with a notice."""
    await service.delete_assignment(assignment_id)
    total_pages = BoardState(total=await service.count_assignments()).total_pages
    return _back_to_board(max(1, min(page, total_pages)), deleted=assignment_id)
