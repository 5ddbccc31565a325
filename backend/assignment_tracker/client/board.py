"""Assignment board — client-side state machine driving the assignment API.

The board has two modes: *adding* (``editing_id is None``) and
*editing(id)*. Submitting the form issues a create or an update
accordingly; a successful submit or :meth:`AssignmentBoard.cancel_edit`
returns to adding. Every successful mutation runs the refresh cycle:
fetch the count, then fetch the current page.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any

import httpx

from assignment_tracker.client.api_client import AssignmentApiClient
from assignment_tracker.client.render import render_board
from assignment_tracker.config import get_settings
from assignment_tracker.domain.exceptions import AssignmentApiError

logger = logging.getLogger(__name__)


@dataclass
class AssignmentForm:
    """Current contents of the add/edit form."""

    name: str = ""
    due_date: str = ""
    submitted: bool = False

    def to_payload(self) -> dict[str, Any]:
        return {"name": self.name, "dueDate": self.due_date, "submitted": self.submitted}


@dataclass
class BoardState:
    """Pagination and editing state of the board."""

    current_page: int = 1
    limit: int = field(default_factory=lambda: get_settings().client_page_limit)
    total: int = 0
    editing_id: int | None = None

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit)

    @property
    def first_disabled(self) -> bool:
        return self.current_page <= 1

    @property
    def prev_disabled(self) -> bool:
        return self.current_page <= 1

    @property
    def next_disabled(self) -> bool:
        return self.current_page >= self.total_pages

    @property
    def last_disabled(self) -> bool:
        return self.current_page >= self.total_pages

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    @property
    def form_title(self) -> str:
        if self.editing_id is None:
            return "Add Assignment"
        return f"Edit Assignment {self.editing_id}"


@dataclass
class AssignmentBoard:
    """Controller that mirrors server state into a renderable board."""

    client: AssignmentApiClient
    state: BoardState = field(default_factory=BoardState)
    form: AssignmentForm = field(default_factory=AssignmentForm)
    assignments: list[dict[str, Any]] = field(default_factory=list)
    notice: str | None = None

    # ── Refresh cycle ───────────────────────────────────────────────

    async def refresh(self) -> None:
        """Fetch the total count, then the current page."""
        self.state.total = await self.client.count()
        await self.load_page(self.state.current_page)

    async def load_page(self, page: int = 1) -> None:
        self.assignments = await self.client.list_page(page, self.state.limit)
        self.state.current_page = page

    # ── Pagination ──────────────────────────────────────────────────

    async def first_page(self) -> None:
        if not self.state.first_disabled:
            await self.load_page(1)

    async def previous_page(self) -> None:
        if not self.state.prev_disabled:
            await self.load_page(self.state.current_page - 1)

    async def next_page(self) -> None:
        if not self.state.next_disabled:
            await self.load_page(self.state.current_page + 1)

    async def last_page(self) -> None:
        if not self.state.last_disabled:
            await self.load_page(self.state.total_pages)

    # ── Form ────────────────────────────────────────────────────────

    def begin_edit(self, record: dict[str, Any]) -> None:
        """Fill the form from a table row and switch to editing mode."""
        logger.info("Editing assignment %s", record["id"])
        self.form = AssignmentForm(
            name=record.get("name") or "",
            due_date=record.get("dueDate") or "",
            submitted=bool(record.get("submitted")),
        )
        self.state.editing_id = record["id"]

    def cancel_edit(self) -> None:
        """Leave editing mode without saving."""
        self.form = AssignmentForm()
        self.state.editing_id = None

    async def submit(self, form: AssignmentForm | None = None) -> dict[str, Any] | None:
        """Create or update from the form; returns the saved record, or None on failure."""
        form = form or self.form
        editing_id = self.state.editing_id
        try:
            if editing_id is not None:
                saved = await self.client.update(editing_id, form.to_payload())
            else:
                saved = await self.client.create(form.to_payload())
        except (AssignmentApiError, httpx.HTTPError) as exc:
            logger.error("Error saving assignment: %s", exc)
            return None

        logger.info("%s: %s", "Assignment updated" if editing_id is not None else "Assignment added", saved)
        self.cancel_edit()
        await self.refresh()
        return saved

    async def delete(self, assignment_id: int) -> bool:
        """Delete a record and leave a blocking notice describing the outcome."""
        try:
            await self.client.delete(assignment_id)
        except (AssignmentApiError, httpx.HTTPError) as exc:
            self.notice = f"Error deleting assignment: {exc}"
            return False

        logger.info("Assignment %d deleted", assignment_id)
        await self.refresh()
        self.notice = f"Assignment {assignment_id} deleted"
        return True

    def dismiss_notice(self) -> None:
        self.notice = None

    def render(self) -> str:
        return render_board(self.assignments, self.state, self.form, notice=self.notice)
