"""Pure HTML rendering of the assignment board.

``render_board`` takes data and state and returns markup; it never
touches the network or any global state, so it can be called from the
client controller, from the server-rendered ``/board`` page, or in tests.
"""

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from jinja2 import Environment, PackageLoader, select_autoescape

if TYPE_CHECKING:
    from assignment_tracker.client.board import AssignmentForm, BoardState

_env = Environment(
    loader=PackageLoader("assignment_tracker.client", "templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)

TABLE_HEADERS = ("ID", "Name", "Due Date", "Submitted", "Actions")


def render_board(
    assignments: Iterable[Mapping[str, Any]],
    state: "BoardState",
    form: "AssignmentForm | None" = None,
    *,
    notice: str | None = None,
    base_path: str = "/board",
) -> str:
    """Render the board as an HTML document.

    ``assignments`` are records in wire layout (``dueDate`` key).
    ``base_path`` is the page the pagination and edit links point at.
    """
    rows = [
        {
            "id": record.get("id"),
            "name": record.get("name"),
            "due_date": record.get("dueDate"),
            "submitted": "Yes" if record.get("submitted") else "No",
        }
        for record in assignments
    ]
    template = _env.get_template("board.html")
    return template.render(
        headers=TABLE_HEADERS,
        rows=rows,
        pager=_pager(state),
        state=state,
        form=form,
        notice=notice,
        base_path=base_path,
    )


def _pager(state: "BoardState") -> list[dict[str, Any]]:
    """First/Prev/Next/Last controls with their target page and disabled flag."""
    return [
        {"id": "firstPage", "label": "First", "page": 1, "disabled": state.first_disabled},
        {"id": "prevPage", "label": "Prev", "page": state.current_page - 1, "disabled": state.prev_disabled},
        {"id": "nextPage", "label": "Next", "page": state.current_page + 1, "disabled": state.next_disabled},
        {"id": "lastPage", "label": "Last", "page": state.total_pages, "disabled": state.last_disabled},
    ]
