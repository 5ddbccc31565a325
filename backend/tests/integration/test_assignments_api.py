"""End-to-end tests for the /api/assignments endpoints."""

import json
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from assignment_tracker.infrastructure.storage.json_assignment_store import JsonAssignmentStore
from assignment_tracker.main import create_app


def _records(n: int) -> list[dict]:
    return [
        {"id": i, "name": f"Assignment {i}", "dueDate": f"2024-01-{i:02d}", "submitted": i % 2 == 0}
        for i in range(1, n + 1)
    ]


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    path = tmp_path / "assignments.json"
    path.write_text(json.dumps(_records(12)), encoding="utf-8")
    return path


@pytest_asyncio.fixture
async def client(data_file: Path):
    app = create_app(store=JsonAssignmentStore.load(data_file))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# ── List & count ────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_list_defaults_to_first_ten(client: AsyncClient):
    response = await client.get("/api/assignments")
    assert response.status_code == 200
    assert [a["id"] for a in response.json()] == list(range(1, 11))


@pytest.mark.asyncio
async def test_list_uses_wire_field_names(client: AsyncClient):
    response = await client.get("/api/assignments", params={"page": 1, "limit": 1})
    assert response.json() == [
        {"id": 1, "name": "Assignment 1", "dueDate": "2024-01-01", "submitted": False}
    ]


@pytest.mark.asyncio
async def test_list_page_is_clipped(client: AsyncClient):
    response = await client.get("/api/assignments", params={"page": 3, "limit": 5})
    assert [a["id"] for a in response.json()] == [11, 12]


@pytest.mark.asyncio
async def test_list_past_the_end_is_empty(client: AsyncClient):
    response = await client.get("/api/assignments", params={"page": 4, "limit": 5})
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("page", "limit"),
    [("abc", "5"), ("1", "xyz"), ("", "5"), ("0", "5")],
)
async def test_list_unusable_pagination_is_empty(client: AsyncClient, page: str, limit: str):
    response = await client.get("/api/assignments", params={"page": page, "limit": limit})
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_list_parses_leading_digits(client: AsyncClient):
    response = await client.get("/api/assignments", params={"page": "2abc", "limit": "5px"})
    assert [a["id"] for a in response.json()] == [6, 7, 8, 9, 10]


@pytest.mark.asyncio
@pytest.mark.parametrize("param", ["page", "limit"])
async def test_list_with_oversized_number_is_empty(client: AsyncClient, param: str):
    params = {"page": "1", "limit": "5", param: "9" * 5000}
    response = await client.get("/api/assignments", params=params)
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_count(client: AsyncClient):
    response = await client.get("/api/assignments/count")
    assert response.status_code == 200
    assert response.json() == {"count": 12}


# ── Get ─────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_get_by_id(client: AsyncClient):
    response = await client.get("/api/assignments/4")
    assert response.status_code == 200
    assert response.json()["name"] == "Assignment 4"


@pytest.mark.asyncio
@pytest.mark.parametrize("assignment_id", ["999", "abc"])
async def test_get_unknown_id_is_plain_text_404(client: AsyncClient, assignment_id: str):
    response = await client.get(f"/api/assignments/{assignment_id}")
    assert response.status_code == 404
    assert response.text == "Assignment not found"
    assert response.headers["content-type"].startswith("text/plain")


# ── Create ──────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_create_returns_201_and_count_grows(client: AsyncClient, data_file: Path):
    response = await client.post("/api/assignments", json={"name": "HW1", "dueDate": "2024-05-01"})

    assert response.status_code == 201
    assert response.json() == {"id": 13, "name": "HW1", "dueDate": "2024-05-01", "submitted": False}

    count = await client.get("/api/assignments/count")
    assert count.json() == {"count": 13}

    on_disk = json.loads(data_file.read_text(encoding="utf-8"))
    assert on_disk[-1] == {"id": 13, "name": "HW1", "dueDate": "2024-05-01", "submitted": False}


@pytest.mark.asyncio
async def test_create_keeps_submitted_flag(client: AsyncClient):
    response = await client.post(
        "/api/assignments", json={"name": "HW2", "dueDate": "2024-05-02", "submitted": True}
    )
    assert response.json()["submitted"] is True


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("body", "field"),
    [
        ({"dueDate": "2024-01-01"}, "name"),
        ({"name": "x"}, "dueDate"),
        ({"name": "", "dueDate": "2024-01-01"}, "name"),
        ({}, "name"),
    ],
)
async def test_create_missing_field_is_400(client: AsyncClient, body: dict, field: str):
    response = await client.post("/api/assignments", json=body)
    assert response.status_code == 400
    assert response.json() == {"error": f"Missing required field: {field}"}


@pytest.mark.asyncio
async def test_create_without_body_reports_name(client: AsyncClient):
    response = await client.post("/api/assignments")
    assert response.status_code == 400
    assert response.json() == {"error": "Missing required field: name"}


@pytest.mark.asyncio
async def test_create_with_non_object_body_is_400(client: AsyncClient):
    response = await client.post("/api/assignments", json=["not", "an", "object"])
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request body"}


@pytest.mark.asyncio
async def test_create_write_failure_is_500_and_rolled_back(tmp_path: Path):
    blocked = tmp_path / "assignments.json"
    blocked.mkdir()
    app = create_app(store=JsonAssignmentStore(blocked))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post("/api/assignments", json={"name": "HW1", "dueDate": "2024-05-01"})
        count = await client.get("/api/assignments/count")

    assert response.status_code == 500
    assert response.text == "Something went wrong!"
    assert count.json() == {"count": 0}


# ── Update ──────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_update_overwrites_every_field(client: AsyncClient):
    response = await client.put("/api/assignments/2", json={"name": "B"})

    assert response.status_code == 200
    assert response.json() == {"id": 2, "name": "B", "dueDate": None, "submitted": None}
    fetched = await client.get("/api/assignments/2")
    assert fetched.json() == response.json()


@pytest.mark.asyncio
async def test_update_unknown_id_is_404(client: AsyncClient):
    response = await client.put("/api/assignments/999", json={"name": "B"})
    assert response.status_code == 404
    assert response.text == "Assignment not found"


# ── Delete ──────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_delete_twice(client: AsyncClient):
    first = await client.delete("/api/assignments/5")
    assert first.status_code == 204
    assert first.content == b""

    second = await client.delete("/api/assignments/5")
    assert second.status_code == 404
    assert second.text == "Assignment not found"

    count = await client.get("/api/assignments/count")
    assert count.json() == {"count": 11}


@pytest.mark.asyncio
async def test_update_and_delete_are_not_written_to_disk(client: AsyncClient, data_file: Path):
    await client.put("/api/assignments/1", json={"name": "Changed"})
    await client.delete("/api/assignments/2")

    on_disk = json.loads(data_file.read_text(encoding="utf-8"))
    assert on_disk == _records(12)


# ── Fallbacks ───────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_unknown_route_is_plain_text_404(client: AsyncClient):
    response = await client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.text == "Route not found"


@pytest.mark.asyncio
async def test_unsupported_method_is_route_not_found(client: AsyncClient):
    response = await client.patch("/api/assignments/1", json={"name": "x"})
    assert response.status_code == 404
    assert response.text == "Route not found"


class ExplodingStore(JsonAssignmentStore):
    async def count(self) -> int:
        raise RuntimeError("disk on fire")


@pytest.mark.asyncio
async def test_uncaught_error_is_generic_500(tmp_path: Path):
    app = create_app(store=ExplodingStore(tmp_path / "assignments.json"))
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/assignments/count")

    assert response.status_code == 500
    assert response.text == "Something went wrong!"
    assert "disk on fire" not in response.text
