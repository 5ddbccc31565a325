"""Tests for the health check and welcome endpoints."""

import json

import pytest
from httpx import ASGITransport, AsyncClient

from assignment_tracker.infrastructure.storage.json_assignment_store import JsonAssignmentStore
from assignment_tracker.main import create_app


@pytest.mark.asyncio
async def test_health_check_returns_200(tmp_path):
    """Health endpoint should return 200 with status, version, and environment."""
    app = create_app(store=JsonAssignmentStore(tmp_path / "assignments.json"))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data
    assert "environment" in data
    assert data["assignments"] == 0
    assert data["storeFileExists"] is False


@pytest.mark.asyncio
async def test_health_check_reports_store_contents(tmp_path):
    data_file = tmp_path / "assignments.json"
    data_file.write_text(
        json.dumps([{"id": 1, "name": "Essay", "dueDate": "2024-03-01", "submitted": False}]),
        encoding="utf-8",
    )
    app = create_app(store=JsonAssignmentStore.load(data_file))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/health")

    assert response.json()["assignments"] == 1
    assert response.json()["storeFileExists"] is True


@pytest.mark.asyncio
async def test_root_returns_welcome_text(tmp_path):
    app = create_app(store=JsonAssignmentStore(tmp_path / "assignments.json"))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/")

    assert response.status_code == 200
    assert response.text == "Welcome to the REST API"
