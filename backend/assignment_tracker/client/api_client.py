"""HTTP client for the assignment API.

Uses httpx; an ``httpx.AsyncClient`` can be injected (connection pooling,
tests with ``httpx.MockTransport``), otherwise one is opened per request.
"""

import logging
from typing import Any

import httpx

from assignment_tracker.config import Settings, get_settings
from assignment_tracker.domain.exceptions import AssignmentApiError

logger = logging.getLogger(__name__)


class AssignmentApiClient:
    """Thin async wrapper around the ``/api/assignments`` endpoints.

    Records are exchanged as plain dicts in wire layout
    (``{"id", "name", "dueDate", "submitted"}``). ``base_url`` and
    ``timeout`` default to ``api_base_url`` and ``client_timeout`` from
    Settings.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        settings = get_settings()
        self._base_url = (base_url or settings.api_base_url).rstrip("/")
        self._timeout = timeout if timeout is not None else settings.client_timeout
        self._http_client = http_client

    @classmethod
    def from_settings(
        cls, settings: Settings, http_client: httpx.AsyncClient | None = None
    ) -> "AssignmentApiClient":
        return cls(settings.api_base_url, settings.client_timeout, http_client)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def assignments_url(self) -> str:
        return f"{self._base_url}/api/assignments"

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.request(method, url, **kwargs)
        finally:
            if should_close:
                await client.aclose()

        if response.is_error:
            self._raise_api_error(response)
        return response

    @staticmethod
    def _raise_api_error(response: httpx.Response) -> None:
        """Convert an error response into an AssignmentApiError."""
        try:
            body = response.json()
            message = body.get("error", response.text) if isinstance(body, dict) else response.text
        except ValueError:
            message = response.text
        logger.debug("%s %s -> %d %s", response.request.method, response.request.url, response.status_code, message)
        raise AssignmentApiError(response.status_code, message)

    # ── Endpoints ───────────────────────────────────────────────────

    async def count(self) -> int:
        response = await self._request("GET", f"{self.assignments_url}/count")
        return int(response.json()["count"])

    async def list_page(self, page: int, limit: int) -> list[dict[str, Any]]:
        response = await self._request(
            "GET", self.assignments_url, params={"page": page, "limit": limit}
        )
        return response.json()

    async def get(self, assignment_id: int) -> dict[str, Any]:
        response = await self._request("GET", f"{self.assignments_url}/{assignment_id}")
        return response.json()

    async def create(self, payload: dict[str, Any]) -> dict[str, Any]:
        response = await self._request("POST", self.assignments_url, json=payload)
        return response.json()

    async def update(self, assignment_id: int, payload: dict[str, Any]) -> dict[str, Any]:
        response = await self._request(
            "PUT", f"{self.assignments_url}/{assignment_id}", json=payload
        )
        return response.json()

    async def delete(self, assignment_id: int) -> None:
        await self._request("DELETE", f"{self.assignments_url}/{assignment_id}")
