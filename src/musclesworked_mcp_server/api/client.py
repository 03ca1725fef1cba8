"""
HTTP client for the musclesworked.com REST API.

Every operation issues a single request and returns an ``ApiResult``:
``ApiSuccess`` with the JSON body untouched, ``ApiError`` for non-success
statuses, or ``RequestFailure`` when no usable response was received.
"""

import json
import logging
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from json import JSONDecodeError
from typing import Any
from urllib.parse import quote

import httpx  # pylint: disable=import-error

from musclesworked_mcp_server import __version__
from musclesworked_mcp_server.config import Config
from musclesworked_mcp_server.utils.types import (
    ApiError,
    ApiResult,
    ApiSuccess,
    ExerciseFilters,
    RequestFailure,
)

logger = logging.getLogger("musclesworked_mcp_server")

USER_AGENT = f"musclesworked-mcp/{__version__}"
API_PREFIX = "/api/v1"


def create_http_client(config: Config, transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    """Build the httpx client used for API calls. Redirects are followed."""
    return httpx.AsyncClient(timeout=config.timeout, follow_redirects=True, transport=transport)


def _segment(value: str) -> str:
    return quote(value, safe="")


def _error_detail(response: httpx.Response) -> str:
    """Return the API's ``detail`` field, or the status reason phrase if there is none."""
    try:
        body = response.json()
    except (JSONDecodeError, UnicodeDecodeError):
        return response.reason_phrase
    if isinstance(body, dict) and body.get("detail") is not None:
        detail = body["detail"]
        return detail if isinstance(detail, str) else json.dumps(detail)
    return response.reason_phrase


class MusclesWorkedClient:
    """Authenticated client for the musclesworked.com API."""

    def __init__(self, config: Config, http_client: httpx.AsyncClient | None = None) -> None:
        self.api_key = config.api_key
        self.base_url = config.base_url.rstrip("/")
        self._http = http_client or create_http_client(config)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def request(
        self,
        path: str,
        method: str = "GET",
        params: Mapping[str, Any] | None = None,
        data: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> ApiResult:
        """
        Make a request to the musclesworked.com API.

        Args:
            path: The endpoint path, starting with /api/v1.
            method: HTTP method. Defaults to GET.
            params: Query parameters. Keys with a None value are left out.
            data: JSON-serializable request body.
            headers: Extra headers, applied over the default ones.

        Returns:
            ApiResult: The outcome of the request.
        """
        request_headers = {
            "X-Api-Key": self.api_key,
            "User-Agent": USER_AGENT,
            "Content-Type": "application/json",
        }
        if headers:
            request_headers.update(headers)

        query = {key: value for key, value in (params or {}).items() if value is not None}
        full_url = f"{self.base_url}{path}"
        logger.debug("%s %s params=%s", method, full_url, query)

        try:
            response = await self._http.request(
                method=method,
                url=full_url,
                headers=request_headers,
                params=query or None,
                json=data,
            )
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
            # UnicodeEncodeError: a header value httpx cannot encode as ASCII
            logger.error("Request error: %s %s - %r", method, full_url, e)
            return RequestFailure(str(e) or type(e).__name__)

        if not response.is_success:
            detail = _error_detail(response)
            logger.error("HTTP error: %s - %s", response.status_code, detail)
            return ApiError(status=response.status_code, detail=detail)

        if not response.content:
            return ApiSuccess({})
        try:
            return ApiSuccess(response.json())
        except (JSONDecodeError, UnicodeDecodeError):
            logger.error("Invalid JSON in response from: %s", full_url)
            return RequestFailure("Invalid JSON in response")

    async def get_muscles_worked(self, exercise: str) -> ApiResult:
        return await self.request(f"{API_PREFIX}/exercises/{_segment(exercise)}/muscles")

    async def find_exercises(self, muscle: str, filters: ExerciseFilters | None = None) -> ApiResult:
        params = filters.to_params() if filters else None
        return await self.request(f"{API_PREFIX}/muscles/{_segment(muscle)}/exercises", params=params)

    async def analyze_workout(self, exercises: list[str]) -> ApiResult:
        return await self.request(
            f"{API_PREFIX}/workouts/analyze", method="POST", data={"exercises": exercises}
        )

    async def get_alternatives(self, exercise: str, limit: int | None = None) -> ApiResult:
        return await self.request(
            f"{API_PREFIX}/exercises/{_segment(exercise)}/alternatives", params={"limit": limit}
        )

    async def search_exercises(self, query: str) -> ApiResult:
        return await self.request(f"{API_PREFIX}/search/exercises", params={"q": query})

    async def search_muscles(self, query: str) -> ApiResult:
        return await self.request(f"{API_PREFIX}/search/muscles", params={"q": query})


# Shared client for the tool modules, created by setup_api_client() at startup
_api_client: MusclesWorkedClient | None = None


def setup_api_client(config: Config, http_client: httpx.AsyncClient | None = None) -> MusclesWorkedClient:
    """Create the shared API client from the startup configuration."""
    global _api_client  # pylint: disable=global-statement
    _api_client = MusclesWorkedClient(config, http_client=http_client)
    return _api_client


def get_api_client() -> MusclesWorkedClient:
    """Return the shared API client.

    Raises:
        RuntimeError: If setup_api_client() has not been called.
    """
    if _api_client is None:
        raise RuntimeError("API client is not configured; call setup_api_client() first")
    return _api_client


@asynccontextmanager
async def api_client_lifespan(_app: Any) -> AsyncIterator[None]:
    """
    Context manager to ensure the shared httpx client is closed when the server stops.

    Args:
        _app: The MCP server application instance.
    """
    try:
        yield
    finally:
        if _api_client is not None:
            await _api_client.aclose()
