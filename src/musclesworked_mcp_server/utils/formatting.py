"""
Formatting utilities for musclesworked MCP Server

Turns API client results into the text content returned by the MCP tools.
"""

import json
from http import HTTPStatus
from typing import Any

from mcp.types import CallToolResult, TextContent  # pylint: disable=import-error

from musclesworked_mcp_server.utils.types import ApiError, ApiResult, ApiSuccess, RequestFailure


def format_payload(data: Any) -> str:
    """Pretty-print an API response body as JSON text."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def format_error(error: ApiError | RequestFailure) -> str:
    """Return an agent-readable message for a failed API call."""
    if isinstance(error, RequestFailure):
        return error.message

    status = error.status
    if status == HTTPStatus.UNAUTHORIZED:
        return "Invalid API key. Check your MUSCLESWORKED_API_KEY."
    if status == HTTPStatus.FORBIDDEN:
        return "Account not approved. Visit musclesworked.com to check your status."
    if status == HTTPStatus.TOO_MANY_REQUESTS:
        return "Rate limit exceeded. Please wait before retrying."
    if status >= HTTPStatus.INTERNAL_SERVER_ERROR:
        return "API temporarily unavailable. Try again shortly."
    # 404 and any other client error: the API's own explanation
    return error.detail


def to_tool_result(result: ApiResult) -> CallToolResult:
    """Wrap an API result in the MCP tool result envelope."""
    if isinstance(result, ApiSuccess):
        return CallToolResult(content=[TextContent(type="text", text=format_payload(result.data))])
    return CallToolResult(content=[TextContent(type="text", text=format_error(result))], isError=True)
