"""
Exercise-related MCP tools for musclesworked.com.

This module contains tools for looking up exercises, the muscles they work,
and substitute exercises.
"""

from mcp.types import CallToolResult  # pylint: disable=import-error

from musclesworked_mcp_server.api.client import get_api_client
from musclesworked_mcp_server.utils.formatting import to_tool_result
from musclesworked_mcp_server.utils.types import AlternativesLimit, SearchQuery

# Import mcp instance from shared module for tool registration
from musclesworked_mcp_server.mcp_instance import mcp  # noqa: F401


@mcp.tool(structured_output=False)
async def get_muscles_worked(exercise: str) -> CallToolResult:
    """Get the primary, secondary, and stabilizer muscles worked by an exercise.

    Use search_exercises first if you don't know the exercise ID.

    Args:
        exercise: Exercise ID or name (e.g. 'barbell_bench_press')
    """
    result = await get_api_client().get_muscles_worked(exercise)
    return to_tool_result(result)


@mcp.tool(structured_output=False)
async def get_alternatives(exercise: str, limit: AlternativesLimit | None = None) -> CallToolResult:
    """Find alternative exercises ranked by muscle overlap score.

    Use search_exercises first if you don't know the exercise ID.

    Args:
        exercise: Exercise ID or name
        limit: Max results, 1-50 (default: 10)
    """
    result = await get_api_client().get_alternatives(exercise, limit)
    return to_tool_result(result)


@mcp.tool(structured_output=False)
async def search_exercises(query: SearchQuery) -> CallToolResult:
    """Search for exercises by name. Returns matching exercise IDs and names.

    Use this to discover exercise IDs before calling get_muscles_worked or get_alternatives.

    Args:
        query: Search query, at least 2 characters (e.g. 'bench press', 'squat')
    """
    result = await get_api_client().search_exercises(query)
    return to_tool_result(result)
