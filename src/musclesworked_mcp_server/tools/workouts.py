"""Workout analysis tool for musclesworked.com."""

from mcp.types import CallToolResult  # pylint: disable=import-error

from musclesworked_mcp_server.api.client import get_api_client
from musclesworked_mcp_server.mcp_instance import mcp
from musclesworked_mcp_server.utils.formatting import to_tool_result
from musclesworked_mcp_server.utils.types import ExerciseList


@mcp.tool(structured_output=False)
async def analyze_workout(exercises: ExerciseList) -> CallToolResult:
    """Analyze a workout for muscle coverage, gaps, and imbalances.

    Pass a list of exercise names or IDs.

    Args:
        exercises: List of exercise IDs or names (at least one)
    """
    result = await get_api_client().analyze_workout(exercises)
    return to_tool_result(result)
