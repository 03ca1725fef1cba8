"""
Muscle-related MCP tools for musclesworked.com.

This module contains tools for searching muscles and finding the exercises
that train them.
"""

from mcp.types import CallToolResult  # pylint: disable=import-error

from musclesworked_mcp_server.api.client import get_api_client
from musclesworked_mcp_server.utils.formatting import to_tool_result
from musclesworked_mcp_server.utils.types import (
    Difficulty,
    Equipment,
    ExerciseFilters,
    ExerciseType,
    FindLimit,
    MovementPattern,
    MuscleRole,
    SearchQuery,
)

# Import mcp instance from shared module for tool registration
from musclesworked_mcp_server.mcp_instance import mcp  # noqa: F401


@mcp.tool(structured_output=False)
async def find_exercises(  # pylint: disable=too-many-arguments
    muscle: str,
    equipment: Equipment | None = None,
    difficulty: Difficulty | None = None,
    movement_pattern: MovementPattern | None = None,
    exercise_type: ExerciseType | None = None,
    role: MuscleRole | None = None,
    limit: FindLimit | None = None,
) -> CallToolResult:
    """Find exercises that target a specific muscle, with optional filters.

    Use search_muscles first if you don't know the muscle ID.

    Args:
        muscle: Muscle ID or name (e.g. 'pectoralis_major_sternal')
        equipment: Filter by equipment type (e.g. barbell, dumbbell, cable, bodyweight)
        difficulty: Filter by difficulty level (beginner, intermediate, advanced)
        movement_pattern: Filter by movement pattern (e.g. horizontal_push, squat, hinge)
        exercise_type: Filter by exercise type (compound, isolation, isometric)
        role: Filter by muscle role (primary, secondary, stabilizer)
        limit: Max results, 1-200 (default: 50)
    """
    filters = ExerciseFilters(
        equipment=equipment,
        difficulty=difficulty,
        movement_pattern=movement_pattern,
        exercise_type=exercise_type,
        role=role,
        limit=limit,
    )
    result = await get_api_client().find_exercises(muscle, filters)
    return to_tool_result(result)


@mcp.tool(structured_output=False)
async def search_muscles(query: SearchQuery) -> CallToolResult:
    """Search for muscles by name. Returns matching muscle IDs and names.

    Use this to discover muscle IDs before calling find_exercises.

    Args:
        query: Search query, at least 2 characters (e.g. 'chest', 'bicep', 'quad')
    """
    result = await get_api_client().search_muscles(query)
    return to_tool_result(result)
