"""
MCP tools registry for musclesworked MCP Server.

This module registers all available MCP tools with the FastMCP server instance.
"""

import logging

from mcp.server.fastmcp import FastMCP  # pylint: disable=import-error

# Import all tools for re-export
# Note: Tools register themselves via @mcp.tool() decorators when imported
from musclesworked_mcp_server.tools.exercises import (  # noqa: F401
    get_alternatives,
    get_muscles_worked,
    search_exercises,
)
from musclesworked_mcp_server.tools.muscles import (  # noqa: F401
    find_exercises,
    search_muscles,
)
from musclesworked_mcp_server.tools.workouts import analyze_workout  # noqa: F401

logger = logging.getLogger("musclesworked_mcp_server")

TOOL_NAMES = (
    "get_muscles_worked",
    "find_exercises",
    "analyze_workout",
    "get_alternatives",
    "search_exercises",
    "search_muscles",
)


def register_tools(mcp_instance: FastMCP) -> None:
    """
    Register all MCP tools with the FastMCP server instance.

    The tool modules register themselves through their @mcp.tool() decorators
    when this package is imported, so importing it is what registers them.
    Callers must only import this package once startup configuration has
    succeeded.

    Args:
        mcp_instance (FastMCP): The FastMCP server instance the tools were registered with.
    """
    logger.info("Registered %d tools on %s: %s", len(TOOL_NAMES), mcp_instance.name, ", ".join(TOOL_NAMES))


__all__ = [
    "register_tools",
    "TOOL_NAMES",
    "get_muscles_worked",
    "find_exercises",
    "analyze_workout",
    "get_alternatives",
    "search_exercises",
    "search_muscles",
]
