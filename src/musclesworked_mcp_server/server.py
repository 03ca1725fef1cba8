"""
musclesworked MCP Server

This module implements a Model Context Protocol (MCP) server for the
musclesworked.com API, so an AI agent can look up which muscles an exercise
works, find exercises for a muscle, and analyze workouts.

Main Features:
    - Exercise and muscle search
    - Muscle involvement (primary, secondary, stabilizer) per exercise
    - Filterable exercise lookup by target muscle
    - Workout coverage, gap, and imbalance analysis
    - Ranked alternative exercises
    - Error handling with agent-readable messages

Usage:
    The server communicates with its MCP client over stdio. The API key is
    read from the --api-key flag or the MUSCLESWORKED_API_KEY environment
    variable (optionally via a .env file); MUSCLESWORKED_API_URL overrides
    the API base URL.

    To run the server:
        $ musclesworked-mcp --api-key mw_live_...
        $ MUSCLESWORKED_API_KEY=mw_live_... python -m musclesworked_mcp_server.server

    MCP tools provided:
        - get_muscles_worked
        - find_exercises
        - analyze_workout
        - get_alternatives
        - search_exercises
        - search_muscles
"""

import logging
import os
import sys
from collections.abc import Sequence

from mcp.server.fastmcp import FastMCP  # pylint: disable=import-error

from musclesworked_mcp_server.api.client import setup_api_client
from musclesworked_mcp_server.config import ConfigError, load_config
from musclesworked_mcp_server.mcp_instance import mcp

# Configure logging
logging.basicConfig(
    level=os.getenv("MUSCLESWORKED_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)
logger = logging.getLogger("musclesworked_mcp_server")


def start_server(mcp_instance: FastMCP) -> None:
    """Serve the registered tools over stdio until the client disconnects."""
    logger.info("Starting musclesworked MCP server (stdio)")
    mcp_instance.run(transport="stdio")


def main(argv: Sequence[str] | None = None) -> None:
    """Resolve configuration, register the tools and run the server."""
    try:
        config = load_config(argv)
    except ConfigError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    api_client = setup_api_client(config)
    logger.info("Using musclesworked API at %s", api_client.base_url)

    # Imported only after configuration succeeds so a failed startup registers no tools
    from musclesworked_mcp_server.tools import register_tools  # pylint: disable=import-outside-toplevel

    register_tools(mcp)
    start_server(mcp)


# Run the server
if __name__ == "__main__":
    main()
