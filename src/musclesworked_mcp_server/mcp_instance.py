"""Shared FastMCP instance; tool modules register against it on import."""

from mcp.server.fastmcp import FastMCP  # pylint: disable=import-error

from musclesworked_mcp_server.api.client import api_client_lifespan

mcp = FastMCP("musclesworked", lifespan=api_client_lifespan)
