"""MCP server exposing the musclesworked.com exercise and muscle API."""

__version__ = "0.1.0"
