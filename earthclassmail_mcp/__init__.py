"""MCP server exposing the Earth Class Mail API as tools."""

__version__ = "1.1.0"
