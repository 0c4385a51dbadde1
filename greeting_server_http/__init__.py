"""Streamable HTTP transport for the greeting MCP server."""
