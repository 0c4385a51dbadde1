"""Greeting MCP server package."""
