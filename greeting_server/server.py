"""Greeting MCP Server implementation with tools, prompts and resources."""

import sys
from typing import Iterable

from pydantic import AnyUrl

from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.types import GetPromptResult, Prompt, Resource, TextContent, Tool

from greeting_server import config
from greeting_server.registry import (
    PROMPTS,
    PROMPT_HANDLERS,
    RESOURCES,
    RESOURCE_HANDLERS,
    TOOLS,
    TOOL_HANDLERS,
)


# Create MCP server
app = Server(config.SERVER_NAME, version=config.SERVER_VERSION)


def _debug(message: str) -> None:
    if config.debug_enabled():
        print(f"[greeting-server] {message}", file=sys.stderr, flush=True)


@app.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools."""
    return TOOLS


@app.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    _debug(f"call_tool {name} {arguments}")
    try:
        handler = TOOL_HANDLERS.get(name)
        if handler is None:
            raise ValueError(f"Unknown tool: {name}")

        return [TextContent(
            type="text",
            text=handler(arguments or {})
        )]

    except Exception as e:
        return [TextContent(
            type="text",
            text=f"Error: {str(e)}"
        )]


@app.list_prompts()
async def list_prompts() -> list[Prompt]:
    """List available prompts."""
    return PROMPTS


@app.get_prompt()
async def get_prompt(name: str, arguments: dict[str, str] | None) -> GetPromptResult:
    """Render a prompt by name."""
    _debug(f"get_prompt {name}")
    handler = PROMPT_HANDLERS.get(name)
    if handler is None:
        raise ValueError(f"Unknown prompt: {name}")
    return handler(arguments or {})


@app.list_resources()
async def list_resources() -> list[Resource]:
    """List available resources."""
    return RESOURCES


@app.read_resource()
async def read_resource(uri: AnyUrl) -> Iterable[ReadResourceContents]:
    """Read a resource by URI."""
    uri_str = str(uri)
    _debug(f"read_resource {uri_str}")
    handler = RESOURCE_HANDLERS.get(uri_str)
    if handler is None:
        raise ValueError(f"Unknown resource: {uri_str}")
    return [ReadResourceContents(content=handler(), mime_type="text/markdown")]


async def run_server():
    """Run the MCP server over stdio."""
    try:
        async with stdio_server() as streams:
            print("Greeting MCP Server running on stdio", file=sys.stderr, flush=True)
            await app.run(streams[0], streams[1], app.create_initialization_options())
    except Exception as e:
        print(f"Server error: {e}", file=sys.stderr, flush=True)
        import traceback
        traceback.print_exc(file=sys.stderr)
        raise


def main():
    """Entry point for the server."""
    import anyio
    config.load()
    try:
        anyio.run(run_server)
    except KeyboardInterrupt:
        print("Server stopped", file=sys.stderr, flush=True)
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr, flush=True)
        import traceback
        traceback.print_exc(file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
