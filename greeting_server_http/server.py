"""HTTP-based greeting MCP server (streamable HTTP transport).

Runs as an ASGI app (Starlette) so MCP clients can connect over HTTP
using `type: "streamable-http"` with the server URL.

Tools, prompts and resources are the same ones the stdio server exposes.
"""

import sys

from starlette.applications import Starlette
from starlette.routing import Mount

from mcp.server.streamable_http_manager import StreamableHTTPSessionManager

from greeting_server import config
from greeting_server.server import app


# Streamable HTTP session manager wraps the MCP server into an ASGI app
session_manager = StreamableHTTPSessionManager(
    app=app,
    json_response=False,  # SSE streaming responses
    stateless=True,       # every call is independent, no session state to keep
)


async def lifespan(_):
    async with session_manager.run():
        yield


starlette_app = Starlette(
    routes=[Mount("/", app=session_manager.handle_request)],
    lifespan=lifespan,
)


def main():
    import uvicorn

    config.load()
    host = config.http_host()
    port = config.http_port()

    print(f"Starting HTTP MCP server on http://{host}:{port}", file=sys.stderr, flush=True)
    uvicorn.run(starlette_app, host=host, port=port, log_level="info")


if __name__ == "__main__":
    main()
