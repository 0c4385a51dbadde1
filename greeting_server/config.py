"""Server settings read from the environment (and an optional .env file)."""

import os

from dotenv import load_dotenv

SERVER_NAME = "greeting-mcp-server"
SERVER_VERSION = "1.0.0"


def load() -> None:
    """Load a .env file from the working directory, if present."""
    load_dotenv()


def http_host() -> str:
    return os.environ.get("MCP_HTTP_HOST", "0.0.0.0")


def http_port() -> int:
    return int(os.environ.get("MCP_HTTP_PORT", "8001"))


def debug_enabled() -> bool:
    return bool(os.environ.get("GREETING_MCP_DEBUG"))
