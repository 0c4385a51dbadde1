"""Resources package."""

from .server_spec import SERVER_SPEC_URI, build_server_spec

__all__ = ["SERVER_SPEC_URI", "build_server_spec"]
