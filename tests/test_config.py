"""Tests for environment configuration and the HTTP app wiring."""

from starlette.applications import Starlette

from greeting_server import config
from greeting_server.server import app


def test_http_defaults(monkeypatch):
    monkeypatch.delenv("MCP_HTTP_HOST", raising=False)
    monkeypatch.delenv("MCP_HTTP_PORT", raising=False)
    assert config.http_host() == "0.0.0.0"
    assert config.http_port() == 8001


def test_http_overrides(monkeypatch):
    monkeypatch.setenv("MCP_HTTP_HOST", "127.0.0.1")
    monkeypatch.setenv("MCP_HTTP_PORT", "9100")
    assert config.http_host() == "127.0.0.1"
    assert config.http_port() == 9100


def test_debug_flag(monkeypatch):
    monkeypatch.delenv("GREETING_MCP_DEBUG", raising=False)
    assert not config.debug_enabled()
    monkeypatch.setenv("GREETING_MCP_DEBUG", "1")
    assert config.debug_enabled()


def test_http_app_serves_shared_server():
    from greeting_server_http.server import session_manager, starlette_app

    assert isinstance(starlette_app, Starlette)
    assert session_manager.app is app
