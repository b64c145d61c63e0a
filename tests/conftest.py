"""
Pytest fixtures for MCP gateway tests.
"""

import json
import os
import sys
import tempfile
from pathlib import Path
from typing import Generator

import pytest

# Add project root to path for mcp_gateway imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

MCP_HEADERS = {
    "Accept": "application/json, text/event-stream",
    "Content-Type": "application/json",
}


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path: Path) -> Path:
    """Point the data directory at a temp dir and clear gateway env vars."""
    for name in list(os.environ):
        if name.startswith("MCP_GATEWAY_"):
            monkeypatch.delenv(name)
    monkeypatch.delenv("PORT", raising=False)

    data_path = tmp_path / "data"
    monkeypatch.setenv("MCP_GATEWAY_DATA_PATH", str(data_path))
    return data_path


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def static_dir(temp_dir: Path) -> Path:
    """Create a static root with a few files and a secret next to it."""
    public = temp_dir / "public"
    public.mkdir()
    (public / "index.html").write_text("<h1>Gateway</h1>")
    (public / "app.js").write_text("console.log('hi');")
    (public / "style.css").write_text("body { margin: 0; }")
    (public / "data.json").write_text(json.dumps({"ok": True}))
    (public / "logo.PNG").write_bytes(b"\x89PNG\r\n\x1a\n")
    (public / "notes.md").write_text("# Notes")
    (public / "docs").mkdir()
    (public / "docs" / "guide.html").write_text("<p>guide</p>")

    (temp_dir / "secret.txt").write_text("do not serve")
    sibling = temp_dir / "public2"
    sibling.mkdir()
    (sibling / "leak.txt").write_text("do not serve either")
    return public


@pytest.fixture
def mcp_server():
    """A small FastMCP server with one tool."""
    from mcp.server.fastmcp import FastMCP

    server = FastMCP("test-engine")

    @server.tool()
    def add(a: int, b: int) -> int:
        """Add two numbers."""
        return a + b

    return server


@pytest.fixture
def make_client(mcp_server, static_dir: Path):
    """Factory for a TestClient over a gateway app."""
    from fastapi.testclient import TestClient

    from mcp_gateway.configs import GatewaySettings
    from mcp_gateway.controllers.http import create_app

    def _make(server=None, **settings_kwargs) -> TestClient:
        settings_kwargs.setdefault("static_dir", static_dir)
        settings = GatewaySettings(**settings_kwargs)
        app = create_app(server if server is not None else mcp_server, settings)
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client):
    """Gateway client replying with JSON bodies."""
    return make_client(json_response=True, server_name="test-gateway", server_version="9.9.9")


def parse_sse_messages(text: str) -> list[dict]:
    """Extract JSON-RPC messages from an SSE body."""
    messages = []
    for line in text.splitlines():
        if line.startswith("data:"):
            payload = line[len("data:"):].strip()
            if payload:
                messages.append(json.loads(payload))
    return messages
