"""
Tests for the gateway HTTP surface:
- GET /health
- GET /mcp (405)
- CORS
"""

from conftest import MCP_HEADERS


class TestHealthEndpoint:
    """Tests for GET /health."""

    def test_health_reports_server_and_version(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {
            "status": "OK",
            "server": "test-gateway",
            "version": "9.9.9",
        }

    def test_health_uses_defaults(self, make_client):
        from mcp_gateway.version import __version__

        response = make_client().get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["server"] == "mcp-gateway"
        assert data["version"] == __version__


class TestMCPGet:
    """GET /mcp is rejected: the transport is POST only."""

    def test_get_returns_405(self, client):
        response = client.get("/mcp")

        assert response.status_code == 405
        assert response.text == "Method Not Allowed"
        assert response.headers["allow"] == "POST"
        assert response.headers["content-type"].startswith("text/plain")

    def test_get_with_event_stream_accept_still_405(self, client):
        response = client.get("/mcp", headers={"Accept": "text/event-stream"})

        assert response.status_code == 405


class TestCORS:
    """CORS is enabled on every route."""

    def test_simple_request_allows_any_origin(self, client):
        response = client.get("/health", headers={"Origin": "https://example.com"})

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"

    def test_preflight_for_mcp_post(self, client):
        response = client.options(
            "/mcp",
            headers={
                "Origin": "https://example.com",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "content-type",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        assert "POST" in response.headers["access-control-allow-methods"]

    def test_mcp_response_carries_cors_header(self, client):
        response = client.post(
            "/mcp",
            json={"jsonrpc": "2.0", "id": 1, "method": "ping"},
            headers={**MCP_HEADERS, "Origin": "https://example.com"},
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"

    def test_restricted_origins(self, make_client):
        client = make_client(cors_origins=["https://allowed.example"])

        allowed = client.get("/health", headers={"Origin": "https://allowed.example"})
        other = client.get("/health", headers={"Origin": "https://other.example"})

        assert allowed.headers["access-control-allow-origin"] == "https://allowed.example"
        assert "access-control-allow-origin" not in other.headers
