"""
MCP Gateway HTTP Server

FastAPI application exposing an MCP server over streamable HTTP, plus a
health check and the static web client.

Routes:
- GET  /health  - Health check
- GET  /mcp     - 405, the transport only accepts POST
- POST /mcp     - MCP JSON-RPC messages
- GET  /*       - Static files
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from mcp_gateway.configs import GatewaySettings, get_logger, get_settings
from mcp_gateway.configs.constants import CORS_ALLOW_METHODS, HEALTH_PATH, MCP_PATH
from mcp_gateway.controllers.http.mcp_protocol import MCPStreamableHttpHandler
from mcp_gateway.controllers.http.mcp_protocol import router as mcp_router
from mcp_gateway.controllers.http.static import get_gateway_settings
from mcp_gateway.controllers.http.static import router as static_router
from mcp_gateway.engine import resolve_server
from mcp_gateway.version import __version__, get_current_version

logger = get_logger("http")

health_router = APIRouter()


class HealthResponse(BaseModel):
    """Response for GET /health."""

    status: str
    server: str
    version: str


@health_router.get(HEALTH_PATH)
def health(settings: GatewaySettings = Depends(get_gateway_settings)) -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status="OK",
        server=settings.server_name,
        version=settings.server_version,
    )


def create_app(server: Any, settings: Optional[GatewaySettings] = None) -> FastAPI:
    """
    Create the gateway application for an MCP server.

    Args:
        server: Low-level MCP Server or FastMCP instance
        settings: Gateway settings (defaults, config.yaml and env if omitted)

    Returns:
        FastAPI app
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title="MCP Gateway",
        description="Streamable HTTP transport for an MCP server",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.mcp_handler = MCPStreamableHttpHandler(
        resolve_server(server),
        json_response=settings.json_response,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=["*"],
    )

    # Static catch-all goes last so it never shadows the other routes
    app.include_router(health_router, tags=["health"])
    app.include_router(mcp_router, prefix=MCP_PATH, tags=["mcp"])
    app.include_router(static_router, tags=["static"])

    return app


def run_server(server: Any, settings: Optional[GatewaySettings] = None) -> None:
    """Run the gateway with uvicorn until interrupted."""
    import uvicorn

    if settings is None:
        settings = get_settings()
    app = create_app(server, settings)

    version = get_current_version()
    base_url = f"http://localhost:{settings.port}"
    logger.info(
        f"Starting MCP gateway v{version['version']} "
        f"(commit {version['git_commit']}, built {version['build_time']})"
    )
    logger.info(f"MCP Streamable HTTP server running at {base_url}")
    logger.info(f"- MCP Endpoint: {base_url}{MCP_PATH}")
    logger.info(f"- Health Check: {base_url}{HEALTH_PATH}")
    logger.debug(f"Serving static files from {settings.static_dir}")

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "warning",
    )
