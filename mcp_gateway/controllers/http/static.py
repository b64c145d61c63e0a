"""
Static Files

Serves the web client from the configured static directory for any GET
that no other route claims.
"""

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response

from mcp_gateway.configs import GatewaySettings, get_content_type, get_logger
from mcp_gateway.configs.constants import INDEX_FILE
from mcp_gateway.exceptions import StaticPathForbiddenError

logger = get_logger("http.static")

router = APIRouter()


def resolve_static_path(static_dir: Path, request_path: str) -> Path:
    """
    Map a request path onto the static directory.

    Args:
        static_dir: Static root directory
        request_path: URL path, e.g. "/css/app.css" ("/" means index.html)

    Returns:
        Absolute path of the requested file (may not exist)

    Raises:
        StaticPathForbiddenError: If the path resolves outside static_dir
    """
    if request_path in ("", "/"):
        request_path = f"/{INDEX_FILE}"

    root = static_dir.resolve()
    full_path = (root / request_path.lstrip("/")).resolve()

    if not full_path.is_relative_to(root):
        raise StaticPathForbiddenError(request_path)
    return full_path


def serve_static_file(static_dir: Path, request_path: str) -> Response:
    """
    Build the response for a static file request.

    Returns:
        200 with the file, 403 outside the root, 404 if missing or not a
        regular file, 500 on any other failure
    """
    try:
        try:
            file_path = resolve_static_path(static_dir, request_path)
        except StaticPathForbiddenError:
            logger.warning(f"Rejected static path outside root: {request_path}")
            return PlainTextResponse("Forbidden", status_code=403)
        except ValueError:
            # e.g. an embedded null byte: no such file can exist
            return PlainTextResponse("Not Found", status_code=404)

        try:
            if not file_path.is_file():
                return PlainTextResponse("Not Found", status_code=404)
            content = file_path.read_bytes()
        except OSError:
            return PlainTextResponse("Not Found", status_code=404)

        return Response(content=content, media_type=get_content_type(file_path.suffix))
    except Exception as e:
        logger.error(f"Error serving static file: {e}")
        return PlainTextResponse("Internal Server Error", status_code=500)


def get_gateway_settings(request: Request) -> GatewaySettings:
    """Get the settings attached to the running app."""
    return request.app.state.settings


# --- Endpoints ---


@router.get("/{full_path:path}")
def serve_static(
    full_path: str,
    settings: GatewaySettings = Depends(get_gateway_settings),
) -> Response:
    """Serve a file from the static directory."""
    return serve_static_file(settings.static_dir, f"/{full_path}")
