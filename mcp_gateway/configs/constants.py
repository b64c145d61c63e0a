"""
Gateway Constants

Protocol values and the static file content-type table.
"""

# --- JSON-RPC ---

JSON_RPC_VERSION = "2.0"

# Implementation-defined server error used for the catch-all response
INTERNAL_ERROR_CODE = -32000
INTERNAL_ERROR_MESSAGE = "Internal server error."

# --- HTTP ---

MCP_PATH = "/mcp"
HEALTH_PATH = "/health"
INDEX_FILE = "index.html"

CORS_ALLOW_METHODS = ["GET", "HEAD", "PUT", "POST", "DELETE", "PATCH"]

# --- Static Files ---
# Keys are lowercase extensions; anything missing is served as text/plain

DEFAULT_CONTENT_TYPE = "text/plain"

CONTENT_TYPES = {
    ".html": "text/html",
    ".css": "text/css",
    ".js": "text/javascript",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".ico": "image/x-icon",
    ".svg": "image/svg+xml",
    ".txt": "text/plain",
}


def get_content_type(extension: str) -> str:
    """
    Get the content type for a file extension.

    Args:
        extension: Extension including the dot (e.g., ".html"), any case

    Returns:
        MIME type, DEFAULT_CONTENT_TYPE for unknown extensions
    """
    return CONTENT_TYPES.get(extension.lower(), DEFAULT_CONTENT_TYPE)
