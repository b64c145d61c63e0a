"""
Gateway Exception Hierarchy

Centralized exception classes for structured error handling across the gateway.
All gateway-specific exceptions inherit from GatewayError.

Usage:
    from mcp_gateway.exceptions import GatewayError, EngineLoadError

    try:
        server = load_engine(target)
    except EngineLoadError as e:
        logger.error(f"Could not load engine: {e}")
"""


class GatewayError(Exception):
    """Base exception for all gateway errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(GatewayError):
    """Error in gateway configuration."""

    pass


# =============================================================================
# Engine Errors
# =============================================================================


class EngineLoadError(GatewayError):
    """The MCP server object could not be imported or is not usable."""

    def __init__(self, message: str, target: str | None = None):
        details = {"target": target} if target else {}
        super().__init__(message, details)
        self.target = target


# =============================================================================
# Static File Errors
# =============================================================================


class StaticFileError(GatewayError):
    """Base class for static file serving errors."""

    pass


class StaticPathForbiddenError(StaticFileError):
    """Requested path resolves outside the static root."""

    def __init__(self, request_path: str):
        super().__init__("Path escapes static root", {"path": request_path})
        self.request_path = request_path
