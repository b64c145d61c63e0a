"""
Version Information

Package version and build details logged when the server starts.
"""

import os

__version__ = "1.0.0"


def get_current_version() -> dict:
    """
    Get current gateway version info.

    Returns:
        Dict with git_commit, build_time, version
    """
    return {
        "git_commit": os.environ.get("MCP_GATEWAY_GIT_COMMIT", "unknown"),
        "build_time": os.environ.get("MCP_GATEWAY_BUILD_TIME", "unknown"),
        "version": __version__,
    }
