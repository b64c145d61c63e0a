"""
Gateway Paths

Locations of the data directory (config file, logs) and the static web root.
"""

import os
from pathlib import Path

DEFAULT_DATA_PATH = Path.home() / ".mcp-gateway"

# <project root>/public, next to the mcp_gateway package
DEFAULT_STATIC_DIR = Path(__file__).resolve().parent.parent.parent / "public"


def get_data_path() -> Path:
    """Get the gateway data directory path.

    MCP_GATEWAY_DATA_PATH overrides the default of ~/.mcp-gateway.

    Returns:
        Path to the data directory
    """
    data_path = os.environ.get("MCP_GATEWAY_DATA_PATH")
    if data_path:
        return Path(data_path).expanduser()
    return DEFAULT_DATA_PATH


def ensure_data_dir() -> Path:
    """Ensure the data directory exists.

    Returns:
        Path to data directory
    """
    data_path = get_data_path()
    data_path.mkdir(parents=True, exist_ok=True)
    return data_path
