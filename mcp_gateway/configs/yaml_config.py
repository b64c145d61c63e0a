"""
Gateway YAML Configuration

Loading, saving, and defaults for ~/.mcp-gateway/config.yaml.
"""

from pathlib import Path

import yaml

from mcp_gateway.configs.logging import get_logger
from mcp_gateway.configs.paths import ensure_data_dir, get_data_path

logger = get_logger("config")

# --- Default Config Template ---

DEFAULT_CONFIG_YAML = """\
# MCP Gateway Configuration
# Edit this file to customize the HTTP gateway.

# Interface and port to listen on
host: "0.0.0.0"
port: 3000

# Reported by GET /health
server_name: "mcp-gateway"
# server_version: "1.0.0"

# MCP server object to serve, as package.module:attribute
# server_target: "my_package.server:mcp"

# Directory served for GET /* (defaults to ./public next to the package)
# static_dir: ~/mcp-gateway/public

# Answer POST /mcp with a single JSON body instead of an SSE stream
json_response: false

# Allowed CORS origins
cors_origins:
  - "*"

# Enable debug logging
debug: false
"""


def get_config_path() -> Path:
    """Get the path to config.yaml."""
    return get_data_path() / "config.yaml"


def load_yaml_config() -> dict:
    """
    Load configuration from ~/.mcp-gateway/config.yaml.

    Returns:
        Configuration dictionary (empty if file doesn't exist or is invalid)
    """
    config_path = get_config_path()
    if not config_path.exists():
        return {}

    try:
        loaded = yaml.safe_load(config_path.read_text())
    except yaml.YAMLError as e:
        logger.warning(f"Ignoring unreadable config {config_path}: {e}")
        return {}

    if not isinstance(loaded, dict):
        return {}
    return loaded


def create_default_config() -> Path:
    """
    Write the commented default config if none exists.

    Returns:
        Path to the config file
    """
    config_path = get_config_path()
    if not config_path.exists():
        ensure_data_dir()
        config_path.write_text(DEFAULT_CONFIG_YAML)
    return config_path
