"""
Gateway Configuration Module

Re-exports commonly used functions for cleaner imports across the codebase.
"""

# Logging (most commonly used)
from mcp_gateway.configs.logging import get_logger, setup_logging

# Paths
from mcp_gateway.configs.paths import DEFAULT_STATIC_DIR, ensure_data_dir, get_data_path

# Constants
from mcp_gateway.configs.constants import (
    CONTENT_TYPES,
    DEFAULT_CONTENT_TYPE,
    INTERNAL_ERROR_CODE,
    INTERNAL_ERROR_MESSAGE,
    JSON_RPC_VERSION,
    get_content_type,
)

# YAML config
from mcp_gateway.configs.yaml_config import (
    DEFAULT_CONFIG_YAML,
    create_default_config,
    get_config_path,
    load_yaml_config,
)

# Runtime
from mcp_gateway.configs.runtime import (
    DEFAULT_CONFIG,
    GatewaySettings,
    get_full_config,
    get_settings,
)

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Paths
    "get_data_path",
    "ensure_data_dir",
    "DEFAULT_STATIC_DIR",
    # Constants
    "CONTENT_TYPES",
    "DEFAULT_CONTENT_TYPE",
    "INTERNAL_ERROR_CODE",
    "INTERNAL_ERROR_MESSAGE",
    "JSON_RPC_VERSION",
    "get_content_type",
    # YAML config
    "DEFAULT_CONFIG_YAML",
    "get_config_path",
    "load_yaml_config",
    "create_default_config",
    # Runtime
    "DEFAULT_CONFIG",
    "GatewaySettings",
    "get_full_config",
    "get_settings",
]
