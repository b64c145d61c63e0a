"""
Gateway Runtime Configuration

Settings model and configuration merging logic.
Combines defaults, YAML config, and environment variables.
"""

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from mcp_gateway.configs.paths import DEFAULT_STATIC_DIR
from mcp_gateway.configs.yaml_config import load_yaml_config
from mcp_gateway.exceptions import ConfigurationError
from mcp_gateway.version import __version__

# --- Default Runtime Configuration ---

DEFAULT_CONFIG: dict[str, Any] = {
    "host": "0.0.0.0",
    "port": 3000,
    "server_name": "mcp-gateway",
    "server_version": __version__,
    "static_dir": str(DEFAULT_STATIC_DIR),
    "json_response": False,
    "cors_origins": ["*"],
    "server_target": None,
    "debug": False,
}

# env var -> config key
ENV_OVERRIDES = {
    "MCP_GATEWAY_HOST": "host",
    "MCP_GATEWAY_PORT": "port",
    "MCP_GATEWAY_SERVER_NAME": "server_name",
    "MCP_GATEWAY_SERVER_VERSION": "server_version",
    "MCP_GATEWAY_STATIC_DIR": "static_dir",
    "MCP_GATEWAY_JSON_RESPONSE": "json_response",
    "MCP_GATEWAY_CORS_ORIGINS": "cors_origins",
    "MCP_GATEWAY_TARGET": "server_target",
    "MCP_GATEWAY_DEBUG": "debug",
}


class GatewaySettings(BaseModel):
    """Validated gateway settings."""

    host: str = Field(DEFAULT_CONFIG["host"], description="Interface to bind")
    port: int = Field(DEFAULT_CONFIG["port"], ge=1, le=65535, description="TCP port")
    server_name: str = Field(DEFAULT_CONFIG["server_name"], description="Name reported by /health")
    server_version: str = Field(DEFAULT_CONFIG["server_version"], description="Version reported by /health")
    static_dir: Path = Field(DEFAULT_STATIC_DIR, description="Root directory for GET /*")
    json_response: bool = Field(False, description="Reply with JSON instead of an SSE stream")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")
    server_target: Optional[str] = Field(None, description="package.module:attribute of the MCP server")
    debug: bool = False

    @field_validator("static_dir", mode="before")
    @classmethod
    def _expand_static_dir(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Path(value).expanduser()
        return value

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value


def _env_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")


def get_full_config() -> dict:
    """
    Get full configuration merged from defaults, YAML, and environment.

    Priority (highest wins):
    1. Environment variables
    2. YAML config file
    3. DEFAULT_CONFIG

    Returns:
        Merged configuration dictionary
    """
    config = dict(DEFAULT_CONFIG)

    # Merge YAML config (unknown keys are ignored)
    yaml_config = load_yaml_config()
    for key, value in yaml_config.items():
        if key in config and value is not None:
            config[key] = value

    # PORT is the conventional fallback used by hosting platforms
    if os.environ.get("PORT"):
        config["port"] = os.environ["PORT"]

    for env_var, key in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if not value:
            continue
        if key in ("json_response", "debug"):
            config[key] = _env_bool(value)
        else:
            config[key] = value

    return config


def get_settings(**overrides: Any) -> GatewaySettings:
    """
    Build validated settings.

    Args:
        **overrides: Explicit values (e.g. from the command line). None values
                     are skipped so unset CLI flags don't mask lower layers.

    Returns:
        GatewaySettings

    Raises:
        ConfigurationError: If any merged value fails validation
    """
    config = get_full_config()
    config.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return GatewaySettings.model_validate(config)
    except ValidationError as e:
        fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise ConfigurationError("Invalid gateway configuration", {"fields": fields}) from e
