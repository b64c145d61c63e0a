"""
Gateway Logging Configuration

Configures logging based on environment variables:
- MCP_GATEWAY_DEBUG: Enable debug logging (default: false)
- MCP_GATEWAY_LOG_FILE: Optional log file path (default: stderr only)

Everything goes to stderr so stdout stays free for process managers.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional


def setup_logging(
    debug: Optional[bool] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure logging for the gateway.

    Args:
        debug: Enable debug level. Defaults to MCP_GATEWAY_DEBUG env var.
        log_file: Log file path. Defaults to MCP_GATEWAY_LOG_FILE env var,
                  no file logging if neither is set.

    Returns:
        Root logger for the gateway
    """
    # Read from env if not provided
    if debug is None:
        debug = os.environ.get("MCP_GATEWAY_DEBUG", "").lower() in ("true", "1", "yes")
    if log_file is None:
        log_file = os.environ.get("MCP_GATEWAY_LOG_FILE") or None

    level = logging.DEBUG if debug else logging.INFO

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logger = logging.getLogger("mcp_gateway")
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    stderr_handler.setLevel(level)
    logger.addHandler(stderr_handler)

    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)
        logger.info(f"Logging to file: {log_path}")

    return logger


def get_logger(component: str) -> logging.Logger:
    """
    Get a logger for a specific component.

    Args:
        component: Component name (e.g., "http", "http.mcp", "engine")

    Returns:
        Logger instance for the component
    """
    return logging.getLogger(f"mcp_gateway.{component}")
