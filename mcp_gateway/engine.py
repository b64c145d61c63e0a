"""
MCP Engine Loading

The gateway does not implement the protocol. It serves an MCP server object
built elsewhere: a low-level ``mcp.server.lowlevel.Server`` or a ``FastMCP``
instance wrapping one.
"""

import importlib
from typing import Any

from mcp.server.fastmcp import FastMCP
from mcp.server.lowlevel import Server

from mcp_gateway.configs import get_logger
from mcp_gateway.exceptions import EngineLoadError

logger = get_logger("engine")


def resolve_server(obj: Any) -> Server:
    """
    Return the low-level server behind an MCP server object.

    Args:
        obj: A low-level Server or a FastMCP instance

    Returns:
        The low-level Server that runs against transport streams

    Raises:
        EngineLoadError: If obj is neither
    """
    if isinstance(obj, FastMCP):
        return obj._mcp_server
    if isinstance(obj, Server):
        return obj
    raise EngineLoadError(f"Not an MCP server: {type(obj).__name__}")


def load_engine(target: str) -> Server:
    """
    Import an MCP server from a ``package.module:attribute`` target.

    The attribute may be the server itself or a zero-argument factory
    returning it (e.g. ``my_app.server:get_server``).

    Args:
        target: Import target string

    Returns:
        The low-level Server to serve

    Raises:
        EngineLoadError: If the target is malformed, can't be imported,
                         or doesn't yield an MCP server
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise EngineLoadError("Expected target in the form package.module:attribute", target)

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise EngineLoadError(f"Could not import {module_name}: {e}", target) from e

    obj: Any = module
    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise EngineLoadError(f"{module_name} has no attribute {attr_path}", target) from e

    if not isinstance(obj, (Server, FastMCP)) and callable(obj):
        logger.debug(f"Calling factory {target}")
        try:
            obj = obj()
        except Exception as e:
            raise EngineLoadError(f"Factory {attr_path} failed: {e}", target) from e

    server = resolve_server(obj)
    logger.info(f"Loaded MCP server '{server.name}' from {target}")
    return server
