#!/usr/bin/env python3
"""
MCP Gateway Entrypoint

Serves an MCP server over streamable HTTP.

Usage:
  entrypoint.py [TARGET] [--host HOST] [--port PORT] [--static-dir DIR]
                [--json-response] [--debug]

TARGET is package.module:attribute naming the MCP server (or a factory
returning it). Defaults to server_target from config.yaml or MCP_GATEWAY_TARGET.
"""

import argparse
import sys
from typing import Optional


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="MCP streamable HTTP gateway")
    parser.add_argument(
        "target",
        nargs="?",
        help="MCP server to serve, as package.module:attribute",
    )
    parser.add_argument("--host", help="Interface to bind (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, help="Port to listen on (default: 3000)")
    parser.add_argument("--static-dir", help="Directory served for GET /*")
    parser.add_argument(
        "--json-response",
        action="store_true",
        default=None,
        help="Reply with a JSON body instead of an SSE stream",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Enable debug logging",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    from mcp_gateway.configs import create_default_config, get_logger, get_settings, setup_logging
    from mcp_gateway.controllers.http import run_server
    from mcp_gateway.engine import load_engine
    from mcp_gateway.exceptions import ConfigurationError, EngineLoadError

    try:
        create_default_config()
    except OSError as e:
        print(f"Could not write default config: {e}", file=sys.stderr)

    try:
        settings = get_settings(
            server_target=args.target,
            host=args.host,
            port=args.port,
            static_dir=args.static_dir,
            json_response=args.json_response,
            debug=args.debug,
        )
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    # Initialize logging (must be called before get_logger)
    setup_logging(debug=settings.debug)
    logger = get_logger("entrypoint")

    if not settings.server_target:
        print("No MCP server target given", file=sys.stderr)
        print("Usage: entrypoint.py package.module:attribute [--port PORT]", file=sys.stderr)
        return 1

    try:
        server = load_engine(settings.server_target)
    except EngineLoadError as e:
        logger.error(f"Could not load MCP server: {e}")
        return 1

    run_server(server, settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
