"""Command-line interface for lovense-cloud.

Provides the main entry point for running the MCP server, listing the
tool catalog, or firing a single tool call from the terminal.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from lovense_cloud.config.settings import Settings

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="lovense-cloud",
        description="MCP tool server for remote Lovense toy control",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: config/lovense-cloud.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    serve_parser = subparsers.add_parser("serve", help="Start the MCP HTTP server")
    serve_parser.add_argument("--host", type=str, default=None, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port")

    subparsers.add_parser("tools", help="List the available tools")

    call_parser = subparsers.add_parser("call", help="Invoke one tool and print the result")
    call_parser.add_argument("tool", type=str, help="Tool name (e.g. vibrate)")
    call_parser.add_argument(
        "arguments", nargs="*", metavar="KEY=VALUE",
        help="Tool arguments, e.g. intensity=12 duration=5",
    )

    return parser.parse_args(argv)


def parse_tool_arguments(pairs: list[str]) -> dict[str, Any]:
    """Turn ``key=value`` pairs into an argument mapping.

    Values are decoded as JSON where possible so ``intensity=12`` yields
    a number; anything else is kept as a string.
    """
    arguments: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got {pair!r}")
        try:
            arguments[key] = json.loads(raw)
        except ValueError:
            arguments[key] = raw
    return arguments


async def _call_tool(settings: Settings, name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    """Run a single tool invocation against the configured account."""
    from lovense_cloud.relay.http_relay import HttpRelay
    from lovense_cloud.tools.dispatch import handle_tool

    relay = HttpRelay(
        command_url=settings.relay.command_url,
        qr_url=settings.relay.qr_url,
        uname=settings.relay.uname,
        timeout=settings.relay.timeout,
    )
    async with relay:
        return await handle_tool(name, arguments, settings.credentials(), relay)


def _print_tools() -> None:
    from lovense_cloud.tools.catalog import TOOLS

    width = max(len(tool.name) for tool in TOOLS)
    for tool in TOOLS:
        print(f"{tool.name:<{width}}  {tool.description}")


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the lovense-cloud CLI."""
    args = parse_args(argv)

    if args.command is None:
        parse_args(["--help"])
        return

    from lovense_cloud.config.settings import load_settings
    from lovense_cloud.utils.logging import setup_logging

    settings = load_settings(args.config)
    if args.verbose:
        settings.logging.level = "DEBUG"

    setup_logging(settings.logging)

    if args.command == "serve":
        from lovense_cloud.server import main as serve

        if args.host:
            settings.server.host = args.host
        if args.port:
            settings.server.port = args.port
        logger.info("Starting MCP server on %s:%s", settings.server.host, settings.server.port)
        serve(settings)
    elif args.command == "tools":
        _print_tools()
    elif args.command == "call":
        try:
            arguments = parse_tool_arguments(args.arguments)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(2)
        result = asyncio.run(_call_tool(settings, args.tool, arguments))
        print(json.dumps(result, indent=2, ensure_ascii=False))
        if "error" in result:
            sys.exit(1)


if __name__ == "__main__":
    main()
