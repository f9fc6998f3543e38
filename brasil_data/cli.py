"""Command-line entrypoint: run a data source tool and print its JSON result.

Usage:
    brasil-data list
    brasil-data serve
    brasil-data call lookup_cnpj cnpj=12345678000190
    brasil-data call bcb_indicator indicator=ipca last_n=6
    python -m brasil_data.cli call pncp_contracts start_date=20240101 end_date=20240131 state=SP
"""

import argparse
import json
import logging
import sys
from typing import Optional

from brasil_data.config import get_settings
from brasil_data.exceptions import BrasilDataError
from brasil_data.tools import call_tool, close_toolbox, list_tools, mcp
from brasil_data.utils import setup_logging

logger = logging.getLogger(__name__)


def parse_arguments(pairs: list[str]) -> dict:
    """Turn ``key=value`` pairs into a dict.

    Raises:
        ValueError: If a pair has no ``=``
    """
    arguments = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"expected key=value, got {pair!r}")
        arguments[key.strip()] = value
    return arguments


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="brasil-data",
        description="Query Brazilian government open data APIs",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (default: LOG_LEVEL env or INFO)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON lines",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("list", help="List available tools")
    subparsers.add_parser("serve", help="Run the MCP server over stdio")

    call = subparsers.add_parser("call", help="Call a tool")
    call.add_argument("tool", help="Tool name (see 'list')")
    call.add_argument(
        "arguments",
        nargs="*",
        metavar="key=value",
        help="Tool arguments",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(
        level=args.log_level or settings.log_level,
        json_format=args.json_logs,
    )

    if args.command == "list":
        print(json.dumps(list_tools(), indent=2, ensure_ascii=False))
        return 0

    if args.command == "serve":
        logger.info("Starting MCP server on stdio")
        try:
            mcp.run()
        finally:
            close_toolbox()
        return 0

    try:
        arguments = parse_arguments(args.arguments)
    except ValueError as e:
        parser.error(str(e))

    try:
        result = call_tool(args.tool, arguments)
    except BrasilDataError as e:
        logger.error(
            f"Tool {args.tool} failed: {e}",
            extra={"tool": args.tool, "error_type": type(e).__name__},
        )
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        close_toolbox()

    print(json.dumps(result, indent=2, ensure_ascii=False, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
