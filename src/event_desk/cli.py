from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .bootstrap import configure_logging
from .config import get_settings


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings().server
    parser = argparse.ArgumentParser(description="Event Desk command line interface.")
    parser.add_argument("--log-level", default=None, help="Override EVENT_DESK_LOG_LEVEL.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("shell", help="Run the interactive event menu.")

    api_parser = subparsers.add_parser("api", help="Start the FastAPI server exposing the event functions.")
    api_parser.add_argument("--host", default=settings.api_host)
    api_parser.add_argument("--port", type=int, default=settings.api_port)

    mcp_parser = subparsers.add_parser("mcp", help="Start the FastMCP server exposing the event functions.")
    mcp_parser.add_argument("--host", default=settings.mcp_host)
    mcp_parser.add_argument("--port", type=int, default=settings.mcp_port)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    logging.getLogger(__name__).info("Event Desk CLI starting: %s", args.command)

    if args.command == "shell":
        from .ui import run_console

        run_console()
    elif args.command == "api":
        from .services.http import run_local_server

        run_local_server(host=args.host, port=args.port)
    elif args.command == "mcp":
        from .services.mcp import run_mcp_server

        run_mcp_server(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()


if __name__ == "__main__":
    main()
