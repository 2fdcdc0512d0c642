"""Command-line entry point.

Usage:
    csvjson [--verbose] serve [--host HOST] [--port PORT]
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

import uvicorn

from csvjson.api.app import create_app
from csvjson.core.config import AppSettings, ServerConfig
from csvjson.core.exceptions import CsvJsonError
from csvjson.core.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def run_server(config: ServerConfig, settings: AppSettings | None = None) -> None:
    """Start the conversion server and block until it exits."""
    if settings is None:
        settings = AppSettings()
    settings = settings.model_copy(update={"server": config})

    if config.verbose:
        print(f"Starting server on {config.address}")
        print("Verbose mode enabled")
    else:
        print(f"Server starting on {config.address}")

    uvicorn.run(
        create_app(settings),
        host=config.host,
        port=config.port,
        log_level="debug" if config.verbose else settings.log_level.lower(),
    )


def _serve(args: argparse.Namespace, settings: AppSettings) -> None:
    config = ServerConfig(
        host=args.host,
        port=args.port,
        verbose=args.verbose,
        max_upload_bytes=settings.server.max_upload_bytes,
    )
    run_server(config, settings)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="csvjson",
        description="Convert CSV files to typed JSON through a small web service.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="verbose output")
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    serve = commands.add_parser(
        "serve",
        help="Start the application server",
        description="Start the upload form and /convert endpoint on the given host and port.",
    )
    serve.add_argument("-p", "--port", type=int, default=8080, help="Port to run the server on")
    serve.add_argument("-H", "--host", default="localhost", help="Host to bind the server to")
    serve.add_argument(
        "-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help="verbose output"
    )
    serve.set_defaults(handler=_serve)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 0

    try:
        settings = AppSettings()
        configure_logging(settings.log_level, verbose=args.verbose)
        handler(args, settings)
    except (CsvJsonError, OSError, ValueError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
