"""Entry point for the LearningSuite MCP server."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from learningsuite_mcp_server.client import LearningSuiteClient
from learningsuite_mcp_server.config import Settings, load_settings
from learningsuite_mcp_server.errors import ConfigurationError
from learningsuite_mcp_server.fastmcp_adapter import build_fastmcp_app

logger = logging.getLogger(__name__)

TRANSPORTS = ("stdio", "http", "sse", "streamable-http")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(description="LearningSuite MCP server")
    parser.add_argument(
        "--transport",
        choices=TRANSPORTS,
        default="stdio",
        help="MCP transport to serve (default: stdio).",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Bind address for HTTP.")
    parser.add_argument("--port", type=int, default=8000, help="Port for HTTP.")
    parser.add_argument("--path", default=None, help="Endpoint path for HTTP.")
    parser.add_argument(
        "--catalog",
        action="store_true",
        help="Print the available tool catalog as JSON and exit.",
    )
    return parser


def configure_logging(level: str) -> None:
    """Send log records to stderr; stdout is reserved for the stdio transport."""
    logging.basicConfig(
        level=level.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_client(settings: Settings) -> LearningSuiteClient:
    """Build the API client described by ``settings``."""
    return LearningSuiteClient(
        settings.api_key.get_secret_value(), base_url=settings.base_url
    )


def main(argv: list[str] | None = None) -> int:
    """Load settings, register tools and serve them over the chosen transport."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ConfigurationError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    configure_logging(settings.log_level)
    app, server = build_fastmcp_app(create_client(settings))

    if args.catalog:
        print(json.dumps(server.to_catalog(), indent=2))
        return 0

    if args.transport == "stdio":
        logger.info("LearningSuite MCP server running on stdio")
        app.run(transport="stdio")
    else:
        options: dict[str, object] = {"host": args.host, "port": args.port}
        if args.path is not None:
            options["path"] = args.path
        logger.info("LearningSuite MCP server running on %s", args.transport)
        app.run(transport=args.transport, **options)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
