"""Entry point for qiita-mcp MCP server.

Run with: uv run python -m qiita_mcp
Or via fastmcp: uv run fastmcp run qiita_mcp.server:mcp

HTTP transport (for remote access):
    uv run python -m qiita_mcp --http --port 9000
"""

from __future__ import annotations

import argparse
import logging

from qiita_mcp.config import get_log_level
from qiita_mcp.utils.logging import setup_logging


def main() -> None:
    """Run the MCP server."""
    parser = argparse.ArgumentParser(description="qiita-mcp MCP server")
    parser.add_argument(
        "--http",
        action="store_true",
        help="Use HTTP transport instead of stdio (for remote access)",
    )
    parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="Host to bind HTTP server (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=9000,
        help="Port for HTTP transport (default: 9000)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: QIITA_MCP_LOG_LEVEL or INFO)",
    )
    args = parser.parse_args()

    from qiita_mcp.server import mcp

    level = get_log_level()
    if args.log_level:
        parsed = logging.getLevelName(args.log_level.upper())
        if isinstance(parsed, int):
            level = parsed
    setup_logging(level)

    if args.http:
        mcp.run(transport="http", host=args.host, port=args.port)
    else:
        mcp.run()


if __name__ == "__main__":
    main()
