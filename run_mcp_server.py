"""
fieldspec MCP Server Entry Point.

Run the MCP server with either stdio or SSE transport.

Usage:
    # stdio mode (for desktop clients)
    python run_mcp_server.py --transport stdio

    # SSE mode (for Docker/remote)
    python run_mcp_server.py --transport sse --port 8080

    # Use environment variables
    MCP_TRANSPORT=sse MCP_PORT=8080 python run_mcp_server.py
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add src to path for local development
sys.path.insert(0, str(Path(__file__).parent / "src"))

from fieldspec.config import get_config
from fieldspec.mcp_server import run_mcp_server

logger = logging.getLogger("fieldspec-mcp")


def main():
    """Main entry point."""
    config = get_config()

    parser = argparse.ArgumentParser(
        description="fieldspec MCP Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Desktop client (stdio)
  python run_mcp_server.py --transport stdio

  # Docker/Remote (SSE)
  python run_mcp_server.py --transport sse --port 8080

Environment Variables:
  MCP_TRANSPORT        Transport type: stdio or sse (default: stdio)
  MCP_HOST             Host for SSE transport (default: 0.0.0.0)
  MCP_PORT             Port for SSE transport (default: 8080)
  FIELDSPEC_LOG_LEVEL  Logging level (default: INFO)
        """,
    )

    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=config.mcp_transport,
        help=f"Transport type (default: {config.mcp_transport})",
    )

    parser.add_argument(
        "--host",
        default=config.mcp_host,
        help=f"Host for SSE transport (default: {config.mcp_host})",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=config.mcp_port,
        help=f"Port for SSE transport (default: {config.mcp_port})",
    )

    args = parser.parse_args()

    # stdout carries the protocol in stdio mode, so logs go to stderr
    logging.basicConfig(level=config.log_level, stream=sys.stderr)

    logger.info(f"Transport: {args.transport}")
    if args.transport == "sse":
        logger.info(f"Listening on {args.host}:{args.port}")

    try:
        asyncio.run(
            run_mcp_server(
                transport=args.transport,
                host=args.host,
                port=args.port,
            )
        )
    except KeyboardInterrupt:
        logger.info("Server stopped.")
    except Exception as e:
        logger.error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
