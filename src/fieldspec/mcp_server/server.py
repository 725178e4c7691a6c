"""
MCP Server implementation for fieldspec.

Provides both stdio and SSE transport support for the Model Context Protocol.
"""

import json
import logging
from typing import Any, Literal

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.server.sse import SseServerTransport
from mcp.types import Tool, TextContent
from starlette.applications import Starlette
from starlette.responses import JSONResponse
from starlette.routing import Mount, Route

from fieldspec import __version__
from fieldspec.config import get_config
from fieldspec.mcp_server.tools import get_mcp_tools, mcp_parse_field_spec, mcp_parse_form

logger = logging.getLogger("fieldspec-mcp")


async def handle_tool_call(name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    """
    Run a tool by name.

    Raises:
        ValueError: If the tool is unknown or its arguments are invalid.
    """
    if name == "parse_field_spec":
        spec = arguments.get("spec")
        if not isinstance(spec, str):
            raise ValueError("'spec' must be a string")
        return mcp_parse_field_spec(spec)
    if name == "parse_form":
        fields = arguments.get("fields")
        if not isinstance(fields, dict):
            raise ValueError("'fields' must be an object")
        return mcp_parse_form(
            fields=fields,
            form_id=arguments.get("form_id", "form"),
            title=arguments.get("title", "Form"),
            description=arguments.get("description"),
        )
    raise ValueError(f"Unknown tool: {name}")


def create_mcp_server() -> Server:
    """
    Create and configure the MCP server instance.

    Returns:
        Configured MCP Server with fieldspec tools registered.
    """
    server = Server("fieldspec-mcp")

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List available tools."""
        return [
            Tool(
                name=t["name"],
                description=t["description"],
                inputSchema=t["inputSchema"],
            )
            for t in get_mcp_tools()
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        """Handle tool calls."""
        logger.info(f"Tool call: {name} with args: {arguments}")
        indent = get_config().indent_json_output

        try:
            result = await handle_tool_call(name, arguments or {})
        except (TypeError, ValueError) as e:
            logger.error(f"Error in {name}: {e}")
            return [TextContent(type="text", text=json.dumps({"error": str(e)}))]

        return [TextContent(type="text", text=json.dumps(result, indent=indent))]

    return server


async def run_stdio_server(server: Server) -> None:
    """
    Run MCP server with stdio transport.

    Used for desktop clients and local subprocess communication.
    """
    logger.info("Starting MCP server with stdio transport...")

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def create_sse_app(server: Server) -> Starlette:
    """
    Create Starlette app for SSE transport.

    Used for remote/Docker deployment.
    """
    # Messages endpoint is relative to the SSE mount point
    sse_transport = SseServerTransport("/messages/")

    async def handle_sse(scope, receive, send):
        """Handle SSE connections - raw ASGI handler."""
        async with sse_transport.connect_sse(scope, receive, send) as streams:
            await server.run(
                streams[0],
                streams[1],
                server.create_initialization_options(),
            )

    async def handle_messages(scope, receive, send):
        """Handle message POST requests - raw ASGI handler."""
        await sse_transport.handle_post_message(scope, receive, send)

    async def health_check(request):
        """Health check endpoint."""
        return JSONResponse({
            "status": "healthy",
            "service": "fieldspec-mcp",
            "transport": "sse",
            "version": __version__,
        })

    return Starlette(
        routes=[
            Route("/health", health_check, methods=["GET"]),
            Mount("/sse/messages", app=handle_messages),
            Mount("/sse", app=handle_sse),
        ],
    )


async def run_sse_server(server: Server, host: str = "0.0.0.0", port: int = 8080) -> None:
    """
    Run MCP server with SSE transport.

    Args:
        server: MCP Server instance
        host: Host to bind to
        port: Port to listen on
    """
    import uvicorn

    logger.info(f"Starting MCP server with SSE transport on {host}:{port}...")

    app = create_sse_app(server)
    config = uvicorn.Config(app, host=host, port=port, log_level=get_config().log_level.lower())
    server_instance = uvicorn.Server(config)
    await server_instance.serve()


async def run_mcp_server(
    transport: Literal["stdio", "sse"] = "stdio",
    host: str = "0.0.0.0",
    port: int = 8080,
) -> None:
    """
    Run MCP server with specified transport.

    Args:
        transport: Transport type - "stdio" or "sse"
        host: Host for SSE transport (default: 0.0.0.0)
        port: Port for SSE transport (default: 8080)
    """
    if transport not in ("stdio", "sse"):
        raise ValueError(f"Unknown transport: {transport}. Use 'stdio' or 'sse'.")

    server = create_mcp_server()

    if transport == "stdio":
        await run_stdio_server(server)
    else:
        await run_sse_server(server, host, port)
