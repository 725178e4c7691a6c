"""
MCP Server module for fieldspec.

Provides Model Context Protocol server implementation
with stdio and SSE transport support.
"""

from fieldspec.mcp_server.server import create_mcp_server, handle_tool_call, run_mcp_server
from fieldspec.mcp_server.tools import get_mcp_tools

__all__ = [
    "create_mcp_server",
    "handle_tool_call",
    "run_mcp_server",
    "get_mcp_tools",
]
