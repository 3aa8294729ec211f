"""
MCP Server module for JSON Flow.

Provides Model Context Protocol server implementation
with stdio and SSE transport support.
"""

from json_flow.mcp_server.server import create_mcp_server, run_mcp_server
from json_flow.mcp_server.tools import call_tool, get_mcp_tools

__all__ = [
    "call_tool",
    "create_mcp_server",
    "run_mcp_server",
    "get_mcp_tools",
]
