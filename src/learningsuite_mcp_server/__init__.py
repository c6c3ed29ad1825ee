"""Model Context Protocol server for the LearningSuite API."""

from learningsuite_mcp_server.client import LearningSuiteClient
from learningsuite_mcp_server.errors import LearningSuiteError
from learningsuite_mcp_server.server import MCPServer, ToolResult, build_server
from learningsuite_mcp_server.tooling import ToolDefinition, ToolParameters

__all__ = [
    "LearningSuiteClient",
    "LearningSuiteError",
    "MCPServer",
    "ToolDefinition",
    "ToolParameters",
    "ToolResult",
    "build_server",
]
