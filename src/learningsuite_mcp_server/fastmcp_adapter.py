"""Adapters for exposing LearningSuite tools via FastMCP."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent

from learningsuite_mcp_server.client import LearningSuiteClient
from learningsuite_mcp_server.server import MCPServer, build_server
from learningsuite_mcp_server.tooling import ToolDefinition


class ToolDefinitionAdapter(Tool):
    """Expose a :class:`ToolDefinition` as a FastMCP tool."""

    def __init__(self, definition: ToolDefinition, server: MCPServer) -> None:
        """Create a FastMCP tool wrapper dispatching through ``server``."""
        super().__init__(
            name=definition.name,
            description=definition.description,
            parameters=definition.input_schema(),
            tags=set(),
        )
        self._server = server

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        """Dispatch the call and translate the envelope for FastMCP.

        Error envelopes are raised as :class:`ToolError` so the host receives a
        result flagged ``isError`` with the same text.
        """
        result = await self._server.call_tool(self.name, arguments)
        if result.is_error:
            raise ToolError(result.text)
        return ToolResult(content=[TextContent(type="text", text=result.text)])


def to_fastmcp_tools(server: MCPServer) -> list[Tool]:
    """Wrap every tool registered on ``server``."""
    return [
        ToolDefinitionAdapter(definition, server) for definition in server.list_tools()
    ]


def build_fastmcp_app(client: LearningSuiteClient) -> tuple[FastMCP, MCPServer]:
    """Create a FastMCP server instance with all LearningSuite tools registered."""
    app = FastMCP(
        name="learningsuite-mcp-server",
        instructions="LearningSuite API tools exposed over the Model Context Protocol.",
    )
    server = build_server(client)
    for tool in to_fastmcp_tools(server):
        app.add_tool(tool)
    return app, server
