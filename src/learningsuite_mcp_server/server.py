"""Tool registry and dispatcher.

This module maps MCP tool names to their definitions and turns every call into a
uniform result envelope. It is free of transport details so that the protocol
surface (see :mod:`learningsuite_mcp_server.fastmcp_adapter`) stays thin and the
dispatch rules stay testable.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from learningsuite_mcp_server.client import LearningSuiteClient
from learningsuite_mcp_server.errors import LearningSuiteError, UnknownToolError
from learningsuite_mcp_server.tooling import ToolDefinition
from learningsuite_mcp_server.tools import build_tools

logger = logging.getLogger(__name__)


@dataclass
class ToolResult:
    """Result envelope returned for every tool call.

    Attributes:
        content: A single text block holding the JSON payload or error text.
        is_error: Whether the call failed.

    """

    content: list[dict[str, str]] = field(default_factory=list)
    is_error: bool = False

    @classmethod
    def success(cls, payload: Any) -> ToolResult:
        """Wrap a decoded API payload as pretty-printed JSON text."""
        text = json.dumps(payload, indent=2, ensure_ascii=False)
        return cls(content=[{"type": "text", "text": text}])

    @classmethod
    def failure(cls, message: str) -> ToolResult:
        """Wrap an error message."""
        return cls(
            content=[{"type": "text", "text": f"Error: {message}"}], is_error=True
        )

    @property
    def text(self) -> str:
        """Text of the single content block."""
        return self.content[0]["text"]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the protocol's ``{content, isError}`` shape."""
        return {"content": list(self.content), "isError": self.is_error}


class MCPServer:
    """In-memory registry and dispatcher for MCP tools.

    Tools are kept in registration order, which is also the discovery order.
    """

    def __init__(self) -> None:
        """Initialize an empty server registry."""
        self._tools: dict[str, ToolDefinition] = {}

    def register_tool(self, tool: ToolDefinition) -> None:
        """Register a tool with the server.

        Args:
            tool: Tool definition to register.

        Raises:
            ValueError: If a tool with the same name is already registered.

        """
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool

    def register_tools(self, *tools: ToolDefinition) -> None:
        """Register multiple tools at once.

        Args:
            *tools: Collection of tool definitions to register.

        """
        for tool in tools:
            self.register_tool(tool)

    def available_tools(self) -> list[str]:
        """List the names of registered tools in declaration order."""
        return list(self._tools)

    def list_tools(self) -> list[ToolDefinition]:
        """Return every registered tool definition in declaration order."""
        return list(self._tools.values())

    def to_catalog(self) -> list[dict[str, Any]]:
        """Produce the discovery catalog.

        Returns:
            One ``{name, description, inputSchema}`` entry per tool.

        """
        return [tool.metadata() for tool in self._tools.values()]

    def get_tool(self, name: str) -> ToolDefinition:
        """Resolve a tool by name.

        Raises:
            UnknownToolError: If the name is not registered.

        """
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(name) from None

    async def call_tool(
        self, name: str, arguments: Mapping[str, Any] | None = None
    ) -> ToolResult:
        """Execute a registered tool and wrap the outcome.

        Failures of any kind (unknown name, invalid arguments, API or transport
        errors) are returned as an error envelope rather than raised.
        Arguments are validated before the handler runs, so invalid input
        never reaches the API.

        Args:
            name: Name of the registered tool to execute.
            arguments: Raw argument map supplied by the caller.

        Returns:
            ToolResult with the JSON payload, or the error text and
            ``is_error`` set.

        """
        logger.debug("Calling tool %s", name)
        try:
            tool = self.get_tool(name)
            validated = tool.validate(dict(arguments or {}))
            payload = await tool.handler(validated)
        except LearningSuiteError as error:
            logger.warning("Tool %s failed: %s", name, error.to_dict())
            return ToolResult.failure(str(error))
        except Exception as error:
            logger.exception("Tool %s raised an unexpected error", name)
            return ToolResult.failure(str(error))
        return ToolResult.success(payload)


def build_server(client: LearningSuiteClient) -> MCPServer:
    """Create a dispatcher with the full tool catalog bound to ``client``."""
    server = MCPServer()
    server.register_tools(*build_tools(client))
    return server
