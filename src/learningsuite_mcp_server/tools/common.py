"""Shared helpers for MCP tools."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from learningsuite_mcp_server.client import LearningSuiteClient
from learningsuite_mcp_server.operations import get_operation
from learningsuite_mcp_server.tooling import ToolDefinition, ToolParameters


class NoParams(ToolParameters):
    """Parameters for tools that take no arguments."""


class PaginationParams(ToolParameters):
    """Optional ``limit``/``offset`` pagination window."""

    limit: float | None = Field(default=None, description="Maximum to return")
    offset: float | None = Field(default=None, description="Offset for pagination")


def api_tool(
    client: LearningSuiteClient,
    name: str,
    description: str,
    parameters_model: type[ToolParameters],
    operation_id: str,
) -> ToolDefinition:
    """Bind a tool name and argument model to a catalog operation.

    Args:
        client: Transport client that performs the HTTP call.
        name: Public tool name.
        description: Human-readable tool description.
        parameters_model: Argument model advertised and validated for the tool.
        operation_id: Key into :data:`~learningsuite_mcp_server.operations.CATALOG`.

    Raises:
        KeyError: If ``operation_id`` is not in the catalog.

    Returns:
        Tool definition whose handler executes the operation.
    """
    operation = get_operation(operation_id)

    async def handler(arguments: dict[str, Any]) -> Any:
        return await client.execute(operation, arguments)

    return ToolDefinition(
        name=name,
        description=description,
        parameters_model=parameters_model,
        handler=handler,
    )
