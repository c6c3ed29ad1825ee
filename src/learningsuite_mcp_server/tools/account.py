"""Tools for the API key itself and account-wide roles."""

from __future__ import annotations

from learningsuite_mcp_server.client import LearningSuiteClient
from learningsuite_mcp_server.tooling import ToolDefinition
from learningsuite_mcp_server.tools.common import NoParams, api_tool


def auth_tools(client: LearningSuiteClient) -> list[ToolDefinition]:
    """API key validation."""
    return [
        api_tool(
            client,
            "learningsuite_check_auth",
            "Check if the API key is valid and get authorization info",
            NoParams,
            "check_auth",
        ),
    ]


def role_tools(client: LearningSuiteClient) -> list[ToolDefinition]:
    """Account role listing."""
    return [
        api_tool(
            client,
            "learningsuite_list_roles",
            "Get all roles",
            NoParams,
            "list_roles",
        ),
    ]
