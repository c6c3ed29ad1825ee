"""Tool registration helpers for the LearningSuite MCP server."""

from __future__ import annotations

from learningsuite_mcp_server.client import LearningSuiteClient
from learningsuite_mcp_server.tooling import ToolDefinition
from learningsuite_mcp_server.tools.account import auth_tools, role_tools
from learningsuite_mcp_server.tools.community import community_tools, hub_tools
from learningsuite_mcp_server.tools.courses import (
    bundle_tools,
    course_tools,
    module_tools,
)
from learningsuite_mcp_server.tools.groups import group_tools
from learningsuite_mcp_server.tools.members import member_tools, team_member_tools
from learningsuite_mcp_server.tools.messaging import notification_tools, popup_tools
from learningsuite_mcp_server.tools.webhooks import webhook_tools


def build_tools(client: LearningSuiteClient) -> list[ToolDefinition]:
    """Instantiate all tool definitions bound to the provided client."""
    return [
        *auth_tools(client),
        *member_tools(client),
        *team_member_tools(client),
        *group_tools(client),
        *course_tools(client),
        *module_tools(client),
        *bundle_tools(client),
        *hub_tools(client),
        *community_tools(client),
        *popup_tools(client),
        *notification_tools(client),
        *role_tools(client),
        *webhook_tools(client),
    ]
