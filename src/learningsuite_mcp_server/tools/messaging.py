"""Tools for popups and push notifications."""

from __future__ import annotations

from pydantic import Field

from learningsuite_mcp_server.client import LearningSuiteClient
from learningsuite_mcp_server.tooling import ToolDefinition, ToolParameters
from learningsuite_mcp_server.tools.common import PaginationParams, api_tool


class PopupParams(ToolParameters):
    popup_id: str = Field(description="Popup ID")


class PopupTriggerParams(PopupParams):
    """Popup and the member it is shown to."""

    member_id: str = Field(description="Member ID")


class PushNotificationParams(ToolParameters):
    """Parameters for learningsuite_send_push_notifications.

    Recipients are the union of ``userIds`` and the members of ``groupIds``.
    """

    user_ids: list[str] | None = Field(default=None, description="Array of user IDs")
    group_ids: list[str] | None = Field(default=None, description="Array of group IDs")
    title: str | None = Field(default=None, description="Notification title")
    body: str | None = Field(default=None, description="Notification body text")
    link_url: str = Field(description="Link URL when tapped")
    public_image_url: str | None = Field(
        default=None, description="Public image URL for notification"
    )


def popup_tools(client: LearningSuiteClient) -> list[ToolDefinition]:
    """Popup reads and the per-member trigger lifecycle."""
    return [
        api_tool(
            client,
            "learningsuite_list_popups",
            "Get all popups",
            PaginationParams,
            "list_popups",
        ),
        api_tool(
            client,
            "learningsuite_get_popup",
            "Get a popup by ID",
            PopupParams,
            "get_popup",
        ),
        api_tool(
            client,
            "learningsuite_trigger_popup",
            "Trigger a popup for a member",
            PopupTriggerParams,
            "trigger_popup",
        ),
        api_tool(
            client,
            "learningsuite_remove_popup_trigger",
            "Remove a popup trigger for a member",
            PopupTriggerParams,
            "remove_popup_trigger",
        ),
    ]


def notification_tools(client: LearningSuiteClient) -> list[ToolDefinition]:
    return [
        api_tool(
            client,
            "learningsuite_send_push_notifications",
            "Send push notifications to users (requires custom app)",
            PushNotificationParams,
            "send_push_notifications",
        ),
    ]
