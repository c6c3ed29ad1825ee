"""Tools for hubs and the community area."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from learningsuite_mcp_server.client import LearningSuiteClient
from learningsuite_mcp_server.tooling import ToolDefinition, ToolParameters
from learningsuite_mcp_server.tools.common import NoParams, api_tool


class CreateHubParams(ToolParameters):
    """Parameters for learningsuite_create_hub."""

    name: str = Field(description="Hub name")
    hub_template_id: str = Field(description="Hub template ID")
    variables: dict[str, Any] | None = Field(
        default=None, description="Template variables"
    )


class HubTemplateParams(ToolParameters):
    hub_template_id: str = Field(description="Hub template ID")


class HubAccessParams(ToolParameters):
    """Hub plus the members, groups and bundles whose access changes."""

    hub_id: str = Field(description="Hub ID")
    member_ids: list[str] | None = Field(
        default=None, description="Array of member IDs"
    )
    group_ids: list[str] | None = Field(default=None, description="Array of group IDs")
    bundle_ids: list[str] | None = Field(
        default=None, description="Array of bundle IDs"
    )


class ForumsParams(ToolParameters):
    """Parameters for learningsuite_list_community_forums."""

    area_id: str | None = Field(default=None, description="Filter by area ID")
    limit: float | None = Field(default=None, description="Maximum to return")
    offset: float | None = Field(default=None, description="Offset for pagination")


class PostsParams(ToolParameters):
    """Parameters for learningsuite_list_community_posts."""

    forum_id: str | None = Field(default=None, description="Filter by forum ID")
    limit: float | None = Field(default=None, description="Maximum to return")
    offset: float | None = Field(default=None, description="Offset for pagination")


class CommentParams(ToolParameters):
    """Parameters for learningsuite_comment_on_post."""

    post_id: str = Field(description="Post ID")
    content: str = Field(description="Comment content")
    parent_comment_id: str | None = Field(
        default=None, description="Parent comment ID for replies"
    )


class UserBadgesParams(ToolParameters):
    user_id: str = Field(description="User ID")
    badge_ids: list[str] = Field(description="Array of badge IDs")


def hub_tools(client: LearningSuiteClient) -> list[ToolDefinition]:
    """Hub creation, templates and access grants."""
    return [
        api_tool(
            client,
            "learningsuite_list_hubs",
            "Get all published hubs",
            NoParams,
            "list_hubs",
        ),
        api_tool(
            client,
            "learningsuite_create_hub",
            "Create a new hub from a template",
            CreateHubParams,
            "create_hub",
        ),
        api_tool(
            client,
            "learningsuite_list_hub_templates",
            "Get all hub templates",
            NoParams,
            "list_hub_templates",
        ),
        api_tool(
            client,
            "learningsuite_get_hub_template_variables",
            "Get variables for a hub template",
            HubTemplateParams,
            "get_hub_template_variables",
        ),
        api_tool(
            client,
            "learningsuite_add_hub_accesses",
            "Add access to a hub for members, groups, or bundles",
            HubAccessParams,
            "add_hub_accesses",
        ),
        api_tool(
            client,
            "learningsuite_remove_hub_accesses",
            "Remove access from a hub for members, groups, or bundles",
            HubAccessParams,
            "remove_hub_accesses",
        ),
    ]


def community_tools(client: LearningSuiteClient) -> list[ToolDefinition]:
    """Community areas, forums, posts and badges."""
    return [
        api_tool(
            client,
            "learningsuite_list_community_areas",
            "Get all community areas",
            NoParams,
            "list_community_areas",
        ),
        api_tool(
            client,
            "learningsuite_list_community_forums",
            "Get community forums",
            ForumsParams,
            "list_community_forums",
        ),
        api_tool(
            client,
            "learningsuite_list_community_posts",
            "Get community posts",
            PostsParams,
            "list_community_posts",
        ),
        api_tool(
            client,
            "learningsuite_comment_on_post",
            "Comment on a community post",
            CommentParams,
            "comment_on_post",
        ),
        api_tool(
            client,
            "learningsuite_list_community_badges",
            "Get all community badges",
            NoParams,
            "list_community_badges",
        ),
        api_tool(
            client,
            "learningsuite_assign_badges_to_user",
            "Assign badges to a user",
            UserBadgesParams,
            "assign_badges_to_user",
        ),
        api_tool(
            client,
            "learningsuite_remove_badges_from_user",
            "Remove badges from a user",
            UserBadgesParams,
            "remove_badges_from_user",
        ),
    ]
