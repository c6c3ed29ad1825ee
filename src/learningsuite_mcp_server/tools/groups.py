"""Tools for groups and their course, bundle and member associations."""

from __future__ import annotations

from pydantic import Field

from learningsuite_mcp_server.client import LearningSuiteClient
from learningsuite_mcp_server.tooling import ToolDefinition, ToolParameters
from learningsuite_mcp_server.tools.common import PaginationParams, api_tool


class CreateGroupParams(ToolParameters):
    """Parameters for learningsuite_create_group."""

    name: str = Field(description="Group name")
    description: str | None = Field(default=None, description="Group description")


class FindGroupsParams(ToolParameters):
    """Parameters for learningsuite_find_groups_by_name."""

    name: str = Field(description="Group name to search for")


class GroupParams(ToolParameters):
    """Parameters that only identify a group."""

    group_id: str = Field(description="Group ID")


class GroupCoursesParams(GroupParams):
    course_ids: list[str] = Field(description="Array of course IDs")


class GroupBundlesParams(GroupParams):
    bundle_ids: list[str] = Field(description="Array of bundle IDs")


class MembersToGroupsParams(ToolParameters):
    """Batch of members applied to a batch of groups."""

    member_ids: list[str] = Field(description="Array of member IDs")
    group_ids: list[str] = Field(description="Array of group IDs")


def group_tools(client: LearningSuiteClient) -> list[ToolDefinition]:
    """Group CRUD and association tools."""
    return [
        api_tool(
            client,
            "learningsuite_list_groups",
            "Get all groups",
            PaginationParams,
            "list_groups",
        ),
        api_tool(
            client,
            "learningsuite_create_group",
            "Create a new group",
            CreateGroupParams,
            "create_group",
        ),
        api_tool(
            client,
            "learningsuite_find_groups_by_name",
            "Find groups by name",
            FindGroupsParams,
            "find_groups_by_name",
        ),
        api_tool(
            client,
            "learningsuite_delete_group",
            "Delete a group",
            GroupParams,
            "delete_group",
        ),
        api_tool(
            client,
            "learningsuite_get_group_courses",
            "Get all courses of a group",
            GroupParams,
            "get_group_courses",
        ),
        api_tool(
            client,
            "learningsuite_add_courses_to_group",
            "Add courses to a group",
            GroupCoursesParams,
            "add_courses_to_group",
        ),
        api_tool(
            client,
            "learningsuite_remove_courses_from_group",
            "Remove courses from a group",
            GroupCoursesParams,
            "remove_courses_from_group",
        ),
        api_tool(
            client,
            "learningsuite_add_bundles_to_group",
            "Add bundles to a group",
            GroupBundlesParams,
            "add_bundles_to_group",
        ),
        api_tool(
            client,
            "learningsuite_add_members_to_groups",
            "Add multiple members to multiple groups (batch operation)",
            MembersToGroupsParams,
            "add_members_to_groups",
        ),
        api_tool(
            client,
            "learningsuite_add_members_to_groups_summary",
            "Add multiple members to multiple groups and return a summary "
            "of the changes (batch operation)",
            MembersToGroupsParams,
            "add_members_to_groups_summary",
        ),
        api_tool(
            client,
            "learningsuite_remove_members_from_groups",
            "Remove multiple members from multiple groups (batch operation)",
            MembersToGroupsParams,
            "remove_members_from_groups",
        ),
    ]
