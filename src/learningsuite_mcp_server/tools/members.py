"""Tools for members and their course and bundle memberships."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from learningsuite_mcp_server.client import LearningSuiteClient
from learningsuite_mcp_server.tooling import ToolDefinition, ToolParameters
from learningsuite_mcp_server.tools.common import PaginationParams, api_tool

Locale = Literal["de", "en"]

INCLUDE_GROUPS = "Include groups the member is part of"


class MemberParams(ToolParameters):
    """Parameters that only identify a member."""

    member_id: str = Field(description="Member ID")


class ListMembersParams(ToolParameters):
    """Parameters for learningsuite_list_members."""

    include_groups: bool | None = Field(default=None, description=INCLUDE_GROUPS)
    days_not_logged_in_gte: float | None = Field(
        default=None,
        alias="days_not_logged_in_gte",
        description="Minimum days since last login",
    )
    include_never_logged_in: bool | None = Field(
        default=None,
        alias="include_never_logged_in",
        description="Include users who never logged in",
    )
    limit: float | None = Field(
        default=None,
        description="Maximum number of members to return (default: 1000)",
    )
    offset: float | None = Field(
        default=None, description="Number of members to skip for pagination"
    )


class CreateMemberParams(ToolParameters):
    """Parameters for learningsuite_create_member."""

    email: str = Field(description="Member email address")
    first_name: str = Field(description="First name")
    last_name: str = Field(description="Last name")
    phone: str | None = Field(default=None, description="Phone number")
    about: str | None = Field(default=None, description="About text")
    position: str | None = Field(default=None, description="Position/title")
    city: str | None = Field(default=None, description="City")
    password: str | None = Field(default=None, description="Initial password")
    disable_login_email: bool | None = Field(
        default=None, description="Do not send welcome email"
    )
    do_not_require_password_change: bool | None = Field(
        default=None, description="Do not require password change on first login"
    )
    locale: Locale | None = Field(default=None, description="Language setting")
    ignore_if_already_exists: bool | None = Field(
        default=None, description="Return existing member if email exists"
    )


class GetMemberParams(MemberParams):
    """Parameters for learningsuite_get_member."""

    include_groups: bool | None = Field(default=None, description=INCLUDE_GROUPS)


class GetMemberByEmailParams(ToolParameters):
    """Parameters for learningsuite_get_member_by_email."""

    email: str = Field(description="Member email address")
    include_groups: bool | None = Field(default=None, description=INCLUDE_GROUPS)


class UpdateMemberParams(MemberParams):
    """Parameters for learningsuite_update_member."""

    enabled: bool | None = Field(default=None, description="Enable/disable member")
    first_name: str | None = Field(default=None, description="First name")
    last_name: str | None = Field(default=None, description="Last name")
    phone: str | None = Field(default=None, description="Phone number")
    about: str | None = Field(default=None, description="About text")
    position: str | None = Field(default=None, description="Position/title")
    city: str | None = Field(default=None, description="City")
    email: str | None = Field(default=None, description="New email address")
    locale: Locale | None = Field(default=None, description="Language setting")


class MemberCoursesParams(MemberParams):
    """Parameters for learningsuite_get_member_courses."""

    date_for_access_check: str | None = Field(
        default=None, description="Date for access check (ISO format)"
    )
    limit: float | None = Field(default=None, description="Maximum courses to return")
    offset: float | None = Field(default=None, description="Offset for pagination")


class AddMemberToCoursesParams(MemberParams):
    """Parameters for learningsuite_add_member_to_courses."""

    course_ids: list[str] = Field(description="Array of course IDs")
    access_given_at: str | None = Field(
        default=None, description="When access was given (ISO format)"
    )
    disable_access_notification_email: bool | None = Field(
        default=None, description="Do not send access notification email"
    )
    send_login_link_in_course_email: bool | None = Field(
        default=None, description="Include login link in course email"
    )


class RemoveMemberFromCoursesParams(MemberParams):
    """Parameters for learningsuite_remove_member_from_courses."""

    course_ids: list[str] = Field(description="Array of course IDs")


class MemberCourseInfoParams(MemberParams):
    """Parameters for learningsuite_get_member_course_info."""

    course_id: str = Field(description="Course ID")
    date_for_access_check: str | None = Field(
        default=None, description="Date for access check (ISO format)"
    )


class AddMemberToBundlesParams(MemberParams):
    """Parameters for learningsuite_add_member_to_bundles."""

    bundles: list[str] = Field(description="Array of bundle IDs")
    access_given_at_override: str | None = Field(
        default=None, description="Override access start date (ISO format)"
    )
    access_until_override: str | None = Field(
        default=None, description="Override access end date (ISO format)"
    )
    unlimited_access: bool | None = Field(
        default=None, description="Grant unlimited access"
    )
    disable_access_notification_email: bool | None = Field(
        default=None, description="Do not send access notification email"
    )


class RemoveMemberFromBundlesParams(MemberParams):
    """Parameters for learningsuite_remove_member_from_bundles."""

    bundle_ids: list[str] = Field(description="Array of bundle IDs")


class ListTeamMembersParams(PaginationParams):
    """Parameters for learningsuite_list_team_members."""

    limit: float | None = Field(default=None, description="Maximum to return (max 100)")


class TeamMemberParams(ToolParameters):
    """Parameters for learningsuite_get_team_member."""

    user_id: str = Field(description="User ID")


class TeamMemberByEmailParams(ToolParameters):
    """Parameters for learningsuite_get_team_member_by_email."""

    email: str = Field(description="Email address")


def member_tools(client: LearningSuiteClient) -> list[ToolDefinition]:
    """Member CRUD plus course and bundle membership tools."""
    return [
        api_tool(
            client,
            "learningsuite_list_members",
            "Get all members with optional filtering and pagination",
            ListMembersParams,
            "list_members",
        ),
        api_tool(
            client,
            "learningsuite_create_member",
            "Create a new member in LearningSuite",
            CreateMemberParams,
            "create_member",
        ),
        api_tool(
            client,
            "learningsuite_get_member",
            "Get a member by ID",
            GetMemberParams,
            "get_member",
        ),
        api_tool(
            client,
            "learningsuite_get_member_by_email",
            "Get a member by email address",
            GetMemberByEmailParams,
            "get_member_by_email",
        ),
        api_tool(
            client,
            "learningsuite_update_member",
            "Update a member's information",
            UpdateMemberParams,
            "update_member",
        ),
        api_tool(
            client,
            "learningsuite_delete_member",
            "Delete a member",
            MemberParams,
            "delete_member",
        ),
        api_tool(
            client,
            "learningsuite_get_member_courses",
            "Get all courses for a member with access and progress info",
            MemberCoursesParams,
            "get_member_courses",
        ),
        api_tool(
            client,
            "learningsuite_add_member_to_courses",
            "Add a member to one or more courses",
            AddMemberToCoursesParams,
            "add_member_to_courses",
        ),
        api_tool(
            client,
            "learningsuite_remove_member_from_courses",
            "Remove a member from one or more courses",
            RemoveMemberFromCoursesParams,
            "remove_member_from_courses",
        ),
        api_tool(
            client,
            "learningsuite_get_member_course_info",
            "Get access and progress info for a member in a specific course",
            MemberCourseInfoParams,
            "get_member_course_info",
        ),
        api_tool(
            client,
            "learningsuite_get_member_bundles",
            "Get all bundles of a member with access information",
            MemberParams,
            "get_member_bundles",
        ),
        api_tool(
            client,
            "learningsuite_add_member_to_bundles",
            "Add a member to one or more bundles",
            AddMemberToBundlesParams,
            "add_member_to_bundles",
        ),
        api_tool(
            client,
            "learningsuite_remove_member_from_bundles",
            "Remove a member from one or more bundles",
            RemoveMemberFromBundlesParams,
            "remove_member_from_bundles",
        ),
    ]


def team_member_tools(client: LearningSuiteClient) -> list[ToolDefinition]:
    """Read-only tools for users with admin zone access."""
    return [
        api_tool(
            client,
            "learningsuite_list_team_members",
            "Get team members (users with admin zone access)",
            ListTeamMembersParams,
            "list_team_members",
        ),
        api_tool(
            client,
            "learningsuite_get_team_member",
            "Get a team member by ID",
            TeamMemberParams,
            "get_team_member",
        ),
        api_tool(
            client,
            "learningsuite_get_team_member_by_email",
            "Get a team member by email",
            TeamMemberByEmailParams,
            "get_team_member_by_email",
        ),
    ]
