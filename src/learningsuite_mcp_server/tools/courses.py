"""Tools for courses, modules, sections, lessons and bundles."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from learningsuite_mcp_server.client import LearningSuiteClient
from learningsuite_mcp_server.tooling import ToolDefinition, ToolParameters
from learningsuite_mcp_server.tools.common import NoParams, api_tool


class CourseParams(ToolParameters):
    """Parameters that only identify a course."""

    course_id: str = Field(description="Course ID")


class CourseMemberParams(CourseParams):
    member_id: str = Field(description="Member ID")


class CoursePageParams(CourseParams):
    """Course identifier plus a pagination window."""

    limit: float | None = Field(default=None, description="Maximum to return")
    offset: float | None = Field(default=None, description="Offset for pagination")


class CourseMembersParams(CoursePageParams):
    """Parameters for learningsuite_get_course_members."""

    limit: float | None = Field(default=None, description="Maximum to return (max 100)")
    include_progress: bool | None = Field(
        default=None, description="Include progress info"
    )


class CreateLessonParams(CourseParams):
    """Parameters for learningsuite_create_lesson.

    ``courseId`` and ``sectionId`` address the section; everything else is the
    lesson payload.
    """

    section_id: str = Field(description="Section ID")
    name: str = Field(description="Lesson name")
    html_content: str | None = Field(
        default=None, description="HTML content for the lesson"
    )
    video_url: str | None = Field(default=None, description="Downloadable video URL")
    thumbnail_url: str | None = Field(
        default=None, description="Downloadable thumbnail image URL"
    )
    timestamp_in_seconds_to_generate_thumbnail: float | None = Field(
        default=None, description="Video timestamp for thumbnail generation"
    )
    immediately_publish_course: bool | None = Field(
        default=None, description="Publish course immediately after creating lesson"
    )
    lesson_sort_position: Literal["first", "last"] | None = Field(
        default=None, description="Position of the lesson in the section"
    )


class ModuleParams(ToolParameters):
    """Parameters that only identify a module."""

    module_id: str = Field(description="Module ID")


class UnlockOverrideParams(ToolParameters):
    """Parameters for learningsuite_create_module_unlock_override."""

    member_id: str = Field(description="Member ID")
    module_id: str = Field(description="Module ID")
    unlock_at: str | None = Field(
        default=None, description="When to unlock the module (ISO format)"
    )


class BundleMembersParams(ToolParameters):
    """Parameters for learningsuite_get_bundle_members."""

    bundle_id: str = Field(description="Bundle ID")
    limit: float | None = Field(default=None, description="Maximum to return (max 200)")
    offset: float | None = Field(default=None, description="Offset for pagination")


def course_tools(client: LearningSuiteClient) -> list[ToolDefinition]:
    """Course reads and lesson creation."""
    return [
        api_tool(
            client,
            "learningsuite_list_published_courses",
            "Get all published courses",
            NoParams,
            "list_published_courses",
        ),
        api_tool(
            client,
            "learningsuite_get_course_modules",
            "Get all modules of a course",
            CourseParams,
            "get_course_modules",
        ),
        api_tool(
            client,
            "learningsuite_get_course_modules_for_member",
            "Get all modules of a course with visibility info for a member",
            CourseMemberParams,
            "get_course_modules_for_member",
        ),
        api_tool(
            client,
            "learningsuite_get_course_members",
            "Get members for a course with access and optional progress info",
            CourseMembersParams,
            "get_course_members",
        ),
        api_tool(
            client,
            "learningsuite_get_course_access_requests",
            "Get access requests for a course",
            CoursePageParams,
            "get_course_access_requests",
        ),
        api_tool(
            client,
            "learningsuite_get_course_submissions",
            "Get all submissions in a course (newest first)",
            CoursePageParams,
            "get_course_submissions",
        ),
        api_tool(
            client,
            "learningsuite_create_lesson",
            "Create a lesson in a course section",
            CreateLessonParams,
            "create_lesson",
        ),
    ]


def module_tools(client: LearningSuiteClient) -> list[ToolDefinition]:
    """Module section and lesson reads plus unlock overrides."""
    return [
        api_tool(
            client,
            "learningsuite_get_module_sections",
            "Get all sections of a module",
            ModuleParams,
            "get_module_sections",
        ),
        api_tool(
            client,
            "learningsuite_get_module_lessons",
            "Get all lessons of a module",
            ModuleParams,
            "get_module_lessons",
        ),
        api_tool(
            client,
            "learningsuite_create_module_unlock_override",
            "Create a module unlock override for a member",
            UnlockOverrideParams,
            "create_module_unlock_override",
        ),
    ]


def bundle_tools(client: LearningSuiteClient) -> list[ToolDefinition]:
    return [
        api_tool(
            client,
            "learningsuite_list_bundles",
            "Get all bundles",
            NoParams,
            "list_bundles",
        ),
        api_tool(
            client,
            "learningsuite_get_bundle_members",
            "Get members of a bundle with access info",
            BundleMembersParams,
            "get_bundle_members",
        ),
    ]
