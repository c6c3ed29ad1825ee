"""Catalog of LearningSuite REST operations.

Every remote endpoint is described by an :class:`Operation`: the HTTP method, a
path template with named ``{placeholders}`` and whether the remaining arguments
travel in the JSON body or in the query string. Tools refer to operations by
their catalog identifier so the mapping from tool to endpoint lives in one
table.
"""

from __future__ import annotations

import string
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any
from urllib.parse import quote

BODY_METHODS = frozenset({"POST", "PUT", "DELETE"})


@dataclass(frozen=True)
class ApiRequest:
    """A fully resolved request ready for the transport client."""

    method: str
    path: str
    params: dict[str, Any] = field(default_factory=dict)
    body: dict[str, Any] | None = None


@dataclass(frozen=True)
class Operation:
    """HTTP method, path template and argument placement of one endpoint.

    Attributes:
        method: Upper-case HTTP method.
        path: Path below the API root, e.g. ``/members/{memberId}``.
        body: When true, every argument that is not a path placeholder is sent
            as the JSON body. Otherwise those arguments become query
            parameters.
    """

    method: str
    path: str
    body: bool = False

    def __post_init__(self) -> None:
        if self.body and self.method not in BODY_METHODS:
            raise ValueError(f"{self.method} operations cannot carry a body")

    @property
    def path_fields(self) -> tuple[str, ...]:
        """Names of the placeholders in :attr:`path`, in order."""
        return tuple(
            name for _, name, _, _ in string.Formatter().parse(self.path) if name
        )

    def build_request(self, arguments: Mapping[str, Any]) -> ApiRequest:
        """Split wire-named arguments into path, query and body parts.

        Args:
            arguments: Argument map keyed by the remote API's field names.

        Returns:
            The request with placeholders substituted. Query parameters whose
            value is ``None`` are omitted.
        """
        path_fields = self.path_fields
        path = self.path.format(
            **{name: quote(str(arguments.get(name)), safe="") for name in path_fields}
        )
        remaining = {
            key: value for key, value in arguments.items() if key not in path_fields
        }
        if self.body:
            return ApiRequest(method=self.method, path=path, body=remaining)
        params = {key: value for key, value in remaining.items() if value is not None}
        return ApiRequest(method=self.method, path=path, params=params)


def get(path: str) -> Operation:
    """Read operation; non-path arguments become query parameters."""
    return Operation("GET", path)


def post(path: str, *, body: bool = True) -> Operation:
    """Create operation."""
    return Operation("POST", path, body=body)


def put(path: str) -> Operation:
    """Update or batch-add operation."""
    return Operation("PUT", path, body=True)


def delete(path: str, *, body: bool = False) -> Operation:
    """Remove operation; batch removals send the ID lists as a body."""
    return Operation("DELETE", path, body=body)


CATALOG: Mapping[str, Operation] = MappingProxyType(
    {
        # Auth
        "check_auth": get("/auth"),
        # Members
        "list_members": get("/members"),
        "create_member": post("/members"),
        "get_member_by_email": get("/members/by-email"),
        "get_member": get("/members/{memberId}"),
        "update_member": put("/members/{memberId}"),
        "delete_member": delete("/members/{memberId}"),
        "get_member_courses": get("/members/{memberId}/courses"),
        "add_member_to_courses": put("/members/{memberId}/courses"),
        "remove_member_from_courses": delete(
            "/members/{memberId}/courses", body=True
        ),
        "get_member_course_info": get("/members/{memberId}/course-info/{courseId}"),
        "get_member_bundles": get("/members/{memberId}/bundles"),
        "add_member_to_bundles": put("/members/{memberId}/bundles"),
        "remove_member_from_bundles": delete(
            "/members/{memberId}/bundles", body=True
        ),
        # Team members
        "list_team_members": get("/team-members"),
        "get_team_member_by_email": get("/team-members/by-email"),
        "get_team_member": get("/team-members/{userId}"),
        # Groups
        "list_groups": get("/groups"),
        "create_group": post("/groups"),
        "find_groups_by_name": get("/groups/find-by-name"),
        "delete_group": delete("/group/{groupId}"),
        "get_group_courses": get("/group/{groupId}/courses"),
        "add_courses_to_group": put("/group/{groupId}/courses"),
        "remove_courses_from_group": delete("/group/{groupId}/courses", body=True),
        "add_bundles_to_group": put("/group/{groupId}/bundles"),
        "add_members_to_groups": put("/add-members-to-groups"),
        "add_members_to_groups_summary": put("/add-members-to-groups-summary"),
        "remove_members_from_groups": delete(
            "/remove-members-from-groups", body=True
        ),
        # Courses
        "list_published_courses": get("/courses/published"),
        "get_course_modules": get("/courses/{courseId}/modules"),
        "get_course_modules_for_member": get("/courses/{courseId}/modules/{memberId}"),
        "get_course_members": get("/courses/{courseId}/members"),
        "get_course_access_requests": get("/courses/{courseId}/access-requests"),
        "get_course_submissions": get("/courses/{courseId}/submissions"),
        "create_lesson": post("/courses/{courseId}/create-lesson/{sectionId}"),
        # Modules & lessons
        "get_module_sections": get("/modules/{moduleId}/sections"),
        "get_module_lessons": get("/modules/{moduleId}/lessons"),
        "create_module_unlock_override": post("/create-module-unlock-override"),
        # Bundles
        "list_bundles": get("/bundles"),
        "get_bundle_members": get("/bundle/{bundleId}/members"),
        # Hubs
        "list_hubs": get("/hubs"),
        "create_hub": post("/hub"),
        "list_hub_templates": get("/hub-templates"),
        "get_hub_template_variables": get("/hub-template/{hubTemplateId}/variables"),
        "add_hub_accesses": put("/hub/{hubId}/access"),
        "remove_hub_accesses": delete("/hub/{hubId}/access", body=True),
        # Community
        "list_community_areas": get("/community/areas"),
        "list_community_forums": get("/community/forums"),
        "list_community_posts": get("/community/posts"),
        "comment_on_post": post("/community/posts/{postId}/comments"),
        "list_community_badges": get("/community/badges"),
        "assign_badges_to_user": put("/community/badges/user"),
        "remove_badges_from_user": delete("/community/badges/user", body=True),
        # Popups
        "list_popups": get("/popups"),
        "get_popup": get("/popups/{popupId}"),
        "trigger_popup": post("/popups/{popupId}/trigger/{memberId}", body=False),
        "remove_popup_trigger": delete("/popups/{popupId}/trigger/{memberId}"),
        # Push notifications & roles
        "send_push_notifications": post("/user/push-notifications/send"),
        "list_roles": get("/user/roles"),
        # Webhooks
        "list_webhook_subscriptions": get("/webhooks/subscription"),
        "create_webhook_subscription": post("/webhooks/subscription"),
        "get_webhook_subscription": get("/webhooks/subscription/{subscriptionId}"),
        "update_webhook_subscription": put("/webhooks/subscription/{subscriptionId}"),
        "delete_webhook_subscription": delete(
            "/webhooks/subscription/{subscriptionId}"
        ),
        "get_webhook_sample_data": get("/webhooks/sample-data/{eventType}"),
    }
)


def get_operation(operation_id: str) -> Operation:
    """Look up a catalog entry, failing loudly for unknown identifiers."""
    try:
        return CATALOG[operation_id]
    except KeyError:
        raise KeyError(f"Operation '{operation_id}' is not in the catalog") from None
