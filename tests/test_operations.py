"""Tests for the operation catalog and request building."""

from __future__ import annotations

import pytest

from learningsuite_mcp_server.operations import (
    BODY_METHODS,
    CATALOG,
    Operation,
    get_operation,
)


def test_path_placeholders_are_substituted_in_order() -> None:
    """Every placeholder is filled from the argument map."""
    operation = get_operation("get_member_course_info")

    request = operation.build_request(
        {"memberId": "m1", "courseId": "c9", "dateForAccessCheck": "2024-01-01"}
    )

    assert operation.path_fields == ("memberId", "courseId")
    assert request.path == "/members/m1/course-info/c9"
    assert request.params == {"dateForAccessCheck": "2024-01-01"}
    assert request.body is None


def test_path_values_are_url_quoted() -> None:
    """Identifiers cannot escape their path segment."""
    request = get_operation("get_member").build_request({"memberId": "a/b c"})

    assert request.path == "/members/a%2Fb%20c"


def test_read_operation_drops_absent_query_values() -> None:
    """``None`` query values are omitted instead of sent as text."""
    request = get_operation("list_members").build_request(
        {"includeGroups": True, "limit": None}
    )

    assert request.params == {"includeGroups": True}


def test_body_operation_excludes_path_fields_from_body() -> None:
    """Path parameters are not duplicated into the JSON body."""
    request = get_operation("add_member_to_courses").build_request(
        {"memberId": "m1", "courseIds": ["c1"], "accessGivenAt": "2024-01-01"}
    )

    assert request.method == "PUT"
    assert request.path == "/members/m1/courses"
    assert request.body == {"courseIds": ["c1"], "accessGivenAt": "2024-01-01"}
    assert request.params == {}


def test_body_operation_sends_empty_object_when_only_path_is_given() -> None:
    request = get_operation("update_member").build_request({"memberId": "m1"})

    assert request.body == {}


def test_bodyless_mutation_has_no_body() -> None:
    """Popup triggers address everything through the path."""
    request = get_operation("trigger_popup").build_request(
        {"popupId": "p1", "memberId": "m1"}
    )

    assert request.method == "POST"
    assert request.path == "/popups/p1/trigger/m1"
    assert request.body is None


def test_get_operations_cannot_declare_a_body() -> None:
    with pytest.raises(ValueError):
        Operation("GET", "/members", body=True)


def test_catalog_is_read_only() -> None:
    with pytest.raises(TypeError):
        CATALOG["extra"] = Operation("GET", "/extra")  # type: ignore[index]


def test_catalog_bodies_only_on_mutating_methods() -> None:
    for operation_id, operation in CATALOG.items():
        if operation.method == "GET":
            assert not operation.body, operation_id
        else:
            assert operation.method in BODY_METHODS, operation_id


def test_unknown_operation_fails_loudly() -> None:
    with pytest.raises(KeyError, match="not_an_operation"):
        get_operation("not_an_operation")
