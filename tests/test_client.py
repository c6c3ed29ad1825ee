"""Tests for the LearningSuite HTTP client."""

from __future__ import annotations

import httpx
import pytest

from learningsuite_mcp_server.client import LearningSuiteClient, format_query_value
from learningsuite_mcp_server.errors import (
    APIError,
    MalformedResponseError,
    TransportError,
)
from learningsuite_mcp_server.operations import get_operation

from .conftest import API_KEY, RecordingApi


@pytest.mark.anyio()
async def test_sends_api_key_and_json_headers(
    client: LearningSuiteClient, api: RecordingApi
) -> None:
    """Every request carries the fixed API key header."""
    api.respond(200, {"name": "Acme"})

    payload = await client.request("GET", "/auth")

    assert payload == {"name": "Acme"}
    assert api.last.headers["X-API-Key"] == API_KEY
    assert api.last.headers["Content-Type"] == "application/json"
    assert str(api.last.url) == "https://api.learningsuite.io/api/v1/auth"


@pytest.mark.anyio()
async def test_absent_query_values_are_not_sent(
    client: LearningSuiteClient, api: RecordingApi
) -> None:
    """Optional filters left as ``None`` never reach the query string."""
    api.respond(200, [])

    await client.request(
        "GET", "/members", params={"includeGroups": True, "limit": None, "offset": 5}
    )

    assert dict(api.last.url.params) == {"includeGroups": "true", "offset": "5"}
    assert "limit" not in str(api.last.url)


@pytest.mark.anyio()
async def test_get_requests_never_carry_a_body(
    client: LearningSuiteClient, api: RecordingApi
) -> None:
    api.respond(200, [])

    await client.request("GET", "/members", body={"unexpected": True})

    assert api.last.content == b""


@pytest.mark.anyio()
async def test_delete_with_body_sends_json(
    client: LearningSuiteClient, api: RecordingApi
) -> None:
    api.respond(200, {"removed": 2})

    payload = await client.request(
        "DELETE", "/members/m1/courses", body={"courseIds": ["c1", "c2"]}
    )

    assert payload == {"removed": 2}
    assert api.last.method == "DELETE"
    assert api.last_json() == {"courseIds": ["c1", "c2"]}


@pytest.mark.anyio()
async def test_non_success_status_surfaces_body_verbatim(
    client: LearningSuiteClient, api: RecordingApi
) -> None:
    api.respond(404, "not found")

    with pytest.raises(APIError) as error_info:
        await client.request("GET", "/members/missing")

    assert str(error_info.value) == "API Error 404: not found"
    assert error_info.value.status_code == 404
    assert error_info.value.body == "not found"


@pytest.mark.anyio()
async def test_empty_success_body_is_empty_object(
    client: LearningSuiteClient, api: RecordingApi
) -> None:
    api.respond(204, b"")

    assert await client.request("DELETE", "/members/m1") == {}


@pytest.mark.anyio()
async def test_invalid_json_is_reported(
    client: LearningSuiteClient, api: RecordingApi
) -> None:
    api.respond(200, "<html>oops</html>")

    with pytest.raises(MalformedResponseError):
        await client.request("GET", "/members")


@pytest.mark.anyio()
async def test_transport_failures_are_wrapped() -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = LearningSuiteClient(API_KEY, transport=httpx.MockTransport(refuse))

    with pytest.raises(TransportError, match="connection refused"):
        await client.request("GET", "/auth")


@pytest.mark.anyio()
async def test_execute_builds_request_from_operation(
    client: LearningSuiteClient, api: RecordingApi
) -> None:
    """Catalog operations route path, query and body arguments."""
    api.respond(200, {"lessonId": "l1"})

    await client.execute(
        get_operation("create_lesson"),
        {"courseId": "c1", "sectionId": "s1", "name": "Intro"},
    )

    assert api.last.method == "POST"
    assert api.last.url.path == "/api/v1/courses/c1/create-lesson/s1"
    assert api.last_json() == {"name": "Intro"}


@pytest.mark.anyio()
async def test_custom_base_url_is_used(api: RecordingApi) -> None:
    client = LearningSuiteClient(
        "k",
        base_url="https://staging.example.com/api/v1/",
        transport=httpx.MockTransport(api.handler),
    )

    await client.request("GET", "/hubs")

    assert str(api.last.url) == "https://staging.example.com/api/v1/hubs"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (True, "true"),
        (False, "false"),
        (10, "10"),
        (10.0, "10"),
        (2.5, "2.5"),
        ("x", "x"),
    ],
)
def test_format_query_value(value: object, expected: str) -> None:
    assert format_query_value(value) == expected
