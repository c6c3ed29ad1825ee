"""End-to-end coverage for the FastMCP server wrapper."""

from __future__ import annotations

import json

import httpx
import pytest
from fastmcp.client import Client

from learningsuite_mcp_server.client import LearningSuiteClient
from learningsuite_mcp_server.fastmcp_adapter import build_fastmcp_app

from .conftest import API_KEY, RecordingApi


def _app(api: RecordingApi):
    client = LearningSuiteClient(API_KEY, transport=httpx.MockTransport(api.handler))
    return build_fastmcp_app(client)


@pytest.mark.anyio()
async def test_fastmcp_server_supports_tool_discovery(api: RecordingApi) -> None:
    """The FastMCP server lists the full catalog with its input schemas."""
    app, server = _app(api)

    async with Client(app) as client:
        tools = await client.list_tools()

    assert {tool.name for tool in tools} == set(server.available_tools())
    get_member = next(tool for tool in tools if tool.name == "learningsuite_get_member")
    assert get_member.inputSchema["required"] == ["memberId"]
    assert get_member.description == "Get a member by ID"


@pytest.mark.anyio()
async def test_fastmcp_call_returns_json_text(api: RecordingApi) -> None:
    api.respond(200, {"id": "abc123", "email": "a@b.com"})
    app, _ = _app(api)

    async with Client(app) as client:
        result = await client.call_tool(
            "learningsuite_get_member", {"memberId": "abc123", "includeGroups": True}
        )

    assert result.is_error is False
    assert json.loads(result.content[0].text) == {"id": "abc123", "email": "a@b.com"}
    assert str(api.last.url).endswith("/members/abc123?includeGroups=true")


@pytest.mark.anyio()
async def test_fastmcp_propagates_api_errors(api: RecordingApi) -> None:
    """Remote failures surface as error results, not protocol faults."""
    api.respond(404, "not found")
    app, _ = _app(api)

    async with Client(app) as client:
        result = await client.call_tool(
            "learningsuite_get_popup", {"popupId": "missing"}, raise_on_error=False
        )

    assert result.is_error is True
    assert "API Error 404: not found" in result.content[0].text


@pytest.mark.anyio()
async def test_fastmcp_reports_invalid_arguments(api: RecordingApi) -> None:
    app, _ = _app(api)

    async with Client(app) as client:
        result = await client.call_tool(
            "learningsuite_create_group", {}, raise_on_error=False
        )

    assert result.is_error is True
    assert "name" in result.content[0].text
    assert api.requests == []
