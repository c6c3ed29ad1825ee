"""Shared test fixtures."""

from __future__ import annotations

import json

import httpx
import pytest

from learningsuite_mcp_server.client import LearningSuiteClient
from learningsuite_mcp_server.server import MCPServer, build_server

API_KEY = "test-api-key"
BASE_URL = "https://api.learningsuite.io/api/v1"


class RecordingApi:
    """Canned LearningSuite API that records every request it receives."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.content = b"{}"

    def respond(self, status_code: int, content: str | bytes | object = b"") -> None:
        """Configure the next responses; non-bytes/str content is JSON-encoded."""
        self.status_code = status_code
        if isinstance(content, str):
            content = content.encode("utf-8")
        elif not isinstance(content, bytes):
            content = json.dumps(content).encode("utf-8")
        self.content = content

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.content)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> object:
        return json.loads(self.last.content)


@pytest.fixture()
def anyio_backend() -> str:
    """Run async tests on asyncio only; FastMCP's client requires it."""
    return "asyncio"


@pytest.fixture()
def api() -> RecordingApi:
    """Provide a recording stand-in for the remote API."""
    return RecordingApi()


@pytest.fixture()
def client(api: RecordingApi) -> LearningSuiteClient:
    """Client wired to the recording API through an httpx mock transport."""
    return LearningSuiteClient(API_KEY, transport=httpx.MockTransport(api.handler))


@pytest.fixture()
def server(client: LearningSuiteClient) -> MCPServer:
    """Dispatcher with the full tool catalog."""
    return build_server(client)
