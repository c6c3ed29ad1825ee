"""Async HTTP client for the LearningSuite REST API."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from learningsuite_mcp_server.config import DEFAULT_BASE_URL
from learningsuite_mcp_server.errors import (
    APIError,
    MalformedResponseError,
    TransportError,
)
from learningsuite_mcp_server.operations import BODY_METHODS, Operation

logger = logging.getLogger(__name__)


def format_query_value(value: object) -> str:
    """Render a single query parameter value as text.

    Booleans become ``true``/``false`` and integral floats lose their decimal
    part, matching how the API documents its query parameters.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class LearningSuiteClient:
    """Authenticated client issuing one HTTP round trip per call.

    The API key is fixed at construction. No connection is kept between calls;
    each request opens and closes its own :class:`httpx.AsyncClient`.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Create a client for ``base_url`` authenticating with ``api_key``.

        Args:
            api_key: Value of the ``X-API-Key`` header.
            base_url: Versioned API root every path is appended to.
            transport: Optional transport override, used by tests.
        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-API-Key": self._api_key,
        }

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON payload.

        Args:
            method: HTTP method.
            path: Path below the API root with parameters already substituted.
            body: JSON body, only sent for POST, PUT and DELETE.
            params: Query parameters; ``None`` values are omitted.

        Raises:
            APIError: If the API answers with a non-2xx status.
            MalformedResponseError: If a non-empty success body is not JSON.
            TransportError: If no response could be obtained.

        Returns:
            Parsed JSON, or an empty dict when the response body is empty.
        """
        method = method.upper()
        query = {
            key: format_query_value(value)
            for key, value in (params or {}).items()
            if value is not None
        }
        content: bytes | None = None
        if body is not None and method in BODY_METHODS:
            content = json.dumps(body).encode("utf-8")

        logger.debug("%s %s%s", method, self._base_url, path)
        try:
            async with httpx.AsyncClient(transport=self._transport) as http:
                response = await http.request(
                    method,
                    f"{self._base_url}{path}",
                    params=query or None,
                    headers=self._headers(),
                    content=content,
                )
        except httpx.HTTPError as exc:
            raise TransportError(f"Request to {path} failed: {exc}") from exc

        if not response.is_success:
            raise APIError(response.status_code, response.text)

        text = response.text
        if not text:
            return {}
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise MalformedResponseError(
                f"Invalid JSON in response from {path}: {exc}"
            ) from exc

    async def execute(self, operation: Operation, arguments: Mapping[str, Any]) -> Any:
        """Perform a catalog operation with wire-named ``arguments``."""
        api_request = operation.build_request(arguments)
        return await self.request(
            api_request.method,
            api_request.path,
            body=api_request.body,
            params=api_request.params,
        )
