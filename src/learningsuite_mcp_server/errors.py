"""Custom error types for the LearningSuite MCP server."""

from __future__ import annotations


class LearningSuiteError(Exception):
    """Base error carrying a short machine-readable type next to the message."""

    error_type = "LearningSuiteError"

    def __init__(self, message: str, *, error_type: str | None = None) -> None:
        """Create an error with an optional explicit type override."""
        super().__init__(message)
        self.message = message
        if error_type is not None:
            self.error_type = error_type

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-friendly description of the error."""
        return {"type": self.error_type, "message": self.message}


class ConfigurationError(LearningSuiteError):
    """Raised when the process cannot be configured (missing API key)."""

    error_type = "ConfigurationError"


class UnknownToolError(LearningSuiteError):
    """Raised when a tool name has no registered binding."""

    error_type = "UnknownTool"

    def __init__(self, name: str) -> None:
        """Create the error for the unresolved tool ``name``."""
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class InvalidArgumentsError(LearningSuiteError):
    """Raised when tool arguments do not match the tool's argument model."""

    error_type = "InvalidArguments"

    def __init__(self, tool_name: str, details: str) -> None:
        """Create the error for ``tool_name`` with validation ``details``."""
        super().__init__(f"Invalid arguments for tool '{tool_name}': {details}")
        self.tool_name = tool_name
        self.details = details


class APIError(LearningSuiteError):
    """Non-success HTTP status returned by the LearningSuite API.

    The response body is kept verbatim; the remote error format is not parsed.
    """

    error_type = "APIError"

    def __init__(self, status_code: int, body: str) -> None:
        """Create the error from the HTTP status and raw response text."""
        super().__init__(f"API Error {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class MalformedResponseError(LearningSuiteError):
    """Successful response whose non-empty body is not valid JSON."""

    error_type = "MalformedResponse"


class TransportError(LearningSuiteError):
    """The HTTP request failed before any response was received."""

    error_type = "TransportError"
