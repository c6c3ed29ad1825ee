"""Tool definitions for the LearningSuite MCP server."""

from __future__ import annotations

from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Any, Callable, Dict

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from learningsuite_mcp_server.errors import InvalidArgumentsError

ToolHandler = Callable[[Dict[str, Any]], Awaitable[Any]]


class ToolParameters(BaseModel):
    """Base parameters schema for MCP tools.

    Attributes are snake_case; the advertised and accepted names are the
    camelCase aliases the LearningSuite API uses. Unknown keys are dropped.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


def _simplify_schema(node: Dict[str, Any]) -> Dict[str, Any]:
    """Strip pydantic artefacts that add nothing for tool callers.

    Optional fields are rendered as their concrete type instead of an
    ``anyOf`` with ``null``; titles, ``null`` defaults and open
    ``additionalProperties`` markers are removed.
    """
    variants = node.get("anyOf")
    if variants is not None:
        concrete = [variant for variant in variants if variant.get("type") != "null"]
        if len(concrete) == 1:
            rest = {key: value for key, value in node.items() if key != "anyOf"}
            node = {**concrete[0], **rest}

    simplified: Dict[str, Any] = {}
    for key, value in node.items():
        if key == "title" or (key == "default" and value is None):
            continue
        if key == "additionalProperties" and value is True:
            continue
        if key == "properties":
            value = {name: _simplify_schema(prop) for name, prop in value.items()}
        elif key == "items" and isinstance(value, dict):
            value = _simplify_schema(value)
        elif key == "anyOf":
            value = [_simplify_schema(variant) for variant in value]
        simplified[key] = value
    return simplified


@dataclass(frozen=True)
class ToolDefinition:
    """Description of a tool that can be registered with the server.

    Attributes:
        name: Unique name of the tool.
        description: Human-readable description of the tool purpose.
        parameters_model: Pydantic model used to validate input parameters.
        handler: Coroutine function receiving the validated, wire-named
            arguments and returning the decoded API payload.
    """

    name: str
    description: str
    parameters_model: type[ToolParameters]
    handler: ToolHandler

    def validate(self, parameters: Dict[str, Any]) -> Dict[str, Any]:
        """Validate incoming tool parameters.

        Arguments are checked locally, so a call with a missing required field
        or a mistyped value is rejected before any HTTP request is made.

        Args:
            parameters: Input parameters provided for the tool.

        Raises:
            InvalidArgumentsError: If parameter validation fails.

        Returns:
            Argument map keyed by alias, without fields that were left unset.
        """
        try:
            model = self.parameters_model.model_validate(parameters)
        except ValidationError as error:
            details = "; ".join(
                f"{'.'.join(str(part) for part in issue['loc']) or '<root>'}: "
                f"{issue['msg']}"
                for issue in error.errors()
            )
            raise InvalidArgumentsError(self.name, details) from error
        dumped = model.model_dump(mode="json", by_alias=True)
        return {key: value for key, value in dumped.items() if value is not None}

    def input_schema(self) -> Dict[str, Any]:
        """JSON schema advertised to MCP hosts for this tool."""
        schema = _simplify_schema(self.parameters_model.model_json_schema())
        schema.pop("description", None)
        schema.setdefault("properties", {})
        schema.setdefault("required", [])
        return schema

    def metadata(self) -> Dict[str, Any]:
        """Return a discovery-friendly description of the tool."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }
