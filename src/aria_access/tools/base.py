"""Declarative tool definitions.

Every ARIA tool is the same three steps: validate arguments, make one
request, turn the JSON into text. A tool is therefore described, not
written. Each domain module lists ToolSpec entries naming

- the parameters (which become the MCP input schema and a pydantic model),
- the remote call (a gateway request type plus its fields, or a REST path
  plus its query parameters),
- how to render the result (a list, a single record, or a write outcome).

ToolSpec.run() is the error boundary. Whatever goes wrong, the caller gets
a text message back, never an exception.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, ValidationError, create_model

from aria_access.aria_client import AriaClient, AriaError, get_client
from aria_access.envelope import wrap_envelope
from aria_access.tools.records import Column, Record, is_blank, render_block

logger = logging.getLogger(__name__)

# JSON schema type -> Python annotation used for argument validation
_PYTHON_TYPES: dict[str, Any] = {
    "string": str,
    "number": Union[int, float],
    "boolean": bool,
    "array": list[dict[str, Any]],
}


@dataclass(frozen=True)
class Param:
    """One tool parameter.

    ``default`` is used when the caller leaves the parameter out (or sends
    null). It may be a zero-argument callable for values computed per call,
    such as today's date.
    """

    name: str
    type: str
    description: str
    required: bool = False
    default: Any = None
    items: dict[str, Any] | None = None

    def json_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.type, "description": self.description}
        if self.items is not None:
            schema["items"] = self.items
        if self.default is not None and not callable(self.default):
            schema["default"] = self.default
        return schema

    def resolve(self, value: Any) -> Any:
        if value is not None:
            return value
        return self.default() if callable(self.default) else self.default


@dataclass(frozen=True)
class Arg:
    """Field source: the (defaulted) value of the named parameter."""

    name: str


@dataclass(frozen=True)
class Computed:
    """Field source: a function of all resolved arguments."""

    func: Callable[[dict[str, Any]], Any]


def resolve_fields(fields: Mapping[str, Any], args: dict[str, Any]) -> dict[str, Any]:
    """Turn a field table into concrete values. Plain values pass through."""
    resolved: dict[str, Any] = {}
    for key, source in fields.items():
        if isinstance(source, Arg):
            resolved[key] = args[source.name]
        elif isinstance(source, Computed):
            resolved[key] = source.func(args)
        else:
            resolved[key] = source
    return resolved


# --- Renderers ---


def rejection(result: Any) -> str | None:
    """Error text when ARIA answered ``{"success": false, ...}``, else None."""
    record = Record(result)
    if record.get("success") is not False:
        return None
    return record.get("errormessage") or "Unknown error"


@dataclass(frozen=True)
class ListResult:
    """Render an array of records as ``Found N ...`` plus one block each."""

    header: str
    empty: str
    columns: tuple[Column, ...]

    def render(self, result: Any, args: dict[str, Any]) -> str:
        if not result:
            return self.empty
        records = result if isinstance(result, list) else [result]
        blocks = "\n".join(render_block(record, self.columns) for record in records)
        return f"{self.header.format(count=len(records))}\n{blocks}"


@dataclass(frozen=True)
class RecordResult:
    """Render a single record under a title."""

    title: str
    empty: str
    columns: tuple[Column, ...]

    def render(self, result: Any, args: dict[str, Any]) -> str:
        if not result:
            return self.empty
        record = result[0] if isinstance(result, list) else result
        return f"{self.title}\n{render_block(record, self.columns)}"


@dataclass(frozen=True)
class WriteResult:
    """Render the outcome of a create/update/acknowledge request.

    ARIA reports a rejected write as ``{"success": false, "errorMessage":
    ...}``. Any other object or array counts as success, as does a truthy
    scalar. The success message is formatted with the resolved arguments.
    """

    success: str
    action: str

    def render(self, result: Any, args: dict[str, Any]) -> str:
        answered = isinstance(result, (Mapping, list)) or bool(result)
        message = rejection(result)
        if answered and message is None:
            return self.success.format_map(args)
        return f"Failed to {self.action}: {message or 'Unknown error'}"


Renderer = Union[ListResult, RecordResult, WriteResult]


def render_answer(
    renderer: Renderer,
    result: Any,
    args: dict[str, Any],
    error_prefix: str,
) -> str:
    """Render ``result``, reporting a rejected read as ``<prefix>: <message>``."""
    if not isinstance(renderer, WriteResult):
        message = rejection(result)
        if message is not None:
            return f"{error_prefix}: {message}"
    return renderer.render(result, args)


# --- Tool specs ---


@dataclass(frozen=True, kw_only=True)
class ToolSpec:
    """Base tool: parameters, validation and the error boundary."""

    name: str
    description: str
    params: tuple[Param, ...] = ()
    error_prefix: str

    @cached_property
    def args_model(self) -> type[BaseModel]:
        """Pydantic model validating this tool's arguments."""
        definitions: dict[str, Any] = {}
        for param in self.params:
            annotation = _PYTHON_TYPES[param.type]
            if param.required:
                definitions[param.name] = (annotation, Field(..., description=param.description))
            else:
                definitions[param.name] = (
                    Optional[annotation],
                    Field(None, description=param.description),
                )
        model_name = "".join(part.capitalize() for part in self.name.split("-")) + "Args"
        return create_model(model_name, **definitions)

    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {param.name: param.json_schema() for param in self.params},
            "required": [param.name for param in self.params if param.required],
        }

    def parse_args(self, arguments: Mapping[str, Any] | None) -> dict[str, Any]:
        """Validate raw arguments and apply parameter defaults.

        Raises:
            pydantic.ValidationError: If a required parameter is missing or
                a value has the wrong type.
        """
        validated = self.args_model.model_validate(dict(arguments or {}))
        values = validated.model_dump()
        return {param.name: param.resolve(values.get(param.name)) for param in self.params}

    async def run(
        self,
        arguments: Mapping[str, Any] | None = None,
        client: AriaClient | None = None,
    ) -> str:
        """Execute the tool and return its text output. Never raises."""
        try:
            args = self.parse_args(arguments)
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in exc.errors()
            )
            return f"Invalid arguments for {self.name}: {problems}"

        if client is None:
            client = get_client()

        try:
            return await self.invoke(client, args)
        except AriaError as exc:
            logger.warning("Tool %s failed: %s", self.name, exc)
            return f"{self.error_prefix}: {exc}"
        except Exception as exc:  # noqa: BLE001
            logger.exception("Tool %s raised unexpectedly", self.name)
            return f"{self.error_prefix}: {exc or type(exc).__name__}"

    async def invoke(self, client: AriaClient, args: dict[str, Any]) -> str:
        raise NotImplementedError


@dataclass(frozen=True, kw_only=True)
class GatewayTool(ToolSpec):
    """Tool backed by one request type on the gateway endpoint."""

    request_type: str
    fields: Mapping[str, Any] = field(default_factory=dict)
    result: Renderer

    def build_request(self, args: dict[str, Any]) -> dict[str, Any]:
        return wrap_envelope(self.request_type, resolve_fields(self.fields, args))

    async def invoke(self, client: AriaClient, args: dict[str, Any]) -> str:
        data = await client.process(self.build_request(args))
        return render_answer(self.result, data, args, self.error_prefix)


@dataclass(frozen=True, kw_only=True)
class RestTool(ToolSpec):
    """Tool backed by a plain GET on a REST resource.

    Query parameters whose value is blank are left out of the URL.
    """

    path: str
    query: Mapping[str, Any] = field(default_factory=dict)
    result: Renderer

    def build_query(self, args: dict[str, Any]) -> dict[str, Any]:
        resolved = resolve_fields(self.query, args)
        return {key: value for key, value in resolved.items() if not is_blank(value)}

    async def invoke(self, client: AriaClient, args: dict[str, Any]) -> str:
        data = await client.get(self.path, params=self.build_query(args))
        return render_answer(self.result, data, args, self.error_prefix)
