"""Translate route documentation into an OpenAPI 3.0 document."""

import logging
import re

from openapi_pydantic.v3.v3_0 import OpenAPI

from filter_docs.config import DocumentSettings
from filter_docs.document.route import (
    DocumentedBody,
    DocumentedParameter,
    DocumentedResponse,
    RouteDocumentation,
)
from filter_docs.document.types import ArrayType, ObjectType, PrimitiveKind, TypeDescription

logger = logging.getLogger(__name__)

OPENAPI_VERSION = "3.0.0"

SCALAR_TYPES = {
    PrimitiveKind.BOOLEAN: "boolean",
    PrimitiveKind.FLOAT: "number",
    PrimitiveKind.INTEGER: "integer",
    PrimitiveKind.STRING: "string",
}

PLACEHOLDER = re.compile(r"\{(\d+)\}")

STRING_SCHEMA = {"type": "string"}


def to_openapi(routes: list[RouteDocumentation], settings: DocumentSettings | None = None) -> OpenAPI:
    """Build an OpenAPI document with one operation per route."""
    settings = settings or DocumentSettings()
    paths: dict[str, dict] = {}

    for route in routes:
        path = rename_placeholders(route.path, route.parameters)
        slot = (route.method or settings.default_method).value.lower()
        item = paths.setdefault(path, {})
        if slot in item:
            logger.warning("Replacing %s operation for %s", slot.upper(), path)
        item[slot] = _operation(route, settings)

    info = {"title": settings.title, "version": settings.version}
    if settings.description is not None:
        info["description"] = settings.description

    return OpenAPI.model_validate({"openapi": OPENAPI_VERSION, "info": info, "paths": paths})


def rename_placeholders(path: str, parameters: tuple[DocumentedParameter, ...]) -> str:
    """Replace positional `{i}` placeholders with `{name}` of parameter i."""

    def _name(match: re.Match) -> str:
        index = int(match.group(1))
        if index < len(parameters):
            return "{" + parameters[index].name + "}"
        return match.group(0)

    return PLACEHOLDER.sub(_name, path)


def render_type(t: TypeDescription) -> dict:
    """Render a TypeDescription as an OpenAPI schema object."""
    if isinstance(t, ArrayType):
        return {"type": "array", "items": render_type(t.element)}
    if isinstance(t, ObjectType):
        return {
            "type": "object",
            "properties": {name: render_type(field) for name, field in t.properties.items()},
        }
    schema = {"type": SCALAR_TYPES[t.primitive], "nullable": not t.required}
    if t.description is not None:
        schema["description"] = t.description
    return schema


def _operation(route: RouteDocumentation, settings: DocumentSettings) -> dict:
    parameters = [
        _parameter(p.name, "path", True, render_type(p.parameter_type), p.description)
        for p in route.parameters
    ]
    parameters += [
        _parameter(h.name, "header", h.required, STRING_SCHEMA, h.description)
        for h in route.headers
    ]
    parameters += [
        _parameter(q.name, "query", q.required, render_type(q.parameter_type), q.description)
        for q in route.queries
    ]
    parameters += [
        _parameter(c.name, "cookie", c.required, STRING_SCHEMA, c.description)
        for c in route.cookies
    ]

    operation = {
        "parameters": parameters,
        "responses": {
            str(status): _response(route.responses[status], settings)
            for status in sorted(route.responses)
        },
    }
    if route.body:
        operation["requestBody"] = {
            "content": _content(route.body, settings),
            "required": any(b.required for b in route.body),
        }
    return operation


def _parameter(name: str, location: str, required: bool, schema: dict, description: str | None) -> dict:
    parameter = {
        "name": name,
        "in": location,
        "required": required,
        "deprecated": False,
        "schema": dict(schema),
    }
    if description is not None:
        parameter["description"] = description
    return parameter


def _response(response: DocumentedResponse, settings: DocumentSettings) -> dict:
    rendered = {"description": response.description}
    if response.headers:
        rendered["headers"] = {
            h.name: _response_header(h.description) for h in response.headers
        }
    if response.body:
        rendered["content"] = _content(response.body, settings)
    return rendered


def _response_header(description: str | None) -> dict:
    header = {"required": False, "schema": dict(STRING_SCHEMA)}
    if description is not None:
        header["description"] = description
    return header


def _content(bodies: tuple[DocumentedBody, ...], settings: DocumentSettings) -> dict:
    return {
        (b.mime or settings.default_mime): {"schema": render_type(b.body)}
        for b in bodies
    }
