"""
MCP Tool definitions for JSON Flow.

Wraps UI schema generation, validation and the helpers as MCP tools.
Handlers take the tool arguments and return JSON-serializable dicts.
"""

import logging
from typing import Any, Callable

from json_flow.checker import check_schema
from json_flow.generator import generate_ui_schema
from json_flow.templates import get_template, list_templates
from json_flow.utils.naming import format_property_name
from json_flow.validator import validate

logger = logging.getLogger("json-flow-mcp")

_SCHEMA_ARGUMENT = {
    "type": "object",
    "description": "JSON Schema document with type 'object' and properties",
}


def tool_generate_ui_schema(schema: dict[str, Any]) -> dict[str, Any]:
    """Generate the default UI schema for a JSON Schema."""
    return generate_ui_schema(schema).to_dict()


def tool_validate_form(schema: dict[str, Any], data: dict[str, Any] | None = None) -> dict[str, Any]:
    """Validate form data and report errors per path."""
    state = validate(data or {}, schema)
    return {
        "valid": state.valid,
        "errors": [error.model_dump() for error in state.errors],
    }


def tool_format_property_name(name: str) -> dict[str, Any]:
    """Format a property key as a label."""
    return {"name": name, "label": format_property_name(name)}


def tool_check_schema(schema: dict[str, Any]) -> dict[str, Any]:
    """Report structural problems of a schema."""
    return check_schema(schema).model_dump()


def tool_get_template(name: str | None = None) -> dict[str, Any]:
    """Return a template schema with its UI schema, or the template names."""
    if name is None:
        return {"templates": list_templates()}
    schema = get_template(name)
    return {
        "name": name,
        "schema": schema,
        "uiSchema": generate_ui_schema(schema).to_dict(),
    }


TOOL_HANDLERS: dict[str, Callable[..., dict[str, Any]]] = {
    "generate_ui_schema": tool_generate_ui_schema,
    "validate_form": tool_validate_form,
    "format_property_name": tool_format_property_name,
    "check_schema": tool_check_schema,
    "get_template": tool_get_template,
}


def call_tool(name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    """
    Dispatch a tool call.

    Failures are returned as ``{"error": message}`` rather than raised.
    """
    handler = TOOL_HANDLERS.get(name)
    if handler is None:
        return {"error": f"Unknown tool: {name}"}

    try:
        return handler(**arguments)
    except Exception as e:
        logger.error(f"Error in {name}: {type(e).__name__}: {e}")
        return {"error": str(e)}


def get_mcp_tools() -> list[dict]:
    """
    Get MCP tool definitions for registration with MCP server.

    Returns list of tool schemas compatible with MCP protocol.
    """
    return [
        {
            "name": "generate_ui_schema",
            "description": """
Generate a default UI schema (layout + controls) from a JSON Schema.

Each leaf property becomes a Control bound by scope "#/properties/<path>".
Nested objects become labeled Groups. Options carry rendering hints:
rows for textareas, format "radio" for short enums, showAsStar for 1-5 integers.
""".strip(),
            "inputSchema": {
                "type": "object",
                "properties": {"schema": _SCHEMA_ARGUMENT},
                "required": ["schema"],
            },
        },
        {
            "name": "validate_form",
            "description": """
Validate form data against a JSON Schema.

Returns {"valid": bool, "errors": [{"path", "message"}]}. Paths are dotted
("person.name") with array indices as "tags[0]".
""".strip(),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "schema": _SCHEMA_ARGUMENT,
                    "data": {
                        "type": "object",
                        "description": "Form data to validate",
                    },
                },
                "required": ["schema", "data"],
            },
        },
        {
            "name": "format_property_name",
            "description": "Turn a camelCase, snake_case or dotted property name into a Title Case label.",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "name": {"type": "string", "description": "Property key, e.g. firstName"},
                },
                "required": ["name"],
            },
        },
        {
            "name": "check_schema",
            "description": "Report structural errors and warnings of a JSON Schema document.",
            "inputSchema": {
                "type": "object",
                "properties": {"schema": _SCHEMA_ARGUMENT},
                "required": ["schema"],
            },
        },
        {
            "name": "get_template",
            "description": "Get a built-in form template with its generated UI schema. Omit name to list templates.",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "name": {
                        "type": "string",
                        "enum": list_templates(),
                        "description": "Template name",
                    },
                },
            },
        },
    ]
