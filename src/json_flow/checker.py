"""
Structural checks for schema documents.

Reports problems in a hand-edited schema before it is used for
generation or validation. Works on plain dicts so that documents the
SchemaNode model would reject can still be diagnosed.
"""

import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from json_flow.models.schema_node import SCHEMA_TYPES
from json_flow.utils.paths import join_path


class SchemaCheckResult(BaseModel):
    """Result of schema structure checking."""

    is_valid: bool = Field(..., description="Whether the schema is usable")
    errors: list[str] = Field(default_factory=list, description="List of structural errors")
    warnings: list[str] = Field(default_factory=list, description="List of warnings")


def _check_node(node: Mapping[str, Any], path: str, errors: list[str], warnings: list[str]) -> None:
    """Check one property definition and its descendants."""
    name = path or "<root>"
    node_type = node.get("type")

    if node_type is None:
        warnings.append(f"Property '{name}' has no type defined")
    elif not isinstance(node_type, str) or node_type not in SCHEMA_TYPES:
        errors.append(f"Property '{name}' has invalid type: {node_type}")

    properties = node.get("properties")
    if properties is not None:
        if node_type != "object":
            errors.append(f"Property '{name}' has properties but is not an object")
        if not isinstance(properties, Mapping):
            errors.append(f"'properties' of '{name}' must be an object")
            properties = None
    elif node_type == "object" and path:
        warnings.append(f"Object property '{name}' has no properties")

    items = node.get("items")
    if items is not None and node_type != "array":
        errors.append(f"Property '{name}' has items but is not an array")
    elif items is None and node_type == "array":
        warnings.append(f"Array property '{name}' has no items")

    enum_names = node.get("enumNames")
    if isinstance(enum_names, list) and len(enum_names) != len(node.get("enum") or []):
        errors.append(f"Property '{name}' has enumNames not aligned with enum")

    pattern = node.get("pattern")
    if isinstance(pattern, str):
        try:
            re.compile(pattern)
        except re.error as e:
            errors.append(f"Property '{name}' has invalid pattern: {e}")

    for key, child in (properties or {}).items():
        child_path = join_path(path, key)
        if not isinstance(child, Mapping):
            errors.append(f"Property '{child_path}' must be an object")
            continue
        _check_node(child, child_path, errors, warnings)

    if isinstance(items, Mapping):
        _check_node(items, f"{name}[]", errors, warnings)


def check_schema(schema: Mapping[str, Any]) -> SchemaCheckResult:
    """
    Check a schema document for structural problems.

    Checks:
    1. Root is an object schema with properties
    2. Every type is a supported one
    3. properties only on objects, items only on arrays
    4. enumNames aligned with enum
    5. Required keys declared in properties
    6. Patterns compile
    """
    errors: list[str] = []
    warnings: list[str] = []

    if not isinstance(schema, Mapping):
        return SchemaCheckResult(is_valid=False, errors=["Schema must be an object"])

    if schema.get("type") != "object":
        errors.append("Root schema type must be 'object'")

    properties = schema.get("properties")
    if properties is None or (isinstance(properties, Mapping) and len(properties) == 0):
        warnings.append("Schema has no properties defined")

    _check_node(schema, "", errors, warnings)

    required = schema.get("required")
    if required is not None:
        if not isinstance(required, list):
            errors.append("'required' must be an array")
        else:
            declared = properties if isinstance(properties, Mapping) else {}
            for req_field in required:
                if req_field not in declared:
                    errors.append(f"Required field '{req_field}' not in properties")

    return SchemaCheckResult(
        is_valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )
