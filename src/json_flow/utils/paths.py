"""
Path helpers.

Conversions between dotted data paths (``person.name``), scope strings
(``#/properties/person.name``) and nested mapping traversal. All
functions are pure; data passed in is never modified.
"""

import re
from collections.abc import Mapping
from typing import Any

from json_flow.models.schema_node import SchemaNode, as_schema

SCOPE_PREFIX = "#/properties/"

_SEGMENT_SEPARATORS = re.compile(r"[./]")


def scope_to_key(scope: str | None) -> str:
    """
    Strip the ``#/properties/`` prefix from a scope string.

    Returns an empty string when the prefix is absent, meaning the
    element has no bound property.
    """
    if not scope or not scope.startswith(SCOPE_PREFIX):
        return ""
    return scope[len(SCOPE_PREFIX):]


def key_to_scope(key: str) -> str:
    """Build the scope string for a property key or dotted path."""
    return f"{SCOPE_PREFIX}{key}"


def join_path(parent: str, child: str) -> str:
    """Join a child key onto a dotted parent path."""
    if not parent:
        return child
    return f"{parent}.{child}"


def resolve_property(
    schema: SchemaNode | Mapping[str, Any],
    path: str,
) -> SchemaNode | None:
    """
    Find the schema node addressed by a dotted or slash-separated path.

    Only object nesting is descended; array ``items`` are not traversed.
    Both ``.`` and ``/`` separate segments, so a property key that itself
    contains a dot cannot be resolved.

    Example:
        >>> resolve_property(schema, "person/name")
        >>> resolve_property(schema, "person.name")
    """
    if not path:
        return None

    node: SchemaNode | None = as_schema(schema)
    for segment in _SEGMENT_SEPARATORS.split(path):
        if node is None or not node.properties or segment not in node.properties:
            return None
        node = node.properties[segment]
    return node


def get_value_by_path(data: Mapping[str, Any] | None, path: str) -> Any:
    """Read the value at a dotted path, or None if any hop is missing."""
    current: Any = data
    for part in path.split("."):
        if not isinstance(current, Mapping):
            return None
        current = current.get(part)
    return current


def set_value_by_path(data: Mapping[str, Any] | None, path: str, value: Any) -> dict[str, Any]:
    """
    Return a copy of ``data`` with ``value`` written at a dotted path.

    Intermediate mappings are copied, or created when missing or not a
    mapping. The input is left untouched.
    """
    head, _, rest = path.partition(".")
    result = dict(data or {})
    if not rest:
        result[head] = value
        return result

    child = result.get(head)
    result[head] = set_value_by_path(child if isinstance(child, Mapping) else None, rest, value)
    return result
