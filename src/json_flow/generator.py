"""
UI Schema generation.

Derives a default UI schema from a JSON Schema: one control per leaf
property, one labeled group per nested object, all inside a root
vertical layout.
"""

import logging
from collections.abc import Mapping
from typing import Any

from json_flow.models.schema_node import SchemaNode, as_schema
from json_flow.models.ui_schema import Control, Layout, UiNode, UiSchema
from json_flow.utils.naming import format_property_name
from json_flow.utils.paths import key_to_scope
from json_flow.walker import SchemaVisitor, walk

logger = logging.getLogger(__name__)

TEXTAREA_ROWS = 5
RADIO_ENUM_BOUNDS = (3, 7)
STAR_RATING_RANGE = (1, 5)


def create_options(node: SchemaNode) -> dict[str, Any]:
    """
    Pick rendering hints for a leaf property.

    - textarea format gets 5 rows
    - an enum with 4 to 6 values renders as radio buttons
    - an integer ranging 1..5 renders as a star rating
    """
    options: dict[str, Any] = {}

    if node.format == "textarea":
        options["rows"] = TEXTAREA_ROWS

    low, high = RADIO_ENUM_BOUNDS
    if node.enum is not None and low < len(node.enum) < high:
        options["format"] = "radio"

    if node.type == "integer" and (node.minimum, node.maximum) == STAR_RATING_RANGE:
        options["showAsStar"] = True

    return options


class _UiSchemaBuilder(SchemaVisitor[UiNode]):
    """Builds controls and groups while the walker descends."""

    def visit_property(self, key: str, node: SchemaNode, path: str) -> UiNode:
        label = node.title or format_property_name(path)
        if node.type == "array" and node.items is not None:
            return Control(scope=key_to_scope(path), label=label)
        return Control(scope=key_to_scope(path), label=label, options=create_options(node))

    def visit_group(self, key: str, node: SchemaNode, path: str, children: list[UiNode]) -> UiNode:
        return Layout(
            type="Group",
            label=node.title or format_property_name(path),
            elements=children,
        )


def generate_ui_schema(schema: SchemaNode | Mapping[str, Any]) -> UiSchema:
    """
    Generate a default UI schema for ``schema``.

    A schema without properties yields an empty vertical layout.

    Example:
        >>> ui = generate_ui_schema({
        ...     "type": "object",
        ...     "properties": {"email": {"type": "string", "format": "email"}},
        ... })
        >>> ui.to_dict()
        {'type': 'VerticalLayout', 'elements': [{'type': 'Control', 'scope': '#/properties/email', 'label': 'Email', 'options': {}}]}
    """
    root = as_schema(schema)
    elements = walk(root, _UiSchemaBuilder())
    logger.debug(f"Generated UI schema with {len(elements)} top-level elements")
    return UiSchema(elements=elements)
