"""
Form data validation.

Validates a data object against the constraint keywords of a JSON
Schema and returns path-addressed errors. Errors are values: nothing
is raised for invalid data. A ``pattern`` that is not a legal regular
expression raises ``re.error``.
"""

import logging
from collections.abc import Mapping
from typing import Any

from json_flow.models.form_state import FormError, FormState
from json_flow.models.schema_node import SchemaNode, as_schema
from json_flow.rules import check_constraints
from json_flow.utils.naming import format_property_name
from json_flow.walker import iter_children

logger = logging.getLogger(__name__)


def _child_value(value: Any, key: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(key)
    return None


def _validate_value(value: Any, node: SchemaNode, path: str, errors: list[FormError]) -> None:
    """Check one value and recurse into nested objects and arrays."""
    if value is None:
        return

    for message in check_constraints(value, node):
        errors.append(FormError(path=path, message=message))

    if node.is_group:
        for key, child, child_path in iter_children(node, path):
            _validate_value(_child_value(value, key), child, child_path, errors)

    if node.type == "array" and node.items is not None and isinstance(value, list):
        for index, item in enumerate(value):
            _validate_value(item, node.items, f"{path}[{index}]", errors)


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def validate_form(
    data: Mapping[str, Any] | None,
    schema: SchemaNode | Mapping[str, Any],
) -> list[FormError]:
    """
    Validate ``data`` against ``schema``.

    Per-property errors come first, in declaration order, followed by
    one error per missing top-level required key, in ``required`` order.
    Required lists of nested objects are not enforced.

    Args:
        data: Form data, nested like the schema. Not modified.
        schema: Root schema as a SchemaNode or plain dict.

    Returns:
        Ordered list of FormError, empty when the data is valid.

    Example:
        >>> validate_form({}, {
        ...     "type": "object",
        ...     "properties": {"name": {"type": "string"}},
        ...     "required": ["name"],
        ... })
        [FormError(path='name', message='Name is required')]
    """
    root = as_schema(schema)
    data = data or {}
    errors: list[FormError] = []

    for key, node, path in iter_children(root):
        _validate_value(data.get(key), node, path, errors)

    for key in root.required or []:
        if _is_empty(data.get(key)):
            errors.append(FormError(path=key, message=f"{format_property_name(key)} is required"))

    logger.debug(f"Validation finished with {len(errors)} error(s)")
    return errors


def validate(
    data: Mapping[str, Any] | None,
    schema: SchemaNode | Mapping[str, Any],
) -> FormState:
    """Validate ``data`` and wrap the result in a FormState."""
    errors = validate_form(data, schema)
    return FormState(data=dict(data or {}), errors=errors, valid=not errors)
