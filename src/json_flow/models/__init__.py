"""
Data models for JSON Flow.

This module contains Pydantic models for:
- JSON Schema nodes (input)
- UI Schema layouts and controls (output)
- Validation errors and form state
"""

from json_flow.models.form_state import (
    FormError,
    FormState,
)
from json_flow.models.schema_node import (
    SCHEMA_TYPES,
    SchemaNode,
    as_schema,
)
from json_flow.models.ui_schema import (
    Control,
    Layout,
    UiNode,
    UiSchema,
)

__all__ = [
    # Schema input
    "SCHEMA_TYPES",
    "SchemaNode",
    "as_schema",
    # UI Schema output
    "Control",
    "Layout",
    "UiNode",
    "UiSchema",
    # Validation
    "FormError",
    "FormState",
]
