"""
JSON Flow: forms from JSON Schema.

Derive a default UI schema from a JSON Schema document and validate
form data against the same schema.

Simple Usage:
    from json_flow import generate_ui_schema, validate_form

    schema = {
        "type": "object",
        "properties": {
            "name": {"type": "string", "minLength": 2},
            "age": {"type": "integer", "minimum": 18, "maximum": 100},
        },
        "required": ["name"],
    }

    ui_schema = generate_ui_schema(schema).to_dict()
    errors = validate_form({"age": 17}, schema)
    # [FormError(path='age', message='Must be at least 18'),
    #  FormError(path='name', message='Name is required')]

Form Sessions:
    from json_flow import FormSession

    session = FormSession.from_template("signup", on_submit=print)
    session.set_value("username", "ada")
    state = session.submit()  # on_submit runs only when state.valid

MCP Server:
    json-flow serve --transport stdio
"""

from json_flow.checker import SchemaCheckResult, check_schema
from json_flow.generator import create_options, generate_ui_schema
from json_flow.models import (
    Control,
    FormError,
    FormState,
    Layout,
    SchemaNode,
    UiSchema,
)
from json_flow.session import FormSession, SchemaParseError
from json_flow.templates import get_template, list_templates
from json_flow.utils import (
    format_property_name,
    get_value_by_path,
    join_path,
    key_to_scope,
    resolve_property,
    scope_to_key,
    set_value_by_path,
)
from json_flow.validator import validate, validate_form

__all__ = [
    # Main interface
    "generate_ui_schema",
    "validate_form",
    "validate",
    "create_options",
    # Models
    "SchemaNode",
    "UiSchema",
    "Layout",
    "Control",
    "FormError",
    "FormState",
    # Helpers
    "format_property_name",
    "get_value_by_path",
    "join_path",
    "key_to_scope",
    "resolve_property",
    "scope_to_key",
    "set_value_by_path",
    # Schema editing
    "FormSession",
    "SchemaParseError",
    "SchemaCheckResult",
    "check_schema",
    "get_template",
    "list_templates",
]

__version__ = "0.1.0"
