"""
Form Session.

The headless part of a form builder: holds a schema, its UI schema
and the data being edited, revalidates on every change and gates
submission on a clean validation result.
"""

import json
import logging
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError

from json_flow.generator import generate_ui_schema
from json_flow.models.form_state import FormError, FormState
from json_flow.models.schema_node import SchemaNode, as_schema
from json_flow.models.ui_schema import Layout
from json_flow.templates import get_template
from json_flow.utils.paths import scope_to_key, set_value_by_path
from json_flow.validator import validate_form

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[dict[str, Any]], None]
ValidateCallback = Callable[[bool, list[FormError]], None]
SubmitCallback = Callable[[dict[str, Any]], None]


class SchemaParseError(ValueError):
    """Schema or UI schema text could not be parsed."""


def _parse_schema_text(text: str) -> SchemaNode:
    try:
        return SchemaNode.model_validate(json.loads(text))
    except json.JSONDecodeError as e:
        raise SchemaParseError(f"Invalid JSON: {e}") from e
    except ValidationError as e:
        raise SchemaParseError(f"Invalid schema: {e}") from e


def _parse_ui_schema_text(text: str) -> Layout:
    try:
        return Layout.model_validate(json.loads(text))
    except json.JSONDecodeError as e:
        raise SchemaParseError(f"Invalid JSON: {e}") from e
    except ValidationError as e:
        raise SchemaParseError(f"Invalid UI schema: {e}") from e


class FormSession:
    """
    A single form being edited.

    Usage:
        session = FormSession.from_schema(schema, on_submit=save)

        session.set_value("person.name", "Ada")
        state = session.submit()
        if not state.valid:
            print(state.to_error_dict())
    """

    def __init__(
        self,
        schema: SchemaNode | Mapping[str, Any],
        ui_schema: Layout,
        initial_data: Mapping[str, Any] | None = None,
        on_change: ChangeCallback | None = None,
        on_validate: ValidateCallback | None = None,
        on_submit: SubmitCallback | None = None,
    ):
        """
        Initialize the session.

        Args:
            schema: JSON Schema of the form.
            ui_schema: Layout used to render the form.
            initial_data: Data restored by reset().
            on_change: Called with the new data after every change.
            on_validate: Called with (valid, errors) after every validation.
            on_submit: Called with the data when a submit passes validation.
        """
        self.schema = as_schema(schema)
        self.ui_schema = ui_schema
        self.initial_data: dict[str, Any] = dict(initial_data or {})
        self.data: dict[str, Any] = dict(self.initial_data)
        self.on_change = on_change
        self.on_validate = on_validate
        self.on_submit = on_submit
        self._errors: list[FormError] = validate_form(self.data, self.schema)

    @classmethod
    def from_schema(
        cls,
        schema: SchemaNode | Mapping[str, Any],
        initial_data: Mapping[str, Any] | None = None,
        **callbacks: Any,
    ) -> "FormSession":
        """Create a session with a generated UI schema."""
        return cls(schema, generate_ui_schema(schema), initial_data, **callbacks)

    @classmethod
    def from_template(cls, name: str, **callbacks: Any) -> "FormSession":
        """Create a session from a built-in template."""
        return cls.from_schema(get_template(name), **callbacks)

    @property
    def errors(self) -> list[FormError]:
        return list(self._errors)

    @property
    def state(self) -> FormState:
        """Current data and validation errors."""
        return FormState(data=self.data, errors=self._errors, valid=not self._errors)

    def is_required(self, key: str) -> bool:
        """Whether a top-level key is listed as required."""
        return key in (self.schema.required or [])

    def error_for(self, scope: str) -> FormError | None:
        """First error for the control bound to ``scope``."""
        key = scope_to_key(scope)
        if not key:
            return None
        return self.state.first_error(key)

    def load_schema_text(self, schema_text: str) -> None:
        """
        Replace the schema from JSON text and regenerate the UI schema.

        Raises:
            SchemaParseError: If the text is not a valid schema. The
                session is left unchanged.
        """
        schema = _parse_schema_text(schema_text)
        self._replace(schema, generate_ui_schema(schema))

    def apply_changes(self, schema_text: str, ui_schema_text: str) -> None:
        """
        Replace both the schema and the UI schema from JSON text.

        Raises:
            SchemaParseError: If either text does not parse. The session
                is left unchanged.
        """
        schema = _parse_schema_text(schema_text)
        ui_schema = _parse_ui_schema_text(ui_schema_text)
        self._replace(schema, ui_schema)

    def load_template(self, name: str) -> None:
        """
        Replace the schema with a built-in template.

        Raises:
            KeyError: If the template does not exist.
        """
        schema = as_schema(get_template(name))
        self._replace(schema, generate_ui_schema(schema))
        logger.info(f"Loaded template '{name}'")

    def set_value(self, path: str, value: Any) -> FormState:
        """Write ``value`` at a dotted path and revalidate."""
        self.data = set_value_by_path(self.data, path, value)
        if self.on_change is not None:
            self.on_change(self.data)
        self._revalidate()
        return self.state

    def reset(self) -> FormState:
        """Restore the initial data."""
        self.data = dict(self.initial_data)
        self._revalidate()
        return self.state

    def submit(self) -> FormState:
        """
        Validate and, when the data is valid, hand it to ``on_submit``.

        Returns:
            The FormState the submission was decided on.
        """
        self._revalidate()
        state = self.state
        if not state.valid:
            logger.info(f"Submission blocked by {state.error_count} error(s)")
            return state
        if self.on_submit is not None:
            self.on_submit(self.data)
        return state

    def _replace(self, schema: SchemaNode, ui_schema: Layout) -> None:
        # validate before swapping so a bad pattern leaves the session as it was
        validate_form(self.data, schema)
        self.schema = schema
        self.ui_schema = ui_schema
        self._revalidate()

    def _revalidate(self) -> None:
        self._errors = validate_form(self.data, self.schema)
        if self.on_validate is not None:
            self.on_validate(not self._errors, list(self._errors))
